"""
Probe parameter and probe plan schemas

LengthOptions and UniquenessOptions are the immutable parameter bundles the
probes accept. ProbeSpec and ProbePlan describe a JSON probe plan run by the
command line tool.
"""

from typing import Any, Dict, List, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from recordprobe.shared.enums import IpMaskPolicy, ProbeKind

UNIQUE_FIELDS_KEY = "unique_fields"


class LengthOptions(BaseModel):
    """Framing for length probes: the payload is embedded between these"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    start_with: str = ""
    end_with: str = ""

    @field_validator("start_with", "end_with", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @property
    def framing_length(self) -> int:
        return len(self.start_with) + len(self.end_with)


class UniquenessOptions(BaseModel):
    """
    Scoping for the uniqueness probe.

    unique_fields: values applied to the duplicate before probing so that
        uniqueness rules on other attributes do not interfere.
    scopes: ordered attribute -> alternate value entries; switching a scope
        attribute to its alternate value must make the duplicate valid again.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    unique_fields: Dict[str, Any] = Field(default_factory=dict)
    scopes: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "UniquenessOptions":
        """
        Build options from a flat mapping of scope entries.

        The reserved "unique_fields" key is lifted out when it holds a mapping;
        any other value is an ordinary scope entry for an attribute that
        happens to be called unique_fields.
        """
        scopes = dict(mapping)
        unique_fields: Dict[str, Any] = {}
        if isinstance(scopes.get(UNIQUE_FIELDS_KEY), Mapping):
            unique_fields = dict(scopes.pop(UNIQUE_FIELDS_KEY))
        return cls(unique_fields=unique_fields, scopes=scopes)


class ProbeSpec(BaseModel):
    """One probe in a probe plan"""

    model_config = ConfigDict(extra="forbid")

    kind: ProbeKind
    attribute: str = Field(min_length=1)
    message: Optional[str] = None
    pattern: Optional[str] = None
    case_insensitive: Optional[bool] = None

    # length probes
    limit: Optional[int] = Field(default=None, ge=0)
    start_with: str = ""
    end_with: str = ""

    # uniqueness probe
    case_sensitive: bool = False
    unique_fields: Dict[str, Any] = Field(default_factory=dict)
    scopes: Dict[str, Any] = Field(default_factory=dict)

    # format probes
    mask: IpMaskPolicy = IpMaskPolicy.ALLOW_MASK
    length: Optional[int] = None

    @field_validator("kind", mode="before")
    @classmethod
    def _parse_kind(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ProbeKind.from_string(value)
        return value

    @field_validator("mask", mode="before")
    @classmethod
    def _parse_mask(cls, value: Any) -> Any:
        if isinstance(value, str):
            return IpMaskPolicy.coerce(value)
        return value

    @model_validator(mode="after")
    def _check_kind_parameters(self) -> "ProbeSpec":
        if self.kind in (ProbeKind.MAX_LENGTH, ProbeKind.MIN_LENGTH):
            if self.limit is None:
                raise ValueError(f"'{self.kind.value}' probes require 'limit'")
        if self.kind == ProbeKind.SAFE_NAME and self.length is not None:
            if self.length <= 2:
                raise ValueError("'safe_name' probes require 'length' greater than 2")
        return self

    def length_options(self) -> LengthOptions:
        return LengthOptions(start_with=self.start_with, end_with=self.end_with)

    def uniqueness_options(self) -> UniquenessOptions:
        return UniquenessOptions(unique_fields=self.unique_fields, scopes=self.scopes)

    def label(self) -> str:
        return f"{self.kind.value}:{self.attribute}"


class ProbePlan(BaseModel):
    """A record factory plus the probes to run against fresh records from it"""

    model_config = ConfigDict(extra="forbid")

    record: Optional[str] = Field(
        default=None, description="Record factory as 'package.module:callable'"
    )
    probes: List[ProbeSpec] = Field(min_length=1)
