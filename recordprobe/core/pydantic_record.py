"""
Pydantic record adapter

Lets a Pydantic model class be probed directly. The adapter keeps the raw
field values in a private dict, validates them with model_validate, and
groups validation error messages by the top-level field they belong to.

Rules that need outside state (uniqueness against stored rows) can read it
from the validation context passed as `context`. Each record has its own
`record_id`, available to validators under RECORD_ID_KEY in the context and
stored under the same key in the persisted row, so a rule can skip the rows
the record itself wrote:

    @field_validator("email")
    @classmethod
    def _unique(cls, value, info):
        me = info.context[RECORD_ID_KEY]
        for row in info.context["rows"]:
            if row[RECORD_ID_KEY] != me and row["email"] == value:
                raise ValueError("has already been taken")
        return value
"""

import copy
import uuid
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, cast

from pydantic import BaseModel, ValidationError

from recordprobe.shared.exceptions import OperationError, RecordContractError
from recordprobe.shared.utils.logger import get_logger

logger = get_logger(__name__)

MODEL_ERRORS_KEY = "__model__"
RECORD_ID_KEY = "__record_id__"


class PydanticRecord:
    """Adapts a Pydantic model class plus field values to the record contract"""

    def __init__(
        self,
        model_cls: Type[BaseModel],
        data: Mapping[str, Any],
        on_persist: Optional[Callable[[Dict[str, Any]], None]] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.model_cls = model_cls
        self.on_persist = on_persist
        self.context = context
        self.record_id = uuid.uuid4().hex
        self.instance: Optional[BaseModel] = None
        self._data: Dict[str, Any] = copy.deepcopy(dict(data))
        self._errors: Dict[str, List[str]] = {}

    def get(self, attribute: str) -> Any:
        return self._data.get(attribute)

    def set(self, attribute: str, value: Any) -> None:
        self._data[attribute] = value

    def validation_context(self) -> Dict[str, Any]:
        """The shared context plus this record's id"""
        return {**(self.context or {}), RECORD_ID_KEY: self.record_id}

    def is_valid(self) -> bool:
        try:
            self.instance = self.model_cls.model_validate(
                self._data, context=self.validation_context()
            )
        except ValidationError as e:
            self.instance = None
            self._errors = self._group_errors(e)
            return False
        self._errors = {}
        return True

    @staticmethod
    def _group_errors(error: ValidationError) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        for item in error.errors():
            loc = item.get("loc") or ()
            field = str(loc[0]) if loc else MODEL_ERRORS_KEY
            grouped.setdefault(field, []).append(str(item.get("msg", "")))
        return grouped

    def errors_for(self, attribute: str) -> str:
        return "; ".join(self._errors.get(attribute, []))

    @property
    def errors(self) -> Dict[str, List[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def duplicate(self) -> "PydanticRecord":
        # Shares the context: it stands for the backing store. Gets a new id.
        return PydanticRecord(self.model_cls, self._data, self.on_persist, self.context)

    def persist(self) -> None:
        if self.on_persist is None:
            raise RecordContractError(
                f"{self.model_cls.__name__} record has no persist callback",
                context={"model": self.model_cls.__name__},
            )
        if not self.is_valid():
            raise OperationError(
                f"Refusing to persist invalid {self.model_cls.__name__} record",
                context={"errors": self.errors},
            )
        instance = cast(BaseModel, self.instance)
        logger.debug(f"Persisting {self.model_cls.__name__} record")
        row = instance.model_dump()
        row[RECORD_ID_KEY] = self.record_id
        self.on_persist(row)

    def __repr__(self) -> str:
        return f"PydanticRecord({self.model_cls.__name__}, {self._data!r})"
