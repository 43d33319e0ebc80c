"""
Probe configuration model

Holds the default failure-reason patterns used when a caller does not pass
one. Projects whose validation messages are localized or reworded can point
RECORDPROBE_CONFIG_PATH at a TOML file overriding them:

    case_insensitive = true

    [reasons]
    required = "must be present"
"""

import os
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .loader import load_config

DEFAULT_PROBE_CONFIG_PATH = "config/probe.toml"


class ReasonPatterns(BaseModel):
    """Default expected-reason regular expressions, one per failure class"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    required: str = "can't be blank"
    too_long: str = "is too long"
    too_short: str = "is too short"
    taken: str = "has already been taken"
    invalid_email: str = "is not a valid email address"
    invalid_ip: str = "is not a valid ip address"
    mask_required: str = "must contain a mask"
    mask_forbidden: str = "must not contain a mask"
    safe_name_start: str = "must start with a letter"
    safe_name_end: str = "must not end with an underscore"
    safe_name_chars: str = "must contain only letters, numbers, and underscore"


class ProbeConfig(BaseModel):
    """Settings consumed by the probe engine"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    case_insensitive: bool = Field(
        default=True, description="Compile string reason patterns with IGNORECASE"
    )
    default_safe_name_length: int = Field(
        default=6, gt=2, description="Token length used by safe-name probes"
    )
    reasons: ReasonPatterns = Field(default_factory=ReasonPatterns)

    @property
    def pattern_flags(self) -> int:
        return re.IGNORECASE if self.case_insensitive else 0


def get_probe_config() -> ProbeConfig:
    """
    Resolve the active probe configuration.

    A config registered under "probe" wins; otherwise the file at
    RECORDPROBE_CONFIG_PATH (or config/probe.toml) is loaded, falling back to
    the defaults when it does not exist. The resolved config is registered
    under "probe", so later calls reuse it without touching the file again.
    """
    from . import get_typed_config, register_config

    registered: Optional[ProbeConfig] = get_typed_config("probe", ProbeConfig)
    if registered is not None:
        return registered

    env_path = os.getenv("RECORDPROBE_CONFIG_PATH")
    path = env_path or DEFAULT_PROBE_CONFIG_PATH
    if not os.path.isfile(path):
        # An explicitly configured path that is missing deserves a warning
        if env_path:
            print(f"Warning: probe config {path} not found; using defaults")
        config = ProbeConfig()
    else:
        config = load_config(path, ProbeConfig)
    register_config("probe", config)
    return config
