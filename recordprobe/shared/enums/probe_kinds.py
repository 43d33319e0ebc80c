"""
Probe kind enumeration
"""

from enum import Enum


class ProbeKind(str, Enum):
    """Rule families a probe can target"""

    REQUIRED = "required"
    MAX_LENGTH = "max_length"
    MIN_LENGTH = "min_length"
    UNIQUENESS = "uniqueness"
    EMAIL = "email"
    IP = "ip"
    SAFE_NAME = "safe_name"

    @classmethod
    def from_string(cls, value: str) -> "ProbeKind":
        """Parse a probe kind name, case-insensitively"""
        normalized = str(value).strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        allowed = ", ".join(k.value for k in cls)
        raise ValueError(f"Unknown probe kind '{value}'. Allowed: {allowed}")
