"""
CIDR mask policy for IP address probes
"""

from enum import Enum
from typing import Union


class IpMaskPolicy(str, Enum):
    """How an IP address attribute treats a CIDR suffix"""

    ALLOW_MASK = "allow_mask"
    REQUIRE_MASK = "require_mask"
    DENY_MASK = "deny_mask"

    @property
    def accepts_masked(self) -> bool:
        return self in (IpMaskPolicy.ALLOW_MASK, IpMaskPolicy.REQUIRE_MASK)

    @property
    def accepts_unmasked(self) -> bool:
        return self in (IpMaskPolicy.ALLOW_MASK, IpMaskPolicy.DENY_MASK)

    @classmethod
    def coerce(cls, value: Union["IpMaskPolicy", str]) -> "IpMaskPolicy":
        """Accept either a policy member or its name ("deny_mask", "DENY_MASK")"""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for policy in cls:
            if policy.value == normalized:
                return policy
        allowed = ", ".join(p.value for p in cls)
        raise ValueError(f"Unknown mask policy '{value}'. Allowed: {allowed}")
