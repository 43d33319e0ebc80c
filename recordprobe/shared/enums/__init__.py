from .mask_policy import IpMaskPolicy
from .probe_kinds import ProbeKind

__all__ = ["IpMaskPolicy", "ProbeKind"]
