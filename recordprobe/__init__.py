"""
recordprobe - boundary-value probes for validatable records
"""

from recordprobe.core import (
    Asserter,
    BoundaryPair,
    DefaultAsserter,
    PersistableRecord,
    PydanticRecord,
    RecordProbeMixin,
    ValidatableRecord,
    probe_email_format,
    probe_ip_format,
    probe_max_length,
    probe_min_length,
    probe_required,
    probe_safe_name_format,
    probe_uniqueness,
)
from recordprobe.shared.enums import IpMaskPolicy, ProbeKind
from recordprobe.shared.exceptions import (
    ProbeAssertionError,
    ProbeKitException,
    ProbePreconditionError,
    RecordContractError,
)
from recordprobe.shared.schema import LengthOptions, UniquenessOptions

__version__ = "0.1.0"

__all__ = [
    "Asserter",
    "BoundaryPair",
    "DefaultAsserter",
    "IpMaskPolicy",
    "LengthOptions",
    "PersistableRecord",
    "ProbeAssertionError",
    "ProbeKind",
    "ProbeKitException",
    "ProbePreconditionError",
    "PydanticRecord",
    "RecordContractError",
    "RecordProbeMixin",
    "UniquenessOptions",
    "ValidatableRecord",
    "probe_email_format",
    "probe_ip_format",
    "probe_max_length",
    "probe_min_length",
    "probe_required",
    "probe_safe_name_format",
    "probe_uniqueness",
]
