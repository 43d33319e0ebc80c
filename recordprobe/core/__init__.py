"""
Probe engine

One module per rule family, all built on ProbeRunner.
"""

from .assertions import Asserter, DefaultAsserter
from .boundaries import BoundaryPair
from .formats import probe_email_format, probe_ip_format, probe_safe_name_format
from .length import probe_max_length, probe_min_length
from .presence import probe_required
from .pydantic_record import PydanticRecord
from .record import PersistableRecord, ValidatableRecord
from .runner import ProbeRunner
from .testcase import RecordProbeMixin
from .uniqueness import probe_uniqueness

__all__ = [
    "Asserter",
    "BoundaryPair",
    "DefaultAsserter",
    "PersistableRecord",
    "ProbeRunner",
    "PydanticRecord",
    "RecordProbeMixin",
    "ValidatableRecord",
    "probe_email_format",
    "probe_ip_format",
    "probe_max_length",
    "probe_min_length",
    "probe_required",
    "probe_safe_name_format",
    "probe_uniqueness",
]
