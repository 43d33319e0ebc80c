from .probe_schema import (
    UNIQUE_FIELDS_KEY,
    LengthOptions,
    ProbePlan,
    ProbeSpec,
    UniquenessOptions,
)

__all__ = [
    "UNIQUE_FIELDS_KEY",
    "LengthOptions",
    "ProbePlan",
    "ProbeSpec",
    "UniquenessOptions",
]
