from .exception_system import (
    OperationError,
    ProbeAssertionError,
    ProbeKitException,
    ProbePreconditionError,
    RecordContractError,
)

__all__ = [
    "OperationError",
    "ProbeAssertionError",
    "ProbeKitException",
    "ProbePreconditionError",
    "RecordContractError",
]
