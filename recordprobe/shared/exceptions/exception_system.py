"""
Exception system for recordprobe

A small hierarchy shared by the probe engine, the configuration layer and
the CLI. Every exception carries an optional context dictionary so callers
can report which probe, attribute or file was involved.
"""

from typing import Any, Dict, Optional


class ProbeKitException(Exception):
    """Base class for all recordprobe errors"""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context or {})

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for structured output"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class OperationError(ProbeKitException):
    """Configuration, plan loading or other operational failure"""


class ProbePreconditionError(ProbeKitException):
    """Probe parameters make the probe meaningless; no step was executed"""


class RecordContractError(ProbeKitException):
    """A bundled record adapter cannot provide a required capability"""


class ProbeAssertionError(ProbeKitException, AssertionError):
    """
    An expected validity outcome was not observed.

    Subclasses AssertionError so that pytest and unittest report it as a
    test failure rather than an error.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        step: Optional[str] = None,
    ):
        super().__init__(message, context)
        self.step = step
