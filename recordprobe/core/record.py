"""
Record adapter contract

The capability surface the probes require from the record under test.
Attributes are addressed by name through get/set; how a record maps names to
its own storage is the adapter's business.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValidatableRecord(Protocol):
    """Needed by every probe"""

    def get(self, attribute: str) -> Any:
        """Current value of the attribute"""
        ...

    def set(self, attribute: str, value: Any) -> None:
        """Assign the attribute"""
        ...

    def is_valid(self) -> bool:
        """Validate the current state; may recompute the error collection"""
        ...

    def errors_for(self, attribute: str) -> str:
        """Failure reasons for the attribute as text, empty when there are none"""
        ...


@runtime_checkable
class PersistableRecord(ValidatableRecord, Protocol):
    """Additionally needed by the uniqueness probe"""

    def duplicate(self) -> "PersistableRecord":
        """A detached copy sharing no mutable state with this record"""
        ...

    def persist(self) -> None:
        """Commit the current state durably; failures propagate"""
        ...
