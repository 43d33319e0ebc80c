"""
Host assertion primitives

Probes report outcomes through an object exposing assertTrue/assertFalse, so
a unittest.TestCase can be passed straight in. DefaultAsserter is used when
no host is given and raises ProbeAssertionError, which pytest reports as an
ordinary assertion failure.
"""

from typing import Any, Optional, Protocol

from recordprobe.shared.exceptions import ProbeAssertionError


class Asserter(Protocol):
    def assertTrue(self, expr: Any, msg: Optional[str] = None) -> None: ...

    def assertFalse(self, expr: Any, msg: Optional[str] = None) -> None: ...


class DefaultAsserter:
    """Stand-alone assertion host"""

    def assertTrue(self, expr: Any, msg: Optional[str] = None) -> None:
        if not expr:
            raise ProbeAssertionError(msg or f"{expr!r} is not true")

    def assertFalse(self, expr: Any, msg: Optional[str] = None) -> None:
        if expr:
            raise ProbeAssertionError(msg or f"{expr!r} is not false")


def failure_message(message: Optional[str], tag: str, default: str) -> str:
    """
    Compose the text reported for a failed step.

    A caller-supplied message is postfixed with the step tag, e.g.
    "name rule: (None)"; otherwise the descriptive default is used.
    """
    if message:
        return f"{message}: {tag}"
    return default
