"""
Probe runner

Every probe follows the same protocol: mutate an attribute, check validity,
check the failure reason, put the original value back. ProbeRunner holds the
state one probe invocation needs (record, attribute, custom message,
assertion host, resolved config) and implements those steps once.
"""

import re
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Union

from recordprobe.shared.config import ProbeConfig, get_probe_config
from recordprobe.shared.enums import ProbeKind
from recordprobe.shared.utils.logger import get_logger

from .assertions import Asserter, DefaultAsserter, failure_message
from .record import ValidatableRecord

logger = get_logger(__name__)

PatternLike = Union[str, "re.Pattern[str]"]

REASON_DEFAULT = "Did not fail for expected reason."


class ProbeRunner:
    """Shared mutate / assert / restore steps for a single probe invocation"""

    def __init__(
        self,
        kind: ProbeKind,
        record: ValidatableRecord,
        attribute: str,
        *,
        message: Optional[str] = None,
        asserter: Optional[Asserter] = None,
        config: Optional[ProbeConfig] = None,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        self.kind = kind
        self.record = record
        self.attribute = attribute
        self.message = message
        self.asserter: Asserter = asserter if asserter is not None else DefaultAsserter()
        self.config = config if config is not None else get_probe_config()
        self.case_insensitive = (
            case_insensitive if case_insensitive is not None else self.config.case_insensitive
        )
        self._extra = {"probe": kind.value, "attribute": attribute}
        logger.info(
            f"Running {kind.value} probe on {type(record).__name__}.{attribute}",
            extra=self._extra,
        )

    @property
    def reasons(self):
        return self.config.reasons

    @property
    def pattern_flags(self) -> int:
        return re.IGNORECASE if self.case_insensitive else 0

    def compile(self, pattern: Optional[PatternLike], default: str) -> "re.Pattern[str]":
        """Caller pattern if given (compiled patterns are used as-is), else default"""
        if isinstance(pattern, re.Pattern):
            return pattern
        return re.compile(pattern if pattern is not None else default, self.pattern_flags)

    # -- mutation ---------------------------------------------------------

    def assign(
        self,
        value: Any,
        *,
        record: Optional[ValidatableRecord] = None,
        attribute: Optional[str] = None,
    ) -> None:
        target = record if record is not None else self.record
        name = attribute if attribute is not None else self.attribute
        logger.debug(f"set {name} = {value!r}", extra=self._extra)
        target.set(name, value)

    @contextmanager
    def restoring(
        self,
        *,
        record: Optional[ValidatableRecord] = None,
        attribute: Optional[str] = None,
    ) -> Iterator[Any]:
        """
        Capture an attribute, run the body, and put the captured value back
        on every exit path, assertion failures included. Yields the captured
        value.
        """
        target = record if record is not None else self.record
        name = attribute if attribute is not None else self.attribute
        original = target.get(name)
        try:
            yield original
        finally:
            target.set(name, original)
            logger.debug(f"restored {name} = {original!r}", extra=self._extra)

    # -- assertions -------------------------------------------------------

    def _report(self, ok: bool, tag: str, default: str) -> str:
        msg = failure_message(self.message, tag, default)
        if not ok:
            logger.warning(f"Probe step failed: {msg}", extra={**self._extra, "step": tag})
        return msg

    def expect_valid_start(self, record: Optional[ValidatableRecord] = None) -> None:
        target = record if record is not None else self.record
        valid = target.is_valid()
        msg = self._report(valid, "(invalid at start)", "Model should be valid to start.")
        self.asserter.assertTrue(valid, msg)

    def expect_valid(
        self, tag: str, default: str, *, record: Optional[ValidatableRecord] = None
    ) -> None:
        target = record if record is not None else self.record
        valid = target.is_valid()
        msg = self._report(valid, tag, default)
        self.asserter.assertTrue(valid, msg)

    def expect_invalid(
        self,
        pattern: "re.Pattern[str]",
        tag: str,
        default: str,
        *,
        record: Optional[ValidatableRecord] = None,
        reason_default: str = REASON_DEFAULT,
    ) -> None:
        """Record must be invalid, and the attribute's errors must match pattern"""
        target = record if record is not None else self.record
        valid = target.is_valid()
        msg = self._report(not valid, tag, default)
        self.asserter.assertFalse(valid, msg)

        errors = str(target.errors_for(self.attribute) or "")
        matched = pattern.search(errors) is not None
        if not matched:
            logger.debug(
                f"errors for {self.attribute}: {errors!r} do not match {pattern.pattern!r}",
                extra=self._extra,
            )
        msg = self._report(matched, "(error message)", reason_default)
        self.asserter.assertTrue(matched, msg)

    def expect_equal(self, expected: Any, actual: Any, tag: str, default: str) -> None:
        equal = expected == actual
        msg = self._report(equal, tag, default)
        self.asserter.assertTrue(equal, msg)
