"""
Presence probe
"""

from typing import Optional

from recordprobe.shared.config import ProbeConfig
from recordprobe.shared.enums import ProbeKind

from .assertions import Asserter
from .record import ValidatableRecord
from .runner import PatternLike, ProbeRunner

BLANK_STRINGS = ("", "   ")


def probe_required(
    record: ValidatableRecord,
    attribute: str,
    message: Optional[str] = None,
    pattern: Optional[PatternLike] = None,
    *,
    asserter: Optional[Asserter] = None,
    config: Optional[ProbeConfig] = None,
    case_insensitive: Optional[bool] = None,
) -> None:
    """
    Check that the attribute is required.

    None must be rejected; for string attributes the empty string and a
    whitespace-only string must be rejected too, each for the reason matched
    by `pattern` (default "can't be blank"). The original value is restored
    afterwards and must validate again.

    String patterns are matched case-insensitively unless `case_insensitive`
    is False; when it is None the probe config decides.
    """
    runner = ProbeRunner(
        ProbeKind.REQUIRED,
        record,
        attribute,
        message=message,
        asserter=asserter,
        config=config,
        case_insensitive=case_insensitive,
    )
    reason = runner.compile(pattern, runner.reasons.required)

    runner.expect_valid_start()
    with runner.restoring() as original:
        runner.assign(None)
        runner.expect_invalid(
            reason, "(None)", f"Should not allow {attribute} to be set to None."
        )
        if isinstance(original, str):
            for blank in BLANK_STRINGS:
                runner.assign(blank)
                runner.expect_invalid(
                    reason,
                    f"({blank!r})",
                    f"Should not allow {attribute} to be set to {blank!r}.",
                )

    runner.expect_valid(
        f"!({original!r})",
        f"Should allow {attribute} to be set back to {original!r}.",
    )
