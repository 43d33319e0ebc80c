"""
Format probes

Each probe walks a fixed corpus: every known-valid value must pass, every
known-invalid value must fail for the expected reason, and the original
value is restored at the end.
"""

import re
from typing import Iterable, Optional, Union

from recordprobe.shared.config import ProbeConfig
from recordprobe.shared.enums import IpMaskPolicy, ProbeKind

from .assertions import Asserter
from .boundaries import (
    check_safe_name_length,
    safe_name_invalid_corpus,
    safe_name_valid_corpus,
)
from .corpora import (
    EMAIL_INVALID,
    EMAIL_VALID,
    IP_INVALID,
    IP_VALID,
    MASKED_ADDRESS,
    UNMASKED_ADDRESS,
    with_host_mask,
)
from .record import ValidatableRecord
from .runner import PatternLike, ProbeRunner


def _accept_all(runner: ProbeRunner, values: Iterable[str], tag: str) -> None:
    for value in values:
        runner.assign(value)
        runner.expect_valid(tag, f"Should have accepted {value!r}.")


def _reject_all(
    runner: ProbeRunner, values: Iterable[str], reason: "re.Pattern[str]", tag: str
) -> None:
    for value in values:
        runner.assign(value)
        runner.expect_invalid(reason, tag, f"Should have rejected {value!r}.")


def _expect_original_valid(runner: ProbeRunner, original: object) -> None:
    runner.expect_valid(
        "(rejected original value)",
        f"Should have accepted original value of {original!r}.",
    )


def probe_email_format(
    record: ValidatableRecord,
    attribute: str,
    message: Optional[str] = None,
    pattern: Optional[PatternLike] = None,
    *,
    asserter: Optional[Asserter] = None,
    config: Optional[ProbeConfig] = None,
    case_insensitive: Optional[bool] = None,
) -> None:
    """Check an email address rule against the fixed email corpus"""
    runner = ProbeRunner(
        ProbeKind.EMAIL,
        record,
        attribute,
        message=message,
        asserter=asserter,
        config=config,
        case_insensitive=case_insensitive,
    )
    reason = runner.compile(pattern, runner.reasons.invalid_email)

    runner.expect_valid_start()
    with runner.restoring() as original:
        _accept_all(runner, EMAIL_VALID, "(rejected valid address)")
        _reject_all(runner, EMAIL_INVALID, reason, "(accepted invalid address)")
    _expect_original_valid(runner, original)


def probe_ip_format(
    record: ValidatableRecord,
    attribute: str,
    mask: Union[IpMaskPolicy, str] = IpMaskPolicy.ALLOW_MASK,
    message: Optional[str] = None,
    pattern: Optional[PatternLike] = None,
    *,
    asserter: Optional[Asserter] = None,
    config: Optional[ProbeConfig] = None,
    case_insensitive: Optional[bool] = None,
) -> None:
    """
    Check an IP address / CIDR rule under a mask policy.

    With REQUIRE_MASK every corpus address gets a single-host suffix before
    it is tested. Afterwards a masked (127.0.0.0/8) and an unmasked
    (127.0.0.1) address are tried and must be accepted or rejected as the
    policy dictates. A caller `pattern` replaces all default reasons.
    """
    policy = IpMaskPolicy.coerce(mask)
    runner = ProbeRunner(
        ProbeKind.IP,
        record,
        attribute,
        message=message,
        asserter=asserter,
        config=config,
        case_insensitive=case_insensitive,
    )
    reasons = runner.reasons
    invalid_reason = runner.compile(pattern, reasons.invalid_ip)

    def prepare(address: str) -> str:
        return with_host_mask(address) if policy == IpMaskPolicy.REQUIRE_MASK else address

    runner.expect_valid_start()
    with runner.restoring() as original:
        _accept_all(runner, map(prepare, IP_VALID), "(rejected valid address)")
        _reject_all(
            runner, map(prepare, IP_INVALID), invalid_reason, "(accepted invalid address)"
        )

        if policy.accepts_masked:
            runner.assign(MASKED_ADDRESS)
            runner.expect_valid(
                "(rejected masked address)", f"Should have accepted {MASKED_ADDRESS!r}."
            )
        if policy.accepts_unmasked:
            runner.assign(UNMASKED_ADDRESS)
            runner.expect_valid(
                "(rejected unmasked address)",
                f"Should have accepted {UNMASKED_ADDRESS!r}.",
            )

        if policy == IpMaskPolicy.REQUIRE_MASK:
            runner.assign(UNMASKED_ADDRESS)
            runner.expect_invalid(
                runner.compile(pattern, reasons.mask_required),
                "(accepted unmasked address)",
                f"Should have rejected {UNMASKED_ADDRESS!r} for no mask.",
            )
        elif policy == IpMaskPolicy.DENY_MASK:
            runner.assign(MASKED_ADDRESS)
            runner.expect_invalid(
                runner.compile(pattern, reasons.mask_forbidden),
                "(accepted masked address)",
                f"Should have rejected {MASKED_ADDRESS!r} for mask.",
            )
    _expect_original_valid(runner, original)


def probe_safe_name_format(
    record: ValidatableRecord,
    attribute: str,
    length: Optional[int] = None,
    message: Optional[str] = None,
    pattern: Optional[PatternLike] = None,
    *,
    asserter: Optional[Asserter] = None,
    config: Optional[ProbeConfig] = None,
    case_insensitive: Optional[bool] = None,
) -> None:
    """
    Check a "safe name" token rule: starts with a letter, contains only
    letters, digits and underscores, and does not end with an underscore.

    Valid tokens of `length` characters (default from the probe config, 6)
    are tried as generated and upper-cased; invalid tokens are tried once per
    violation class, each with its own expected reason unless `pattern`
    overrides them all.

    Raises:
        ProbePreconditionError: if length is 2 or less
    """
    runner = ProbeRunner(
        ProbeKind.SAFE_NAME,
        record,
        attribute,
        message=message,
        asserter=asserter,
        config=config,
        case_insensitive=case_insensitive,
    )
    if length is None:
        length = runner.config.default_safe_name_length
    check_safe_name_length(length)

    reasons = runner.reasons
    violation_reasons = {
        "start": runner.compile(pattern, reasons.safe_name_start),
        "end": runner.compile(pattern, reasons.safe_name_end),
        "chars": runner.compile(pattern, reasons.safe_name_chars),
    }

    runner.expect_valid_start()
    with runner.restoring() as original:
        for token in safe_name_valid_corpus(length):
            _accept_all(runner, (token, token.upper()), "(rejected valid string)")
        for token, violation in safe_name_invalid_corpus(length):
            runner.assign(token)
            runner.expect_invalid(
                violation_reasons[violation],
                "(accepted invalid string)",
                f"Should have rejected {token!r}.",
                reason_default=f"Did not fail for expected reason on {token!r}.",
            )
    _expect_original_valid(runner, original)
