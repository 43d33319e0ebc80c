"""
Length probes

Both limits are inclusive: a value of exactly `limit` characters must pass.
Framing (start_with / end_with) embeds the generated payload in a fixed
pattern, e.g. end_with="@example.com" for an email column, while the total
length of the tested value still equals the boundary.
"""

from typing import Any, Mapping, Optional, Union

from recordprobe.shared.config import ProbeConfig
from recordprobe.shared.enums import ProbeKind
from recordprobe.shared.schema import LengthOptions

from .assertions import Asserter
from .boundaries import BoundaryPair
from .record import ValidatableRecord
from .runner import PatternLike, ProbeRunner

LengthOptionsLike = Union[LengthOptions, Mapping[str, Any], None]


def _length_options(options: LengthOptionsLike) -> LengthOptions:
    if options is None:
        return LengthOptions()
    if isinstance(options, LengthOptions):
        return options
    return LengthOptions.model_validate(dict(options))


def _probe_length(
    kind: ProbeKind,
    pair: BoundaryPair,
    record: ValidatableRecord,
    attribute: str,
    message: Optional[str],
    pattern: Optional[PatternLike],
    asserter: Optional[Asserter],
    config: Optional[ProbeConfig],
    case_insensitive: Optional[bool],
) -> None:
    runner = ProbeRunner(
        kind,
        record,
        attribute,
        message=message,
        asserter=asserter,
        config=config,
        case_insensitive=case_insensitive,
    )
    if kind == ProbeKind.MAX_LENGTH:
        reason = runner.compile(pattern, runner.reasons.too_long)
    else:
        reason = runner.compile(pattern, runner.reasons.too_short)

    runner.expect_valid_start()
    with runner.restoring() as original:
        runner.assign(pair.valid)
        runner.expect_valid(
            f"!({len(pair.valid)})",
            f"Should allow a string of {len(pair.valid)} characters.",
        )
        runner.assign(pair.invalid)
        runner.expect_invalid(
            reason,
            f"({len(pair.invalid)})",
            f"Should not allow a string of {len(pair.invalid)} characters.",
        )

    runner.expect_valid(
        f"!({original!r})",
        f"Should allow {attribute} to be set back to {original!r}.",
    )


def probe_max_length(
    record: ValidatableRecord,
    attribute: str,
    limit: int,
    message: Optional[str] = None,
    pattern: Optional[PatternLike] = None,
    options: LengthOptionsLike = None,
    *,
    asserter: Optional[Asserter] = None,
    config: Optional[ProbeConfig] = None,
    case_insensitive: Optional[bool] = None,
) -> None:
    """
    Check a maximum length rule: `limit` characters pass, `limit + 1` fail
    for the reason matched by `pattern` (default "is too long").

    Raises:
        ProbePreconditionError: if the framing is longer than the limit
    """
    pair = BoundaryPair.for_max(limit, _length_options(options))
    _probe_length(
        ProbeKind.MAX_LENGTH,
        pair,
        record,
        attribute,
        message,
        pattern,
        asserter,
        config,
        case_insensitive,
    )


def probe_min_length(
    record: ValidatableRecord,
    attribute: str,
    limit: int,
    message: Optional[str] = None,
    pattern: Optional[PatternLike] = None,
    options: LengthOptionsLike = None,
    *,
    asserter: Optional[Asserter] = None,
    config: Optional[ProbeConfig] = None,
    case_insensitive: Optional[bool] = None,
) -> None:
    """
    Check a minimum length rule: `limit` characters pass, `limit - 1` fail
    for the reason matched by `pattern` (default "is too short").

    Raises:
        ProbePreconditionError: if the framing leaves no payload to shorten
    """
    pair = BoundaryPair.for_min(limit, _length_options(options))
    _probe_length(
        ProbeKind.MIN_LENGTH,
        pair,
        record,
        attribute,
        message,
        pattern,
        asserter,
        config,
        case_insensitive,
    )
