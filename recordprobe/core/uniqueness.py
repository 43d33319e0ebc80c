"""
Uniqueness probe

The record under test is persisted and a detached duplicate is probed
against it. The duplicate collides on the tested attribute, so it must be
invalid; case variants must collide too unless the rule is case sensitive.
Each scope entry then switches one scope attribute to an alternate value,
which must make the duplicate unique again, and switches it back.
"""

from typing import Any, Mapping, Optional, Union

from recordprobe.shared.config import ProbeConfig
from recordprobe.shared.enums import ProbeKind
from recordprobe.shared.schema import UniquenessOptions

from .assertions import Asserter
from .record import PersistableRecord
from .runner import PatternLike, ProbeRunner

UniquenessOptionsLike = Union[UniquenessOptions, Mapping[str, Any], None]


def _uniqueness_options(options: UniquenessOptionsLike) -> UniquenessOptions:
    if options is None:
        return UniquenessOptions()
    if isinstance(options, UniquenessOptions):
        return options
    return UniquenessOptions.from_mapping(options)


def probe_uniqueness(
    record: PersistableRecord,
    attribute: str,
    case_sensitive: bool = False,
    message: Optional[str] = None,
    pattern: Optional[PatternLike] = None,
    options: UniquenessOptionsLike = None,
    *,
    asserter: Optional[Asserter] = None,
    config: Optional[ProbeConfig] = None,
    case_insensitive: Optional[bool] = None,
) -> None:
    """
    Check a uniqueness rule, optionally scoped.

    Args:
        record: Valid record; it is persisted as a side effect.
        attribute: Attribute carrying the uniqueness rule.
        case_sensitive: When False, upper- and lower-cased copies of a string
            value must collide as well.
        message: Optional prefix for failure messages.
        pattern: Expected failure reason (default "has already been taken").
        options: UniquenessOptions, or a flat mapping of scope entries with an
            optional "unique_fields" mapping.
        asserter: Host assertion primitives.
        config: Probe configuration; resolved with get_probe_config() if omitted.
    """
    opts = _uniqueness_options(options)
    runner = ProbeRunner(
        ProbeKind.UNIQUENESS,
        record,
        attribute,
        message=message,
        asserter=asserter,
        config=config,
        case_insensitive=case_insensitive,
    )
    reason = runner.compile(pattern, runner.reasons.taken)

    runner.expect_valid_start()
    original = record.get(attribute)
    record.persist()
    copy = record.duplicate()

    for name, value in opts.unique_fields.items():
        runner.assign(value, record=copy, attribute=name)

    def expect_collision() -> None:
        current = copy.get(attribute)
        runner.expect_invalid(
            reason,
            f"({current!r})",
            f"Duplicate model with {attribute}={current!r} should not be valid.",
            record=copy,
        )

    expect_collision()

    if isinstance(original, str) and not case_sensitive:
        with runner.restoring(record=copy):
            for variant in (original.upper(), original.lower()):
                runner.assign(variant, record=copy)
                expect_collision()

    for scope, alternate in opts.scopes.items():
        runner.assign(original, record=copy)
        expect_collision()

        with runner.restoring(record=copy, attribute=scope) as prior:
            runner.assign(alternate, record=copy, attribute=scope)
            runner.expect_equal(
                alternate,
                copy.get(scope),
                f"(failed to set {scope})",
                f"Failed to set {scope}={alternate!r}.",
            )
            runner.expect_valid(
                f"!{scope}({alternate!r})",
                f"Duplicate model with {scope}={alternate!r} should be valid "
                f"with {attribute}={copy.get(attribute)!r}.",
                record=copy,
            )

        runner.expect_equal(
            prior,
            copy.get(scope),
            f"(failed to reset {scope})",
            f"Failed to reset {scope}={prior!r}.",
        )
        expect_collision()
