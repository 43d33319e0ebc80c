"""
Unit tests for ProbeRunner and the assertion helpers
"""

import logging
import re

import pytest

from recordprobe.core.assertions import DefaultAsserter, failure_message
from recordprobe.core.runner import REASON_DEFAULT, ProbeRunner
from recordprobe.shared.config import ProbeConfig
from recordprobe.shared.enums import ProbeKind
from recordprobe.shared.exceptions import ProbeAssertionError
from tests.shared.builders.record_builders import RecordBuilder, RecordingAsserter


class TestFailureMessage:
    """failure_message composition"""

    def test_custom_message_gets_tag(self) -> None:
        assert failure_message("name rule", "(None)", "default") == "name rule: (None)"

    def test_default_used_without_message(self) -> None:
        assert failure_message(None, "(None)", "default") == "default"
        assert failure_message("", "(None)", "default") == "default"


class TestDefaultAsserter:
    """DefaultAsserter"""

    def test_raises_probe_assertion_error(self) -> None:
        with pytest.raises(ProbeAssertionError, match="boom"):
            DefaultAsserter().assertTrue(False, "boom")

    def test_error_is_an_assertion_error(self) -> None:
        with pytest.raises(AssertionError):
            DefaultAsserter().assertFalse(True, "boom")

    def test_fallback_text(self) -> None:
        with pytest.raises(ProbeAssertionError, match="is not true"):
            DefaultAsserter().assertTrue(0)


class TestProbeRunner:
    """Shared probe steps"""

    def _runner(self, record, **kwargs) -> ProbeRunner:
        return ProbeRunner(ProbeKind.REQUIRED, record, "name", **kwargs)

    def test_restoring_puts_value_back_after_failure(self, builder: RecordBuilder) -> None:
        record = builder.with_value("name", "Dana").build()
        runner = self._runner(record)

        with pytest.raises(RuntimeError):
            with runner.restoring() as original:
                assert original == "Dana"
                runner.assign("changed")
                raise RuntimeError("stop")

        assert record.get("name") == "Dana"

    def test_restoring_other_record_and_attribute(self, builder: RecordBuilder) -> None:
        record = builder.with_values(name="Dana", tenant=1).build()
        other = record.duplicate()
        runner = self._runner(record)

        with runner.restoring(record=other, attribute="tenant"):
            runner.assign(2, record=other, attribute="tenant")
            assert other.get("tenant") == 2

        assert other.get("tenant") == 1
        assert record.get("tenant") == 1

    def test_compile_uses_config_flags(self, builder: RecordBuilder) -> None:
        record = builder.build()
        sensitive = self._runner(record, config=ProbeConfig(case_insensitive=False))
        insensitive = self._runner(record)

        assert sensitive.compile("blank", "x").flags & re.IGNORECASE == 0
        assert insensitive.compile(None, "blank").flags & re.IGNORECASE

    def test_compile_keeps_compiled_pattern(self, builder: RecordBuilder) -> None:
        pattern = re.compile("Blank")
        assert self._runner(builder.build()).compile(pattern, "x") is pattern

    def test_expect_invalid_checks_reason_second(self, builder: RecordBuilder) -> None:
        record = (
            builder.with_value("name", "")
            .with_rule("name", lambda v, r: "is wrong" if not v else None)
            .build()
        )
        asserter = RecordingAsserter()
        runner = self._runner(record, asserter=asserter)

        with pytest.raises(AssertionError):
            runner.expect_invalid(re.compile("blank"), "(x)", "should be invalid")

        assert asserter.calls == [
            ("assertFalse", False, "should be invalid"),
            ("assertTrue", False, REASON_DEFAULT),
        ]

    def test_failed_step_is_logged(self, builder: RecordBuilder, caplog) -> None:
        record = builder.with_value("name", "x").build()
        runner = self._runner(record, message="rule")

        with caplog.at_level(logging.WARNING, logger="recordprobe"):
            with pytest.raises(ProbeAssertionError):
                runner.expect_equal(1, 2, "(failed to set x)", "unused")

        assert "rule: (failed to set x)" in caplog.text

    def test_reasons_come_from_config(self, builder: RecordBuilder) -> None:
        runner = self._runner(builder.build())
        assert runner.reasons.taken == "has already been taken"

    @pytest.mark.parametrize(
        "configured, requested, ignorecase",
        [
            (True, None, True),
            (False, None, False),
            (True, False, False),
            (False, True, True),
        ],
    )
    def test_case_insensitive_argument_overrides_config(
        self, builder: RecordBuilder, configured: bool, requested, ignorecase: bool
    ) -> None:
        runner = self._runner(
            builder.build(),
            config=ProbeConfig(case_insensitive=configured),
            case_insensitive=requested,
        )

        flags = runner.compile(None, "blank").flags

        assert bool(flags & re.IGNORECASE) is ignorecase
