"""
Output formatter tests
"""

import json

from recordprobe.cli.core.output_formatter import OutputFormatter
from recordprobe.core.plan_runner import (
    STATUS_ERROR,
    STATUS_FAILED,
    STATUS_PASSED,
    ProbeOutcome,
)


def _outcomes():
    return [
        ProbeOutcome("required:name", "required", "name", STATUS_PASSED, execution_time=0.002),
        ProbeOutcome("max_length:name", "max_length", "name", STATUS_FAILED, "too long"),
        ProbeOutcome("safe_name:h", "safe_name", "h", STATUS_ERROR, "length"),
    ]


class TestOutputFormatter:
    """OutputFormatter"""

    def test_summary_counts(self) -> None:
        assert OutputFormatter().summary(_outcomes()) == {
            "total": 3,
            "passed": 1,
            "failed": 1,
            "errors": 1,
        }

    def test_table_lists_each_probe_and_message(self) -> None:
        text = OutputFormatter().format_table("plan.json", _outcomes(), 0.5)

        assert "plan.json" in text
        assert "max_length:name" in text
        assert "└─ too long" in text
        assert "3 probes: 1 passed, 1 failed, 1 errors in 0.500s" in text
        assert " ms)" not in text

    def test_verbose_table_has_timings(self) -> None:
        text = OutputFormatter(verbose=True).format_table("plan.json", _outcomes(), 0.5)
        assert "(2.0 ms)" in text

    def test_empty_table(self) -> None:
        text = OutputFormatter().format_table("plan.json", [], 0.0)
        assert "0 probes" in text

    def test_json(self) -> None:
        payload = json.loads(OutputFormatter().format_json("plan.json", _outcomes(), 1.23456))
        assert payload["execution_time_s"] == 1.235
        assert payload["results"][1]["message"] == "too long"
        assert payload["status"] == "failed"

    def test_json_status_ok_when_all_pass(self) -> None:
        outcomes = _outcomes()[:1]
        payload = json.loads(OutputFormatter().format_json("plan.json", outcomes, 0.1))
        assert payload["status"] == "ok"

    def test_json_status_failed_on_error_only(self) -> None:
        outcomes = [_outcomes()[0], _outcomes()[2]]
        payload = json.loads(OutputFormatter().format_json("plan.json", outcomes, 0.1))
        assert payload["status"] == "failed"
