"""
Output formatting for probe reports
"""

import json
from typing import Any, Dict, List

from recordprobe.core.plan_runner import STATUS_FAILED, STATUS_PASSED, ProbeOutcome

_STATUS_ICONS = {"PASSED": "✅", "FAILED": "❌", "ERROR": "⚠️"}


class OutputFormatter:
    """Renders probe outcomes as a text table or a JSON document"""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def summary(self, outcomes: List[ProbeOutcome]) -> Dict[str, int]:
        counts = {"total": len(outcomes), "passed": 0, "failed": 0, "errors": 0}
        for outcome in outcomes:
            if outcome.status == STATUS_PASSED:
                counts["passed"] += 1
            elif outcome.status == STATUS_FAILED:
                counts["failed"] += 1
            else:
                counts["errors"] += 1
        return counts

    def format_table(
        self, plan_path: str, outcomes: List[ProbeOutcome], execution_time: float
    ) -> str:
        lines = [f"📋 Probe plan: {plan_path}", ""]
        width = max((len(o.probe) for o in outcomes), default=10)
        for outcome in outcomes:
            icon = _STATUS_ICONS.get(outcome.status, "?")
            line = f"{icon} {outcome.probe.ljust(width)}  {outcome.status}"
            if self.verbose:
                line += f"  ({outcome.execution_time * 1000:.1f} ms)"
            lines.append(line)
            if outcome.message:
                lines.append(f"    └─ {outcome.message}")

        counts = self.summary(outcomes)
        lines.append("")
        lines.append(
            f"📊 {counts['total']} probes: {counts['passed']} passed, "
            f"{counts['failed']} failed, {counts['errors']} errors "
            f"in {execution_time:.3f}s"
        )
        return "\n".join(lines)

    def format_json(
        self, plan_path: str, outcomes: List[ProbeOutcome], execution_time: float
    ) -> str:
        counts = self.summary(outcomes)
        payload: Dict[str, Any] = {
            "status": "failed" if counts["failed"] + counts["errors"] else "ok",
            "plan": plan_path,
            "summary": counts,
            "results": [o.to_dict() for o in outcomes],
            "execution_time_s": round(execution_time, 3),
        }
        return json.dumps(payload, default=str)
