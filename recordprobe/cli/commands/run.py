"""
Run Command

`recordprobe run PLAN` loads a JSON probe plan, validates it, runs every
probe against fresh records from the plan's record factory, and prints a
report. Exit code 1 when any probe failed or errored, 2 for usage errors.
"""

from __future__ import annotations

import json
import sys
import time
from typing import Any, Optional

import click
from pydantic import ValidationError

from recordprobe.cli.core.output_formatter import OutputFormatter
from recordprobe.core.plan_runner import STATUS_PASSED, execute_plan, resolve_factory
from recordprobe.shared.config import get_probe_config
from recordprobe.shared.exceptions import OperationError
from recordprobe.shared.schema import ProbePlan
from recordprobe.shared.utils.console import safe_echo
from recordprobe.shared.utils.logger import get_logger

logger = get_logger(__name__)


def _load_plan(plan_file: str) -> ProbePlan:
    """Read and validate a probe plan.

    Raises:
        click.UsageError: if the file is not JSON or does not describe a plan
    """
    try:
        with open(plan_file, "r", encoding="utf-8") as f:
            payload: Any = json.load(f)
    except json.JSONDecodeError as e:
        raise click.UsageError(f"Invalid JSON in plan file: {plan_file}") from e

    if not isinstance(payload, dict):
        raise click.UsageError("Plan file must be a JSON object with a 'probes' array")

    try:
        return ProbePlan.model_validate(payload)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise click.UsageError(f"Invalid probe plan: {problems}") from e


@click.command("run")
@click.argument("plan_file", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option(
    "--record",
    "record_ref",
    default=None,
    help="Record factory 'module:callable' (overrides the plan's 'record')",
)
@click.option(
    "--output",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
@click.option("--verbose", is_flag=True, default=False, help="Show per-probe timings")
def run_command(
    plan_file: str, record_ref: Optional[str], output: str, verbose: bool
) -> None:
    """Run the probes listed in PLAN_FILE."""
    try:
        plan = _load_plan(plan_file)
        reference = record_ref or plan.record
        if not reference:
            raise click.UsageError(
                "No record factory given; set 'record' in the plan or pass --record"
            )
        try:
            factory = resolve_factory(reference)
        except OperationError as e:
            raise click.UsageError(str(e)) from e

        start = time.perf_counter()
        outcomes = execute_plan(plan, factory, config=get_probe_config())
        elapsed = time.perf_counter() - start

        formatter = OutputFormatter(verbose=verbose)
        if output.lower() == "json":
            safe_echo(formatter.format_json(plan_file, outcomes, elapsed))
        else:
            safe_echo(formatter.format_table(plan_file, outcomes, elapsed))

        any_failed = any(o.status != STATUS_PASSED for o in outcomes)
        sys.exit(1 if any_failed else 0)

    except click.UsageError:
        raise
    except Exception as e:
        logger.error(f"Run command error: {str(e)}")
        safe_echo(f"❌ Error: {str(e)}", err=True)
        sys.exit(1)
