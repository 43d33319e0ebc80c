"""
Probe plan execution

Runs every probe of a ProbePlan against a fresh record from a factory and
collects one outcome per probe. A failed probe does not stop the plan, so
the report covers every rule.
"""

import importlib
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional

from recordprobe.shared.config import ProbeConfig, get_probe_config
from recordprobe.shared.enums import ProbeKind
from recordprobe.shared.exceptions import OperationError, ProbeKitException
from recordprobe.shared.schema import ProbePlan, ProbeSpec
from recordprobe.shared.utils.logger import get_logger

from .assertions import Asserter
from .formats import probe_email_format, probe_ip_format, probe_safe_name_format
from .length import probe_max_length, probe_min_length
from .presence import probe_required
from .uniqueness import probe_uniqueness

logger = get_logger(__name__)

RecordFactory = Callable[[], Any]

STATUS_PASSED = "PASSED"
STATUS_FAILED = "FAILED"
STATUS_ERROR = "ERROR"


@dataclass
class ProbeOutcome:
    """Result of one probe from a plan"""

    probe: str
    kind: str
    attribute: str
    status: str
    message: Optional[str] = None
    execution_time: float = 0.0
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status == STATUS_PASSED

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def resolve_factory(reference: str) -> RecordFactory:
    """
    Import a record factory given as "package.module:callable".

    Raises:
        OperationError: if the reference is malformed or cannot be imported
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise OperationError(
            f"Record factory must look like 'module:callable', got '{reference}'",
            context={"factory": reference},
        )
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise OperationError(
            f"Cannot import module '{module_name}': {e}", context={"factory": reference}
        ) from e
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise OperationError(
                f"'{module_name}' has no attribute '{attr_path}'",
                context={"factory": reference},
            ) from e
    if not callable(target):
        raise OperationError(
            f"Record factory '{reference}' is not callable", context={"factory": reference}
        )
    return target


def run_probe_spec(
    spec: ProbeSpec,
    record: Any,
    *,
    asserter: Optional[Asserter] = None,
    config: Optional[ProbeConfig] = None,
) -> None:
    """Dispatch one plan entry to its probe"""
    common: Dict[str, Any] = {
        "asserter": asserter,
        "config": config,
        "case_insensitive": spec.case_insensitive,
    }
    kind = spec.kind
    if kind == ProbeKind.REQUIRED:
        probe_required(record, spec.attribute, spec.message, spec.pattern, **common)
    elif kind == ProbeKind.MAX_LENGTH:
        probe_max_length(
            record,
            spec.attribute,
            spec.limit or 0,
            spec.message,
            spec.pattern,
            spec.length_options(),
            **common,
        )
    elif kind == ProbeKind.MIN_LENGTH:
        probe_min_length(
            record,
            spec.attribute,
            spec.limit or 0,
            spec.message,
            spec.pattern,
            spec.length_options(),
            **common,
        )
    elif kind == ProbeKind.UNIQUENESS:
        probe_uniqueness(
            record,
            spec.attribute,
            spec.case_sensitive,
            spec.message,
            spec.pattern,
            spec.uniqueness_options(),
            **common,
        )
    elif kind == ProbeKind.EMAIL:
        probe_email_format(record, spec.attribute, spec.message, spec.pattern, **common)
    elif kind == ProbeKind.IP:
        probe_ip_format(
            record, spec.attribute, spec.mask, spec.message, spec.pattern, **common
        )
    elif kind == ProbeKind.SAFE_NAME:
        probe_safe_name_format(
            record, spec.attribute, spec.length, spec.message, spec.pattern, **common
        )
    else:
        raise OperationError(f"Unsupported probe kind: {kind}")


def execute_plan(
    plan: ProbePlan,
    factory: RecordFactory,
    *,
    config: Optional[ProbeConfig] = None,
) -> List[ProbeOutcome]:
    """
    Run every probe in the plan, each against a freshly built record.

    Assertion failures become FAILED outcomes and recordprobe errors
    (preconditions, adapter errors) become ERROR outcomes. Anything else is
    a bug in the record or its factory and propagates.
    """
    config = config if config is not None else get_probe_config()
    outcomes: List[ProbeOutcome] = []

    for spec in plan.probes:
        start = time.perf_counter()
        outcome = ProbeOutcome(
            probe=spec.label(),
            kind=spec.kind.value,
            attribute=spec.attribute,
            status=STATUS_PASSED,
        )
        try:
            run_probe_spec(spec, factory(), config=config)
        except AssertionError as e:
            outcome.status = STATUS_FAILED
            outcome.message = str(e)
        except ProbeKitException as e:
            outcome.status = STATUS_ERROR
            outcome.message = str(e)
            outcome.details = dict(e.context)
        outcome.execution_time = time.perf_counter() - start
        logger.info(f"Probe {outcome.probe}: {outcome.status}")
        outcomes.append(outcome)

    return outcomes
