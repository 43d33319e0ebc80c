"""
Test configuration file.

Shared fixtures: isolation of the process-wide config registry and logging
setup, plus the in-memory records most probe tests run against.
"""

import logging as _logging
from typing import Generator

import pytest
from hypothesis import HealthCheck, settings

import recordprobe.shared.config as config_module
import recordprobe.shared.utils.logger as logger_module
from recordprobe.shared.config import ProbeConfig, register_config
from tests.shared.builders.record_builders import RecordBuilder, RecordStore

# ---------------------------------------------------------------------------
# Hypothesis global configuration: property tests in this suite use
# function-scoped fixtures.
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("ci")

_logging.getLogger().setLevel(_logging.INFO)


@pytest.fixture(autouse=True)
def isolated_registry() -> Generator[None, None, None]:
    """Every test starts from an empty registry holding the default probe config"""
    saved = dict(config_module._config_registry)
    config_module._config_registry.clear()
    register_config("probe", ProbeConfig())
    yield
    config_module._config_registry.clear()
    config_module._config_registry.update(saved)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo any setup_logging call made by a test"""
    yield
    manager = logger_module._logger_manager
    if manager is not None:
        manager.uninstall()
        logger_module._logger_manager = None


@pytest.fixture
def store() -> RecordStore:
    """Backing store shared by a record and its duplicates"""
    return RecordStore()


@pytest.fixture
def builder(store: RecordStore) -> RecordBuilder:
    """Record builder bound to the per-test store"""
    return RecordBuilder(store)
