"""
Shared configuration package

Besides the config models, keeps a small process-wide registry so that the
CLI bootstrap can publish the configs it loaded and library code can pick
them up without re-reading files.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from .loader import load_config
from .logging_config import LoggingConfig, get_logging_config
from .probe_config import ProbeConfig, ReasonPatterns, get_probe_config

T = TypeVar("T")

_config_registry: Dict[str, Any] = {}


def register_config(name: str, config: Any) -> None:
    """Register a configuration object under a name, replacing any previous one"""
    _config_registry[name] = config


def get_config(name: str) -> Optional[Any]:
    """Return the configuration registered under name, or None"""
    return _config_registry.get(name)


def get_typed_config(name: str, config_type: Type[T]) -> Optional[T]:
    """Return the registered configuration only if it is of the given type"""
    config = _config_registry.get(name)
    if isinstance(config, config_type):
        return config
    return None


__all__ = [
    "LoggingConfig",
    "ProbeConfig",
    "ReasonPatterns",
    "get_config",
    "get_logging_config",
    "get_probe_config",
    "get_typed_config",
    "load_config",
    "register_config",
]
