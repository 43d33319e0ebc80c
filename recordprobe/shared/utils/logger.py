"""
Logging utilities

Wraps the standard logging module with a manager that owns the handlers
(console, optional rotating file), an optional JSON formatter, and a cache of
named loggers.
"""

import json
import logging
import logging.handlers
import os
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

# Attributes set on every LogRecord by the logging module itself
_RESERVED_ATTRS = set(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime"}

PACKAGE_LOGGER = "recordprobe"

DEFAULT_CONFIG: Dict[str, Any] = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "to_console": True,
    "to_file": False,
    "log_file": "logs/app.log",
    "max_bytes": 10485760,
    "backup_count": 5,
    "structured": False,
}


class StructuredFormatter(logging.Formatter):
    """Formats records as one JSON object per line"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        # Anything passed through `extra=` (probe, attribute, step, ...)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in payload:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


class LoggerManager:
    """Owns the handlers and installs them on the package logger"""

    def __init__(
        self, config: Optional[Dict[str, Any]] = None, namespace: str = PACKAGE_LOGGER
    ):
        self.namespace = namespace
        self.config: Dict[str, Any] = self._normalize(config or {})
        self.handlers: Dict[str, logging.Handler] = {}
        self._loggers: Dict[str, logging.Logger] = {}
        self._lock = threading.Lock()
        self._setup_handlers()

    @staticmethod
    def _normalize(config: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(DEFAULT_CONFIG)
        merged.update({k: v for k, v in config.items() if v is not None})
        # LoggingConfig calls the log file "file_path"
        if "file_path" in config and "log_file" not in config:
            merged["log_file"] = config["file_path"]

        level = str(merged["level"]).upper()
        merged["level"] = level if isinstance(logging.getLevelName(level), int) else "INFO"

        for key in ("max_bytes", "backup_count"):
            try:
                merged[key] = max(0, int(merged[key]))
            except (TypeError, ValueError):
                merged[key] = DEFAULT_CONFIG[key]
        return merged

    def _formatter(self) -> logging.Formatter:
        if self.config["structured"]:
            return StructuredFormatter()
        return logging.Formatter(self.config["format"])

    def _setup_handlers(self) -> None:
        formatter = self._formatter()

        if self.config["to_console"]:
            console = logging.StreamHandler()
            console.setFormatter(formatter)
            self.handlers["console"] = console

        if self.config["to_file"]:
            log_file = self.config["log_file"]
            try:
                log_dir = os.path.dirname(log_file)
                if log_dir:
                    os.makedirs(log_dir, exist_ok=True)
                file_handler = logging.handlers.RotatingFileHandler(
                    log_file,
                    maxBytes=self.config["max_bytes"],
                    backupCount=self.config["backup_count"],
                    encoding="utf-8",
                )
            except OSError as e:
                # Keep console logging working when the log directory is unusable
                self.config["to_file"] = False
                logging.getLogger(__name__).warning(
                    f"File logging disabled, cannot open {log_file}: {e}"
                )
            else:
                file_handler.setFormatter(formatter)
                self.handlers["main"] = file_handler

    def install(self) -> logging.Logger:
        """
        Attach the handlers to the package logger.

        Module loggers are children of it, so loggers created at import time
        (before logging was configured) pick the handlers up as well.
        """
        package_logger = logging.getLogger(self.namespace)
        package_logger.setLevel(self.config["level"])
        for handler in self.handlers.values():
            if handler not in package_logger.handlers:
                package_logger.addHandler(handler)
        package_logger.propagate = False
        return package_logger

    def uninstall(self) -> None:
        """Detach and close the handlers everywhere they were attached"""
        attached = [logging.getLogger(self.namespace), *self._loggers.values()]
        for logger in attached:
            for handler in self.handlers.values():
                logger.removeHandler(handler)
            if not _in_namespace(logger.name, self.namespace):
                logger.propagate = True
        logging.getLogger(self.namespace).propagate = True
        for handler in self.handlers.values():
            handler.close()
        self._loggers.clear()

    def get_logger(self, name: str) -> logging.Logger:
        """Return a cached logger; names outside the package get the handlers directly"""
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = logging.getLogger(name)
                if not _in_namespace(name, self.namespace):
                    logger.setLevel(self.config["level"])
                    for handler in self.handlers.values():
                        logger.addHandler(handler)
                    logger.propagate = False
                self._loggers[name] = logger
            return logger


def _in_namespace(name: str, namespace: str) -> bool:
    return name == namespace or name.startswith(namespace + ".")


_logger_manager: Optional[LoggerManager] = None
_manager_lock = threading.Lock()


def setup_logging(
    config: Union[Dict[str, Any], BaseModel, None] = None,
) -> LoggerManager:
    """
    (Re)configure logging for the process.

    Accepts a plain dict or a LoggingConfig model. A previous configuration
    is uninstalled first.
    """
    global _logger_manager
    if isinstance(config, BaseModel):
        config = config.model_dump()
    with _manager_lock:
        if _logger_manager is not None:
            _logger_manager.uninstall()
        _logger_manager = LoggerManager(config)
        _logger_manager.install()
        return _logger_manager


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger by name.

    Before setup_logging has run this is a plain logging.getLogger, so
    library users who configure logging themselves are left alone.
    """
    if _logger_manager is None:
        return logging.getLogger(name)
    return _logger_manager.get_logger(name)
