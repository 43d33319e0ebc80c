"""
Logging configuration model
"""

import os

from pydantic import BaseModel, ConfigDict, Field

from .loader import load_config

DEFAULT_LOGGING_CONFIG_PATH = "config/logging.toml"


class LoggingConfig(BaseModel):
    """Settings consumed by recordprobe.shared.utils.logger"""

    model_config = ConfigDict(extra="ignore")

    level: str = Field(default="INFO", description="Root log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log record format",
    )
    to_file: bool = Field(default=False, description="Also write to a file")
    file_path: str = Field(default="logs/app.log", description="Log file path")
    max_bytes: int = Field(default=10485760, description="Rotation size (10MB)")
    backup_count: int = Field(default=5, description="Rotated files to keep")
    structured: bool = Field(default=False, description="Emit JSON log lines")


def get_logging_config() -> LoggingConfig:
    """
    Load logging settings from LOGGING_CONFIG_PATH or config/logging.toml.

    Falls back to the defaults (with a printed warning) when the file is
    missing, since logging must be configured before anything else runs.
    """
    path = os.getenv("LOGGING_CONFIG_PATH") or DEFAULT_LOGGING_CONFIG_PATH
    if not os.path.isfile(path):
        print(f"Warning: logging config {path} not found; using defaults")
        return LoggingConfig()
    return load_config(path, LoggingConfig)
