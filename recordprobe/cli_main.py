#!/usr/bin/env python3
"""
recordprobe CLI Main Entry Point

Main entry point for the recordprobe command-line tool.
"""

from recordprobe.cli.app import main
from recordprobe.shared.config import (
    get_logging_config,
    get_probe_config,
    register_config,
)
from recordprobe.shared.utils.logger import setup_logging


def bootstrap() -> None:
    """Configure logging and publish the loaded configurations"""
    logging_config = get_logging_config()
    setup_logging(logging_config)

    register_config("logging", logging_config)
    register_config("probe", get_probe_config())


def run() -> None:
    bootstrap()
    main()


if __name__ == "__main__":
    run()
