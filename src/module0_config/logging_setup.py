# file: src/module0_config/logging_setup.py

"""Logging configuration shared by the service entry point."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging with a timestamped format."""
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
