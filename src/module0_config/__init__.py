# file: src/module0_config/__init__.py
"""
Module 0: Configuration and Logging

Loads the YAML policy knobs (loss and error probabilities, forwarding
endpoint, worker pool size) and sets up logging.
"""

from .loader import load_config, get_default_config, validate_config, ConfigError, DEFAULT_CONFIG_PATH
from .logging_setup import setup_logging


__all__ = [
    'load_config',
    'get_default_config',
    'validate_config',
    'ConfigError',
    'DEFAULT_CONFIG_PATH',
    'setup_logging',
]
