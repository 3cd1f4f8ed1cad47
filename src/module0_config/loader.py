# file: src/module0_config/loader.py

"""
Configuration loading.

Defaults live in default_config.yaml next to this file. A user file is
deep-merged over them, so it only needs the keys it changes.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration cannot be read or is invalid."""
    pass


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_default_config() -> Dict[str, Any]:
    """Return a fresh copy of the packaged defaults."""
    return _read_yaml(DEFAULT_CONFIG_PATH)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Path to a YAML override file, or None for defaults only

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    config = get_default_config()

    if config_path is not None:
        if not os.path.exists(config_path):
            raise ConfigError(f"Config file not found: {config_path}")
        config = _deep_merge(config, _read_yaml(config_path))
        logger.info(f"Loaded configuration from {config_path}")

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Check value ranges of every recognized option.

    Raises:
        ConfigError: On the first invalid value
    """
    channel = config.get('channel', {})
    for key in ('message_loss_probability', 'frame_error_probability'):
        value = channel.get(key)
        if not isinstance(value, (int, float)) or isinstance(value, bool) or not 0 <= value <= 100:
            raise ConfigError(f"channel.{key} must be a number in [0, 100], got {value!r}")

    seed = channel.get('seed')
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        raise ConfigError(f"channel.seed must be a non-negative integer or null, got {seed!r}")

    max_payload = config.get('codec', {}).get('max_payload_bytes')
    if not isinstance(max_payload, int) or max_payload < 1:
        raise ConfigError(f"codec.max_payload_bytes must be a positive integer, got {max_payload!r}")

    forwarding = config.get('forwarding', {})
    if not forwarding.get('endpoint'):
        raise ConfigError("forwarding.endpoint must be set")
    timeout = forwarding.get('timeout_seconds')
    if not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(f"forwarding.timeout_seconds must be > 0, got {timeout!r}")

    workers = config.get('dispatch', {}).get('max_workers')
    if not isinstance(workers, int) or workers < 1:
        raise ConfigError(f"dispatch.max_workers must be a positive integer, got {workers!r}")
