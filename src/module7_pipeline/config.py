"""
Configuration loading.

Configuration is a plain dictionary read from YAML. Consumers read keys
with .get() and fall back to the defaults below.
"""

import copy
import logging
import math
import os
from numbers import Integral, Real
from typing import Any, Dict, Optional

import yaml

from module1_code_construction import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def get_default_config() -> Dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Default configuration dictionary
    """
    return {
        "system": {
            "verbose": True,
            "log_level": "INFO",
        },
        "code": {
            "max_n": 20,
            "table_timeout_seconds": None,
        },
        "channel": {
            "seed": None,
            "error_probability": 0.05,
        },
    }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Path to a YAML file. If None, the packaged
                     default_config.yaml is used, or the hardcoded
                     defaults if that file is absent.

    Returns:
        Configuration dictionary; keys missing from the file are filled
        from the defaults

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or holds
                            an invalid value
    """
    if config_path is None:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return get_default_config()
        config_path = DEFAULT_CONFIG_PATH

    try:
        with open(config_path, 'r') as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot load config from {config_path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(loaded).__name__}"
        )

    logger.debug("Loaded configuration from %s", config_path)
    return validate_config(_merge(get_default_config(), loaded))


def _check_positive_number(value, name: str, allow_none: bool = False, integer: bool = False):
    if value is None and allow_none:
        return
    expected = Integral if integer else Real
    if isinstance(value, bool) or not isinstance(value, expected):
        kind = "an integer" if integer else "a number"
        raise ConfigurationError(f"{name} must be {kind}, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be > 0, got {value!r}")


def _log_level(value) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    level = logging.getLevelName(str(value).upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"system.log_level {value!r} is not a logging level name")
    return level


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check the values the pipeline consumes.

    Missing keys are allowed (consumers fall back to defaults); present
    keys must hold usable values.

    Returns:
        The same configuration dictionary

    Raises:
        ConfigurationError: If a section is not a mapping or a value is invalid
    """
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration must be a mapping, got {type(config).__name__}")

    for section in ("system", "code", "channel"):
        if not isinstance(config.get(section, {}), dict):
            raise ConfigurationError(f"Config section '{section}' must be a mapping")

    system = config.get("system", {})
    code = config.get("code", {})
    channel = config.get("channel", {})

    if system.get("log_level") is not None:
        _log_level(system["log_level"])

    if "max_n" in code:
        _check_positive_number(code["max_n"], "code.max_n", integer=True)
    if "table_timeout_seconds" in code:
        _check_positive_number(
            code["table_timeout_seconds"], "code.table_timeout_seconds", allow_none=True
        )

    seed = channel.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, Integral) or seed < 0):
        raise ConfigurationError(f"channel.seed must be null or a non-negative integer, got {seed!r}")

    if "error_probability" in channel:
        pe = channel["error_probability"]
        if (isinstance(pe, bool) or not isinstance(pe, Real)
                or not math.isfinite(pe) or not 0.0 <= pe <= 1.0):
            raise ConfigurationError(
                f"channel.error_probability must be a number in [0, 1], got {pe!r}"
            )

    return config


def setup_logging(verbose: bool = True, level=None):
    """
    Configure logging for scripts and experiments.

    Args:
        verbose: INFO when True, WARNING otherwise (used when level is None)
        level: Explicit level name or number; takes precedence over verbose
    """
    if level is None:
        level = logging.INFO if verbose else logging.WARNING
    elif isinstance(level, str):
        level = _log_level(level)
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    # basicConfig leaves an already configured root logger untouched
    logging.getLogger().setLevel(level)


def configure_logging(config: Dict[str, Any], quiet: bool = False):
    """
    Apply the system section of a configuration to the root logger.

    system.log_level wins over system.verbose; quiet forces WARNING.
    """
    system = config.get("system", {})
    if quiet:
        setup_logging(verbose=False)
    else:
        setup_logging(verbose=system.get("verbose", True), level=system.get("log_level"))
