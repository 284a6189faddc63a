"""Startup configuration validation helpers.

Provides strict/non-strict YAML config parsing used by the extraction
options loader and the command-line runner.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Iterable

import yaml

logger = logging.getLogger(__name__)


class ConfigValidationError(RuntimeError):
    """Raised when strict startup validation fails."""


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_env_flag(name: str, default: bool = False) -> bool:
    """Resolve a boolean flag from the environment variable ``name``."""
    return _env_flag(name, default=default)


def resolve_strict_config_validation(default: bool = False) -> bool:
    """Resolve strict validation mode from ``STRICT_CONFIG_VALIDATION`` env."""
    return _env_flag("STRICT_CONFIG_VALIDATION", default=default)


def _fail_or_warn(msg: str, strict: bool, fallback: str = "continuing with defaults") -> None:
    if strict:
        raise ConfigValidationError(msg)
    logger.warning("%s; %s", msg, fallback)


def load_yaml_config(
    config_path: str,
    strict: bool = False,
) -> dict[str, Any]:
    """Load and parse a YAML config file.

    In non-strict mode this returns an empty dict on parse/read failures.
    In strict mode this raises ``ConfigValidationError``.
    """
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except FileNotFoundError as exc:
        msg = f"Config file not found: {config_path}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return {}
    except yaml.YAMLError as exc:
        msg = f"Failed to parse config YAML at {config_path}: {exc}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return {}

    if payload is None:
        _fail_or_warn(f"Config file is empty: {config_path}", strict)
        return {}

    if not isinstance(payload, dict):
        _fail_or_warn(
            f"Unexpected config payload type: {type(payload).__name__}", strict
        )
        return {}

    return payload


def get_section(
    config_data: dict[str, Any],
    section_name: str,
    strict: bool = False,
) -> dict[str, Any]:
    """Fetch a top-level section from a config payload.

    A missing section is not an error; a section that is not a mapping is.
    """
    section = config_data.get(section_name)
    if section is None:
        logger.debug("Config has no '%s' section; using defaults", section_name)
        return {}
    if not isinstance(section, dict):
        _fail_or_warn(
            f"Config section '{section_name}' must be a mapping", strict, "using defaults"
        )
        return {}
    return section


def resolve_bool(
    section: dict[str, Any],
    key: str,
    default: bool,
    strict: bool = False,
) -> bool:
    """Read a boolean value, accepting YAML booleans only."""
    if key not in section:
        return default
    value = section[key]
    if isinstance(value, bool):
        return value
    _fail_or_warn(
        f"Config key '{key}' must be a boolean, got {type(value).__name__}",
        strict,
        f"using default {default}",
    )
    return default


def resolve_str_set(
    section: dict[str, Any],
    key: str,
    default: Iterable[str],
    strict: bool = False,
) -> frozenset[str]:
    """Read a list of non-empty strings as a frozen set."""
    if key not in section:
        return frozenset(default)
    value = section[key]
    if not isinstance(value, list):
        _fail_or_warn(
            f"Config key '{key}' must be a list", strict, "using defaults"
        )
        return frozenset(default)

    items: set[str] = set()
    for item in value:
        text = str(item).strip()
        if not text:
            _fail_or_warn(
                f"Config key '{key}' contains an empty entry", strict, "skipping it"
            )
            continue
        items.add(text)
    return frozenset(items)
