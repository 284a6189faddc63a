"""Core shared utilities: logging context, startup config, run reports."""

from core.structured_logging import (
    configure_structured_logging,
    file_scope,
    get_parse_errors,
    get_run_id,
    get_source_file,
    set_parse_errors,
    set_run_id,
)
from core.startup_config import (
    ConfigValidationError,
    get_section,
    load_yaml_config,
    resolve_bool,
    resolve_env_flag,
    resolve_str_set,
    resolve_strict_config_validation,
)
from core.run_artifacts import build_run_report, write_run_report

__all__ = [
    "configure_structured_logging",
    "file_scope",
    "get_parse_errors",
    "get_run_id",
    "get_source_file",
    "set_parse_errors",
    "set_run_id",
    "ConfigValidationError",
    "get_section",
    "load_yaml_config",
    "resolve_bool",
    "resolve_env_flag",
    "resolve_str_set",
    "resolve_strict_config_validation",
    "build_run_report",
    "write_run_report",
]
