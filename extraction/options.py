"""
Extraction options.

Options are resolved from defaults, then an optional YAML file, then
environment variables (a ``.env`` file is honoured via python-dotenv).

Example config file::

    extraction:
      legacy_scoping: false
      extensions: [".cs"]
      exclude_dirs: ["bin", "obj"]
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, FrozenSet, Optional

from dotenv import load_dotenv

from core.startup_config import (
    get_section,
    load_yaml_config,
    resolve_bool,
    resolve_env_flag,
    resolve_str_set,
    resolve_strict_config_validation,
)
from extraction.config import (
    CONFIG_PATH_ENV,
    CONFIG_SECTION,
    CSHARP_EXTENSIONS,
    DEFAULT_LEGACY_SCOPING,
    EXCLUDED_DIRS,
    LEGACY_SCOPING_ENV,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionOptions:
    """Policy switches for one extraction run.

    Attributes:
        legacy_scoping: Collect members from every descendant of a type and
            share one container-wide parameter list across its methods.
        extensions: File extensions treated as C# sources.
        exclude_dirs: Directory names skipped during discovery.
    """

    legacy_scoping: bool = DEFAULT_LEGACY_SCOPING
    extensions: FrozenSet[str] = field(default_factory=lambda: frozenset(CSHARP_EXTENSIONS))
    exclude_dirs: FrozenSet[str] = field(default_factory=lambda: frozenset(EXCLUDED_DIRS))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "legacy_scoping": self.legacy_scoping,
            "extensions": sorted(self.extensions),
            "exclude_dirs": sorted(self.exclude_dirs),
        }


def options_from_config(config_data: Dict[str, Any], strict: bool = False) -> ExtractionOptions:
    """Build options from a parsed config payload.

    Args:
        config_data: Parsed YAML payload.
        strict: Raise ``ConfigValidationError`` on invalid values instead of
            falling back to defaults.
    """
    defaults = ExtractionOptions()
    section = get_section(config_data, CONFIG_SECTION, strict=strict)
    return ExtractionOptions(
        legacy_scoping=resolve_bool(
            section, "legacy_scoping", defaults.legacy_scoping, strict=strict
        ),
        extensions=resolve_str_set(
            section, "extensions", defaults.extensions, strict=strict
        ),
        exclude_dirs=resolve_str_set(
            section, "exclude_dirs", defaults.exclude_dirs, strict=strict
        ),
    )


def load_extraction_options(
    config_path: Optional[str] = None,
    strict: Optional[bool] = None,
) -> ExtractionOptions:
    """Resolve the options for a run.

    Args:
        config_path: YAML config file. Falls back to ``SKELETON_CONFIG``;
            without either, defaults are used.
        strict: Strict validation; defaults to ``STRICT_CONFIG_VALIDATION``.

    Returns:
        The resolved ``ExtractionOptions``.
    """
    load_dotenv()
    if strict is None:
        strict = resolve_strict_config_validation(default=False)

    path = config_path or os.getenv(CONFIG_PATH_ENV)
    if path:
        options = options_from_config(load_yaml_config(path, strict=strict), strict=strict)
        logger.debug("Loaded extraction options from %s", path)
    else:
        options = ExtractionOptions()

    if os.getenv(LEGACY_SCOPING_ENV) is not None:
        options = replace(
            options,
            legacy_scoping=resolve_env_flag(LEGACY_SCOPING_ENV, default=options.legacy_scoping),
        )
    return options
