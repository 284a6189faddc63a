"""Tests for extraction option resolution."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from core.startup_config import ConfigValidationError
from extraction.config import CSHARP_EXTENSIONS, EXCLUDED_DIRS
from extraction.options import (
    ExtractionOptions,
    load_extraction_options,
    options_from_config,
)


class TestOptionsFromConfig(unittest.TestCase):
    def test_defaults_without_section(self) -> None:
        options = options_from_config({})
        self.assertEqual(options, ExtractionOptions())
        self.assertFalse(options.legacy_scoping)
        self.assertEqual(options.extensions, frozenset(CSHARP_EXTENSIONS))
        self.assertEqual(options.exclude_dirs, frozenset(EXCLUDED_DIRS))

    def test_section_values(self) -> None:
        options = options_from_config(
            {
                "extraction": {
                    "legacy_scoping": True,
                    "extensions": [".cs", ".csx"],
                    "exclude_dirs": ["generated"],
                }
            }
        )
        self.assertTrue(options.legacy_scoping)
        self.assertEqual(options.extensions, frozenset({".cs", ".csx"}))
        self.assertEqual(options.exclude_dirs, frozenset({"generated"}))

    def test_invalid_bool_non_strict_uses_default(self) -> None:
        options = options_from_config({"extraction": {"legacy_scoping": "maybe"}})
        self.assertFalse(options.legacy_scoping)

    def test_invalid_bool_strict_raises(self) -> None:
        with self.assertRaises(ConfigValidationError):
            options_from_config({"extraction": {"legacy_scoping": "maybe"}}, strict=True)

    def test_section_not_mapping_strict_raises(self) -> None:
        with self.assertRaises(ConfigValidationError):
            options_from_config({"extraction": ["legacy_scoping"]}, strict=True)

    def test_to_dict(self) -> None:
        payload = ExtractionOptions(legacy_scoping=True).to_dict()
        self.assertTrue(payload["legacy_scoping"])
        self.assertEqual(payload["extensions"], [".cs"])


class TestLoadExtractionOptions(unittest.TestCase):
    def _write_config(self, tmpdir: str, content: str) -> str:
        path = Path(tmpdir) / "extraction.yml"
        path.write_text(content, encoding="utf-8")
        return str(path)

    def test_defaults_without_config(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            options = load_extraction_options()
        self.assertEqual(options, ExtractionOptions())

    def test_yaml_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write_config(tmpdir, "extraction:\n  legacy_scoping: true\n")
            with patch.dict(os.environ, {}, clear=True):
                options = load_extraction_options(path)
        self.assertTrue(options.legacy_scoping)

    def test_config_path_from_env(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write_config(tmpdir, "extraction:\n  exclude_dirs: [gen]\n")
            with patch.dict(os.environ, {"SKELETON_CONFIG": path}, clear=True):
                options = load_extraction_options()
        self.assertEqual(options.exclude_dirs, frozenset({"gen"}))

    def test_env_flag_overrides_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = self._write_config(tmpdir, "extraction:\n  legacy_scoping: true\n")
            with patch.dict(os.environ, {"SKELETON_LEGACY_SCOPING": "false"}, clear=True):
                options = load_extraction_options(path)
        self.assertFalse(options.legacy_scoping)

    def test_missing_file_strict_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ConfigValidationError):
                load_extraction_options("/definitely/missing.yml", strict=True)

    def test_missing_file_non_strict_uses_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            options = load_extraction_options("/definitely/missing.yml", strict=False)
        self.assertEqual(options, ExtractionOptions())


if __name__ == "__main__":
    unittest.main()
