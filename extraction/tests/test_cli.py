"""Tests for the run_extraction command-line runner."""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

import run_extraction


class TestRunExtractionCli(unittest.TestCase):
    def setUp(self) -> None:
        self.fixtures_dir = Path(__file__).parent / "fixtures"
        self.env = patch.dict(os.environ, {}, clear=True)
        self.env.start()
        self.addCleanup(self.env.stop)

    def _run(self, tmpdir: str, *extra: str) -> tuple[int, Path, Path]:
        output = Path(tmpdir) / "out" / "decls.jsonl"
        report_dir = Path(tmpdir) / "reports"
        code = run_extraction.main(
            [
                "--source", str(self.fixtures_dir / "sample_repo"),
                "--output-file", str(output),
                "--report-dir", str(report_dir),
                "--log-level", "WARNING",
                *extra,
            ]
        )
        return code, output, report_dir

    def test_writes_jsonl_and_report(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            code, output, report_dir = self._run(tmpdir)
            self.assertEqual(code, 0)

            lines = output.read_text(encoding="utf-8").splitlines()
            self.assertEqual(len(lines), 2)
            first = json.loads(lines[0])
            self.assertEqual(first["classes"][0]["name"], "Order")

            reports = list(report_dir.glob("*.json"))
            self.assertEqual(len(reports), 1)
            report = json.loads(reports[0].read_text(encoding="utf-8"))
            self.assertEqual(report["status"], "success")
            self.assertEqual(report["stats"]["files_processed"], 2)
            self.assertFalse(report["options"]["legacy_scoping"])

    def test_legacy_scoping_flag(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            code, _, report_dir = self._run(tmpdir, "--legacy-scoping")
            self.assertEqual(code, 0)
            report = json.loads(next(report_dir.glob("*.json")).read_text(encoding="utf-8"))
            self.assertTrue(report["options"]["legacy_scoping"])

    def test_missing_source_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            report_dir = Path(tmpdir) / "reports"
            code = run_extraction.main(
                [
                    "--source", str(Path(tmpdir) / "missing"),
                    "--output-file", str(Path(tmpdir) / "out.jsonl"),
                    "--report-dir", str(report_dir),
                    "--log-level", "ERROR",
                ]
            )
            self.assertEqual(code, 1)
            report = json.loads(next(report_dir.glob("*.json")).read_text(encoding="utf-8"))
            self.assertEqual(report["status"], "failed")

    def test_strict_config_error_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            os.environ["STRICT_CONFIG_VALIDATION"] = "true"
            code, _, _ = self._run(tmpdir, "--config", str(Path(tmpdir) / "missing.yml"))
            self.assertEqual(code, 1)


if __name__ == "__main__":
    unittest.main()
