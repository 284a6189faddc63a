#!/usr/bin/env python3
"""
Command-line runner for C# declaration extraction.

Extracts one declaration model per C# file and writes the models as JSONL,
one SourceModel per line, for a skeleton generator to consume. A JSON run
report with processing statistics is written next to the output.

Usage:
    python run_extraction.py --source /path/to/csharp/repo
    python run_extraction.py --source ./src/Person.cs --output-file out/person.jsonl
    python run_extraction.py --source ./src --config extraction.yml --legacy-scoping
"""

import argparse
import dataclasses
import json
import logging
import os
import sys
import time
from typing import List, Optional

from core.run_artifacts import DEFAULT_REPORT_DIR, build_run_report, write_run_report
from core.startup_config import ConfigValidationError
from core.structured_logging import configure_structured_logging, set_run_id

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="C# Declaration Extraction for Skeleton Generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python run_extraction.py --source ./src\n"
            "  python run_extraction.py --source ./src --output-file out/decls.jsonl\n"
        )
    )

    parser.add_argument(
        "--source",
        required=True,
        help="Path to a C# file or a directory to extract from."
    )
    parser.add_argument(
        "--output-file",
        default="output/declarations.jsonl",
        help="Path for the JSONL output. Default: output/declarations.jsonl"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML file with an 'extraction' section."
    )
    parser.add_argument(
        "--legacy-scoping",
        action="store_true",
        default=False,
        help="Share one container-wide parameter list across methods, "
             "and collect members from nested types as well."
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        default=False,
        help="Stop at the first file that cannot be extracted."
    )
    parser.add_argument(
        "--report-dir",
        default=DEFAULT_REPORT_DIR,
        help=f"Directory for the JSON run report. Default: {DEFAULT_REPORT_DIR}"
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level. Default: INFO"
    )

    return parser.parse_args(argv)


def run_extraction(
    source: str,
    output_file: str,
    options,
    continue_on_error: bool = True,
):
    """Extract declaration models and serialize them to JSONL on disk.

    Args:
        source: Path to a C# file or directory.
        output_file: Path to write the JSONL output.
        options: ExtractionOptions for the run.
        continue_on_error: Keep going when a file fails.

    Returns:
        The ExtractionStats of the run.

    Raises:
        FileNotFoundError: If source does not exist.
    """
    from extraction.extractor import ExtractionStats, iter_extract_to_dict_list

    if not os.path.exists(source):
        raise FileNotFoundError(f"Source not found: {source}")

    logger.info(f"Source           : {os.path.abspath(source)}")
    logger.info(f"Output file      : {os.path.abspath(output_file)}")
    logger.info(f"Legacy scoping   : {options.legacy_scoping}")

    os.makedirs(os.path.dirname(os.path.abspath(output_file)), exist_ok=True)

    stats = ExtractionStats()
    lines_written = 0
    with open(output_file, "w", encoding="utf-8") as f:
        for model in iter_extract_to_dict_list(
            source, options, stats=stats, continue_on_error=continue_on_error
        ):
            f.write(json.dumps(model, ensure_ascii=False) + "\n")
            lines_written += 1

    logger.info(f"Wrote {lines_written} models to {output_file}")
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the runner.

    Returns:
        Process exit code.
    """
    args = parse_args(argv)
    configure_structured_logging(level=getattr(logging, args.log_level))
    run_id = set_run_id()

    from extraction.options import load_extraction_options

    status = "failed"
    stats = None
    options = None
    t0 = time.time()
    try:
        options = load_extraction_options(args.config)
        if args.legacy_scoping:
            options = dataclasses.replace(options, legacy_scoping=True)

        stats = run_extraction(
            args.source,
            args.output_file,
            options,
            continue_on_error=not args.fail_fast,
        )
        status = "success" if stats.files_failed == 0 else "partial"
        if stats.files_processed == 0 and stats.files_failed == 0:
            logger.warning("No C# files extracted.")

    except ConfigValidationError as e:
        logger.error(f"Configuration error: {e}")
    except FileNotFoundError as e:
        logger.error(f"File error: {e}")
    except Exception as e:
        logger.error(f"Extraction failed: {e}", exc_info=True)
    finally:
        report = build_run_report(
            status=status,
            source=os.path.abspath(args.source),
            output_file=os.path.abspath(args.output_file),
            stats=stats.to_dict() if stats is not None else {},
            options=options.to_dict() if options is not None else {},
            duration_seconds=time.time() - t0,
        )
        report_path = write_run_report(report, run_id, output_dir=args.report_dir)
        logger.info(f"Run report written to {report_path}")

    return 0 if status == "success" else 1


if __name__ == "__main__":
    sys.exit(main())
