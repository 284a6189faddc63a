"""
High-level orchestrator for C# declaration extraction.

This module provides the main entry points for extracting declaration
models from single files or entire directory trees.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from core.structured_logging import file_scope, set_parse_errors
from extraction.models import SourceModel
from extraction.options import ExtractionOptions
from extraction.parser import parse_file, count_error_nodes
from extraction.traversal import extract_model_from_tree

logger = logging.getLogger(__name__)


@dataclass
class FileExtractionDiagnostics:
    """Per-file extraction diagnostics."""

    model: SourceModel
    parse_error_count: int


class ExtractionStats:
    """Statistics for an extraction operation."""

    def __init__(self):
        self.files_processed = 0
        self.files_failed = 0
        self.declarations_extracted = 0
        self.parse_errors = 0

    def record(self, diagnostics: FileExtractionDiagnostics) -> None:
        """Account for one successfully extracted file."""
        self.files_processed += 1
        self.declarations_extracted += diagnostics.model.declaration_count
        self.parse_errors += diagnostics.parse_error_count

    def to_dict(self) -> Dict[str, int]:
        """Convert stats to dictionary."""
        return {
            "files_processed": self.files_processed,
            "files_failed": self.files_failed,
            "declarations_extracted": self.declarations_extracted,
            "parse_errors": self.parse_errors,
        }

    def __str__(self) -> str:
        """String representation of stats."""
        return (
            f"ExtractionStats(processed={self.files_processed}, "
            f"failed={self.files_failed}, declarations={self.declarations_extracted}, "
            f"parse_errors={self.parse_errors})"
        )


def _extract_file_with_diagnostics(
    file_path: str,
    options: ExtractionOptions,
) -> FileExtractionDiagnostics:
    """Extract the declaration model of a single file with parse diagnostics."""
    file_path = os.path.abspath(file_path)

    if not os.path.isfile(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    ext = os.path.splitext(file_path)[1]
    if ext not in options.extensions:
        raise ValueError(
            f"File {file_path} is not a C# source file. "
            f"Expected one of: {sorted(options.extensions)}"
        )

    with file_scope(file_path):
        tree, _ = parse_file(file_path)
        parse_error_count = count_error_nodes(tree)
        set_parse_errors(parse_error_count)

        if tree.root_node.has_error:
            logger.warning(
                "File %s contains syntax errors (%d error nodes)",
                file_path,
                parse_error_count,
            )

        model = extract_model_from_tree(
            tree=tree,
            file_path=file_path,
            legacy_scoping=options.legacy_scoping,
        )

    return FileExtractionDiagnostics(
        model=model,
        parse_error_count=parse_error_count,
    )


def extract_file(
    file_path: str,
    options: Optional[ExtractionOptions] = None,
) -> SourceModel:
    """Extract the declaration model of a single C# source file.

    The model's path is the file's absolute path.

    Args:
        file_path: Absolute or relative path to the .cs file.
        options: Extraction options; defaults when omitted.

    Returns:
        The file's ``SourceModel``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a C# source file.

    Example:
        >>> model = extract_file("src/Person.cs")
        >>> [c.name for c in model.classes]
        ['Person']
    """
    options = options or ExtractionOptions()
    try:
        diagnostics = _extract_file_with_diagnostics(file_path, options)
        return diagnostics.model

    except Exception as e:
        logger.error("Error extracting declarations from %s: %s", file_path, e)
        raise


def discover_csharp_files(
    directory: str,
    options: Optional[ExtractionOptions] = None,
) -> List[str]:
    """Recursively discover all C# source files in a directory.

    Hidden directories and ``options.exclude_dirs`` are skipped.

    Args:
        directory: Root directory to search.
        options: Extraction options; defaults when omitted.

    Returns:
        Sorted list of absolute paths to C# files.
    """
    options = options or ExtractionOptions()
    csharp_files = []
    directory = os.path.abspath(directory)

    logger.info(f"Discovering C# files in {directory}")

    for root, dirs, files in os.walk(directory):
        dirs[:] = [
            d for d in dirs
            if not d.startswith('.') and d not in options.exclude_dirs
        ]

        for file in files:
            ext = os.path.splitext(file)[1]
            if ext in options.extensions:
                csharp_files.append(os.path.join(root, file))

    logger.info(f"Found {len(csharp_files)} C# files")
    return sorted(csharp_files)


def _iter_directory(
    directory: str,
    options: ExtractionOptions,
    stats: ExtractionStats,
    continue_on_error: bool,
) -> Iterator[SourceModel]:
    """Yield one model per file in ``directory``, updating ``stats``."""
    csharp_files = discover_csharp_files(directory, options)

    if not csharp_files:
        logger.warning(f"No C# files found in {directory}")
        return

    logger.info(f"Processing {len(csharp_files)} C# files from {directory}")

    for file_path in csharp_files:
        try:
            diagnostics = _extract_file_with_diagnostics(file_path, options)
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Invalid file {file_path}: {e}")
            stats.files_failed += 1
            if not continue_on_error:
                raise
            continue
        except Exception as e:
            logger.error(f"Unexpected error processing {file_path}: {e}", exc_info=True)
            stats.files_failed += 1
            if not continue_on_error:
                raise
            continue

        stats.record(diagnostics)
        yield diagnostics.model

    logger.info(f"Extraction complete: {stats}")


def extract_directory(
    directory: str,
    options: Optional[ExtractionOptions] = None,
    continue_on_error: bool = True,
) -> tuple[List[SourceModel], ExtractionStats]:
    """Extract declaration models from all C# files in a directory tree.

    Args:
        directory: Root directory to process.
        options: Extraction options; defaults when omitted.
        continue_on_error: If True, continue processing files even if some fail.
                          If False, raise exception on first error.

    Returns:
        A tuple of (models, stats) where:
        - models: One SourceModel per successfully processed file
        - stats: ExtractionStats object with processing statistics

    Raises:
        FileNotFoundError: If directory does not exist.
    """
    directory = os.path.abspath(directory)

    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Directory not found: {directory}")

    options = options or ExtractionOptions()
    stats = ExtractionStats()
    models = list(_iter_directory(directory, options, stats, continue_on_error))
    return models, stats


def iter_extract_models(
    source: str,
    options: Optional[ExtractionOptions] = None,
    stats: Optional[ExtractionStats] = None,
    continue_on_error: bool = True,
) -> Iterator[SourceModel]:
    """Stream declaration models from a file or a directory.

    Args:
        source: Path to a .cs file or a directory.
        options: Extraction options; defaults when omitted.
        stats: Optional stats object updated while streaming.
        continue_on_error: Directory mode only; see ``extract_directory``.

    Raises:
        FileNotFoundError: If the source does not exist.
    """
    source = os.path.abspath(source)
    options = options or ExtractionOptions()
    stats = stats if stats is not None else ExtractionStats()

    if os.path.isfile(source):
        try:
            diagnostics = _extract_file_with_diagnostics(source, options)
        except Exception as e:
            logger.error("Error extracting declarations from %s: %s", source, e)
            stats.files_failed += 1
            raise
        stats.record(diagnostics)
        yield diagnostics.model
    elif os.path.isdir(source):
        yield from _iter_directory(source, options, stats, continue_on_error)
    else:
        raise FileNotFoundError(f"Source not found: {source}")


def iter_extract_to_dict_list(
    source: str,
    options: Optional[ExtractionOptions] = None,
    stats: Optional[ExtractionStats] = None,
    continue_on_error: bool = True,
) -> Iterator[Dict[str, Any]]:
    """Stream declaration models as JSON-ready dictionaries."""
    for model in iter_extract_models(source, options, stats, continue_on_error):
        yield model.to_dict()


def extract_to_dict_list(
    source: str,
    options: Optional[ExtractionOptions] = None,
) -> List[Dict[str, Any]]:
    """Extract declaration models and return them as a list of dictionaries.

    This is a convenience function that automatically detects whether
    the source is a file or directory and returns results in dict format
    ready for JSON serialization.

    Example:
        >>> models = extract_to_dict_list("src/")
        >>> import json
        >>> json.dump(models, open("declarations.json", "w"), indent=2)
    """
    return list(iter_extract_to_dict_list(source, options))
