"""Structured logging helpers with run and source-file context."""

from __future__ import annotations

import contextvars
import logging
import uuid
from contextlib import contextmanager
from typing import Iterator

_RUN_ID_VAR: contextvars.ContextVar[str] = contextvars.ContextVar(
    "run_id", default="-"
)
_SOURCE_FILE_VAR: contextvars.ContextVar[str] = contextvars.ContextVar(
    "source_file", default="-"
)
_PARSE_ERRORS_VAR: contextvars.ContextVar[str] = contextvars.ContextVar(
    "parse_errors", default="-"
)

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | run_id=%(run_id)s | file=%(source_file)s | "
    "parse_errors=%(parse_errors)s | %(name)s | %(message)s"
)


class _ExtractionContextFilter(logging.Filter):
    """Inject run, source-file and parse-error fields into all log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID_VAR.get("-")
        record.source_file = _SOURCE_FILE_VAR.get("-")
        record.parse_errors = _PARSE_ERRORS_VAR.get("-")
        return True


def _ensure_filter_on_root_handlers() -> None:
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        has_filter = any(
            isinstance(f, _ExtractionContextFilter) for f in handler.filters
        )
        if not has_filter:
            handler.addFilter(_ExtractionContextFilter())


def configure_structured_logging(level: int = logging.INFO) -> None:
    """Configure root logging format with run/file context."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root_logger.setLevel(level)
        formatter = logging.Formatter(LOG_FORMAT)
        for handler in root_logger.handlers:
            handler.setFormatter(formatter)
    _ensure_filter_on_root_handlers()


def set_run_id(run_id: str | None = None) -> str:
    """Set or generate run correlation ID."""
    value = run_id or str(uuid.uuid4())
    _RUN_ID_VAR.set(value)
    return value


def get_run_id() -> str:
    """Get current run correlation ID."""
    return _RUN_ID_VAR.get("-")


def get_source_file() -> str:
    """Get the file currently being extracted."""
    return _SOURCE_FILE_VAR.get("-")


def get_parse_errors() -> str:
    """Get the error-node count of the file currently being extracted."""
    return _PARSE_ERRORS_VAR.get("-")


def set_parse_errors(count: int) -> None:
    """Tag logs of the current file with its error-node count.

    Only meaningful inside ``file_scope``, which clears the value on exit.
    """
    _PARSE_ERRORS_VAR.set(str(count))


@contextmanager
def file_scope(path: str) -> Iterator[None]:
    """Temporarily tag emitted logs with the file being extracted."""
    file_token = _SOURCE_FILE_VAR.set(path)
    errors_token = _PARSE_ERRORS_VAR.set("-")
    try:
        yield
    finally:
        _PARSE_ERRORS_VAR.reset(errors_token)
        _SOURCE_FILE_VAR.reset(file_token)
