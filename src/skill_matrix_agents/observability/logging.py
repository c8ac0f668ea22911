"""Structured logging for extraction runs.

Log output always goes to a single stderr handler so that ``skill-matrix
extract`` can keep stdout for the matrix JSON. Events emitted while one
document is being extracted carry its ``document_id``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, TYPE_CHECKING

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars

if TYPE_CHECKING:
    from skill_matrix_core.config.settings import Settings

# Transport libraries that log every request at DEBUG
_QUIET_LOGGERS = ("httpx", "httpcore", "anthropic")


def configure_logging(settings: Settings, stream: IO[str] | None = None) -> None:
    """Route structlog and stdlib logging through one handler on ``stream``.

    ``log_format == "json"`` renders one JSON object per line with
    exceptions as structured tracebacks. The console renderer only uses
    colour when the stream is a terminal, so piped CLI output stays clean.
    """
    stream = stream or sys.stderr
    level = _resolve_level(settings.log_level)

    shared_processors: list[structlog.types.Processor] = [
        merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    render_chain: list[structlog.types.Processor]
    if settings.log_format == "json":
        render_chain = [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        render_chain = [structlog.dev.ConsoleRenderer(colors=stream.isatty())]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *render_chain,
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


@contextmanager
def document_context(document_id: str) -> Iterator[None]:
    """Tag every log event inside the block with ``document_id``.

    Any outer binding is restored on exit.
    """
    with bound_contextvars(document_id=document_id):
        yield


def _resolve_level(level_name: str) -> int:
    """Convert a level name to a logging level int, defaulting to INFO."""
    return logging.getLevelNamesMapping().get(level_name.upper(), logging.INFO)
