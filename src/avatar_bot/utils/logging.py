"""structlog setup for the avatar bot.

Local runs get colored console lines; supervised runs and log files get
one JSON object per line. The bot number is bound as context on spawn
so every line a bot emits carries it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import Processor


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Path | None = None,
) -> None:
    """Route structlog through stdlib logging.

    Args:
        level: Minimum level name, e.g. "DEBUG".
        json_format: Render stdout as JSON lines instead of console text.
        log_file: Also append JSON lines to this file.
    """
    threshold = _level(level)
    pre_chain = _pre_chain()

    stdout_chain: list[Processor] = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if json_format:
        stdout_chain += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        stdout_chain.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=stdout_chain,
            foreign_pre_chain=pre_chain,
        )
    )
    handlers: list[logging.Handler] = [stdout_handler]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(),
                ],
                foreign_pre_chain=pre_chain,
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=threshold, handlers=handlers, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key/values (e.g. ``bot_number``) to every later log line."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Drop previously bound keys."""
    structlog.contextvars.unbind_contextvars(*keys)
