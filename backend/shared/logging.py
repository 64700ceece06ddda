"""Structured logging for the Groundhog engine.

setup_logging() routes structlog through stdlib logging, so engine events
(structlog.get_logger) and persistence warnings (logging.getLogger) share one
set of handlers. Format, level and the optional log directory come from
GroundhogSettings (GROUNDHOG_LOG_FORMAT, GROUNDHOG_LOG_LEVEL, GROUNDHOG_LOG_DIR).

While a game is running, every line carries its session id and mode, bound by
the engine through bind_session_context(). Stdlib records get the same context
through the formatter's pre-chain.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Literal

import structlog

if TYPE_CHECKING:
    from collections.abc import MutableMapping
    from typing import Any

    from structlog.typing import Processor

LogFormat = Literal["console", "json"]

LOG_FILE_PREFIX = "groundhog"
LOG_FILE_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

_SESSION_KEYS = ("session_id", "mode")


def _render_enums(
    _logger: object,
    _method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Log game enums (mode, state, suit, animation) by their value."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def _common_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _render_enums,
    ]


def _is_test() -> bool:
    return "pytest" in sys.modules


def configure_structlog() -> None:
    """Send structlog events to stdlib logging without installing handlers.

    This alone is enough for pytest's caplog; setup_logging() adds output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_common_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def _formatter(*, log_format: LogFormat, colors: bool) -> logging.Formatter:
    if log_format == "json":
        tail: list[Processor] = [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        tail = [structlog.dev.ConsoleRenderer(colors=colors)]
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_common_processors(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *tail],
    )


def setup_logging(
    log_dir: Path | str | None = None,
    *,
    level: int | str = "INFO",
    log_format: LogFormat = "console",
) -> Path | None:
    """Install stdout and optional file handlers on the root logger.

    Replaces any handlers from an earlier call. Returns the path of the
    timestamped log file, or None when there is no log_dir or when running
    under pytest.
    """
    configure_structlog()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(_formatter(log_format=log_format, colors=sys.stdout.isatty()))
    root_logger.addHandler(stdout_handler)

    if log_dir is None or _is_test():
        return None

    dir_path = Path(log_dir)
    dir_path.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now(tz=UTC).strftime(LOG_FILE_TIMESTAMP_FORMAT)
    file_path = dir_path / f"{LOG_FILE_PREFIX}_{timestamp}.log"
    file_handler = logging.FileHandler(file_path, encoding="utf-8")
    file_handler.setFormatter(_formatter(log_format=log_format, colors=False))
    root_logger.addHandler(file_handler)
    return file_path


def bind_session_context(session_id: str, mode: Enum) -> None:
    """Tag every following log line with the active game session."""
    structlog.contextvars.bind_contextvars(session_id=session_id, mode=mode)


def clear_session_context() -> None:
    structlog.contextvars.unbind_contextvars(*_SESSION_KEYS)
