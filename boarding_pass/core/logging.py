from __future__ import annotations

import contextvars
import json
import logging
import sys
from datetime import datetime, timezone

# Context var to carry the pipeline run_id across awaits
_run_id_ctx: contextvars.ContextVar[str] = contextvars.ContextVar("run_id", default="-")

_EXTRA_KEYS = (
    "stage",
    "outcome",
    "source",
    "error_code",
    "flight_number",
    "airline",
    "duration_ms",
    "text_length",
)


def get_run_id() -> str:
    return _run_id_ctx.get()


def bind_run_id(run_id: str) -> contextvars.Token[str]:
    return _run_id_ctx.set(run_id)


def reset_run_id(token: contextvars.Token[str]) -> None:
    _run_id_ctx.reset(token)


class RunIdFilter(logging.Filter):
    """Inject run_id from contextvars into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003 (shadow builtins)
        record.run_id = get_run_id()
        return True


class StructuredFormatter(logging.Formatter):
    """JSON formatter; copies known `extra` keys onto the output object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": getattr(record, "run_id", "-"),
        }
        for key in _EXTRA_KEYS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)
        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }
        return json.dumps(log_data, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure root logging with a consistent, structured-ish format.

    Safe to call repeatedly; existing root handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(RunIdFilter())
    if json_format:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | run_id=%(run_id)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    handler.setFormatter(formatter)
    root.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
