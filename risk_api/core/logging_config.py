"""
Loguru setup: one JSON line per record on stderr, tagged with the id of the
request being served.

Standard logging calls (ours, uvicorn's, starlette's) are routed into loguru.
"""

import json
import logging
import sys
import traceback
from contextvars import ContextVar
from types import FrameType
from typing import Optional

from loguru import logger

from risk_api.core.config import settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class InterceptHandler(logging.Handler):
    """Forwards stdlib log records to loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging's own frames so loguru reports the real call site
        frame: Optional[FrameType] = sys._getframe(settings.LOGGING_FRAME_DEPTH)
        depth: int = settings.LOGGING_FRAME_DEPTH
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def context_filter(record):
    request_id = request_id_var.get()
    if request_id and request_id != "-":
        record["extra"]["request_id"] = request_id
    return record


def _format_exception(exception) -> dict:
    traceback_text = None
    if exception.traceback:
        try:
            traceback_text = "".join(
                traceback.format_exception(
                    exception.type, exception.value, exception.traceback
                )
            ).strip()
        except Exception:
            traceback_text = str(exception.traceback)

    return {
        "type": exception.type.__name__ if exception.type else None,
        "value": str(exception.value) if exception.value else None,
        "traceback": traceback_text,
    }


def build_simplified_json_record(record):
    """Reduce a loguru record to timestamp, level, logger, message, request_id, exception."""
    log_record = {
        "timestamp": record["time"].strftime("%Y-%m-%d %H:%M:%S"),
        "level": record["level"].name,
        "logger": record["name"],
        "message": record["message"],
    }

    if "request_id" in record["extra"]:
        log_record["request_id"] = record["extra"]["request_id"]

    log_record["exception"] = (
        _format_exception(record["exception"]) if record["exception"] else None
    )
    return log_record


def custom_json_sink(message):
    sys.stderr.write(json.dumps(build_simplified_json_record(message.record)) + "\n")


def configure_logging():
    """Install the JSON sink at settings.LOG_LEVEL and intercept stdlib logging."""
    logger.remove()

    logger.add(
        custom_json_sink,
        level=settings.LOG_LEVEL,
        backtrace=True,
        diagnose=settings.is_local,
        filter=context_filter,
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logger.info("Logging configured successfully with loguru")


def set_request_id(request_id: str):
    request_id_var.set(request_id)


def clear_request_id():
    request_id_var.set("-")


def get_request_id() -> str:
    return request_id_var.get()
