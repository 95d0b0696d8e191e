"""Structured JSON logging shared by the app and the Uvicorn server."""

import logging
import sys

from pythonjsonlogger import jsonlogger

UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(level: str = "INFO"):
    """
    Routes the root and Uvicorn loggers through one JSON stdout handler.

    Records carry timestamp, level, logger name, message, trace_id and
    span_id; the last two are filled in by ddtrace log injection.

    Args:
        level: Log level name applied to every configured logger.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [stream_handler]

    for logger_name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        server_logger.handlers = [stream_handler]
        server_logger.propagate = False

    return root_logger
