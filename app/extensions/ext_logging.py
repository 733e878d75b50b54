from contextvars import ContextVar
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional
import uuid

from configs import AppConfig, app_config

trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)


def trace_id_generator() -> str:
    return str(uuid.uuid4().hex)


def init_app(config: AppConfig = app_config):
    log_handlers: list[logging.Handler] = []
    log_file = config.LOG_FILE
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        log_handlers.append(
            RotatingFileHandler(
                filename=log_file,
                maxBytes=config.LOG_FILE_MAX_SIZE * 1024 * 1024,
                backupCount=config.LOG_FILE_BACKUP_COUNT,
                encoding="utf-8",
            )
        )

    # Always add StreamHandler to log to console
    sh = logging.StreamHandler(sys.stdout)
    log_handlers.append(sh)

    # Apply TraceIdFilter to all handlers
    for handler in log_handlers:
        handler.addFilter(TraceIdFilter())

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFORMAT,
        handlers=log_handlers,
        force=True,
    )

    apply_trace_id_formatter(config)

    # httpx logs every request at INFO; the client middleware already does
    for name in config.LOG_SUPPRESS.split(","):
        if name.strip():
            logging.getLogger(name.strip()).setLevel(logging.WARNING)

    log_tz = config.LOG_TZ
    if log_tz:
        from datetime import datetime

        import pytz

        timezone = pytz.timezone(log_tz)

        def time_converter(seconds):
            return datetime.fromtimestamp(seconds, tz=timezone).timetuple()

        for handler in logging.root.handlers:
            if handler.formatter:
                handler.formatter.converter = time_converter


class TraceIdFilter(logging.Filter):
    # Stamps each record with the trace id of the dispatch in progress, if any.
    def filter(self, record):
        trace_id = trace_id_var.get()
        record.trace_id = trace_id or ""
        return True


class TraceIdFormatter(logging.Formatter):
    def format(self, record):
        if not hasattr(record, "trace_id"):
            record.trace_id = ""
        return super().format(record)


def apply_trace_id_formatter(config: AppConfig = app_config):
    for handler in logging.root.handlers:
        if handler.formatter:
            handler.formatter = TraceIdFormatter(config.LOG_FORMAT, config.LOG_DATEFORMAT)
