import inspect
import logging
import os
import sys

from asgi_correlation_id import correlation_id
from loguru import logger

from slidedeck.core import path_conf
from slidedeck.core.conf import settings


class InterceptHandler(logging.Handler):
    """
    Route standard library logging records into loguru

    `Intercepting standard logging <https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging>`__
    """

    def emit(self, record: logging.LogRecord) -> None:
        # Get the corresponding loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller that originated the logged message
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def default_formatter(record: 'loguru.Record') -> str:  # noqa: F821
    """Default log format, attaches the request id"""
    request_id = correlation_id.get() or settings.TRACE_ID_LOG_DEFAULT_VALUE
    record['extra']['request_id'] = request_id[: settings.TRACE_ID_LOG_LENGTH]
    return settings.LOG_FORMAT.replace('{request_id}', '{extra[request_id]}') + '\n{exception}'


def setup_logging() -> None:
    """
    Configure logging: hand every standard library logger over to loguru

    :return:
    """
    # Set root handler
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(settings.LOG_STD_LEVEL)

    # Remove every other logger's handlers and propagate to root
    for name in logging.root.manager.loggerDict.keys():
        logging.getLogger(name).handlers = []
        if 'uvicorn.access' in name or 'watchfiles.main' in name:
            logging.getLogger(name).propagate = False
        else:
            logging.getLogger(name).propagate = True

    # Remove default loguru handler and add the console sink
    logger.remove()
    logger.add(sys.stdout, level=settings.LOG_STD_LEVEL, format=default_formatter, enqueue=False)


def set_custom_logfile() -> None:
    """
    Add access and error log file sinks

    :return:
    """
    if not os.path.exists(path_conf.LOG_DIR):
        os.mkdir(path_conf.LOG_DIR)

    # Log files
    log_access_file = os.path.join(path_conf.LOG_DIR, settings.LOG_ACCESS_FILENAME)
    log_error_file = os.path.join(path_conf.LOG_DIR, settings.LOG_ERROR_FILENAME)

    # Common file sink options
    log_config = {
        'format': default_formatter,
        'enqueue': True,
        'rotation': '00:00',
        'retention': '7 days',
        'compression': 'tar.gz',
    }

    # Access log file
    logger.add(
        str(log_access_file),
        level=settings.LOG_FILE_ACCESS_LEVEL,
        filter=lambda record: record['level'].no <= 25,
        backtrace=False,
        diagnose=False,
        **log_config,
    )

    # Error log file
    logger.add(
        str(log_error_file),
        level=settings.LOG_FILE_ERROR_LEVEL,
        filter=lambda record: record['level'].no >= 30,
        backtrace=True,
        diagnose=True,
        **log_config,
    )


log = logger
