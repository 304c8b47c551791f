import logging
import os
from typing import Optional

from pythonjsonlogger import json

LOG_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"


def setup_logger(level: Optional[str] = None) -> None:
    """
    Configure JSON logging on the root logger.

    :param level: Log level name. Falls back to LOG_LEVEL, then WARNING.
    :return: None
    """
    log_level = level or os.environ.get("LOG_LEVEL", "WARNING")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if root_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        json.JsonFormatter(LOG_FORMAT, static_fields={"app": "church-calendar"})
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the application.
    :param name: The name of the logger, usually __name__.
    :return: Logger object.
    """
    return logging.getLogger(name)
