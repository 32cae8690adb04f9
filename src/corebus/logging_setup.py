"""
Logging setup driven by LoggingConfig.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import LoggingConfig, get_config

ROOT_LOGGER_NAME = "corebus"


def configure_logging(config: Optional[LoggingConfig] = None,
                      debug: Optional[bool] = None) -> logging.Logger:
    """
    Attach a handler to the ``corebus`` logger.

    Re-running replaces the handler installed by a previous call, so
    configuration can be changed at runtime without duplicating output.

    Args:
        config: Logging configuration, defaults to the global config
        debug: Force the DEBUG level, defaults to the global config's ``debug``

    Returns:
        The configured package logger
    """
    if debug is None:
        debug = get_config().debug
    config = config or get_config().logging
    logger = logging.getLogger(ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, "_corebus_handler", False):
            logger.removeHandler(handler)
            handler.close()

    if config.file_path:
        handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count
        )
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(config.format))
    handler._corebus_handler = True
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else config.level.upper())
    return logger
