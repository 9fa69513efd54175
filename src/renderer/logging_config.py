"""Logging configuration for the command line renderer."""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Set up logging on the root logger.

    Library modules only create loggers with logging.getLogger(__name__);
    handlers are attached here, once, by the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a file that receives the same records

    Returns:
        The configured root logger
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Replace handlers from a previous call instead of stacking them.
    for handler in list(logger.handlers):
        if getattr(handler, "_pathtracer", False):
            logger.removeHandler(handler)
            handler.close()

    handlers = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        handler._pathtracer = True
        logger.addHandler(handler)

    return logger
