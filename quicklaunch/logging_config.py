"""Logging configuration for the launcher."""
import logging

from .config import LauncherConfig


def setup_logging(config: LauncherConfig) -> logging.Logger:
    logger = logging.getLogger("quicklaunch")
    logger.setLevel(config.log_level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
    logger.addHandler(console_handler)
    return logger
