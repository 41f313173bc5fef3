# MIT License (see LICENSE)
"""
Logging configuration for the charge_sim namespace.

The library itself only creates module loggers; applications (the web app,
scripts, examples) call setup_logging() once at startup.
"""
from __future__ import annotations
import logging
import sys

from .util import env_log_level


def setup_logging(level: int | None = None, log_file: str | None = None) -> None:
    """
    Configure the 'charge_sim' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG). Defaults to the
               CHARGE_SIM_LOG_LEVEL environment variable, else INFO.
        log_file: Optional path to also write logs to a file.
    """
    if level is None:
        level = env_log_level()

    logger = logging.getLogger("charge_sim")
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
