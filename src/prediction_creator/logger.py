"""Logging configuration for prediction-creator."""

import logging
from pathlib import Path

ROOT_LOGGER = "prediction_creator"


def get_logger(name: str) -> logging.Logger:
    """Get the logger for the given module name.

    Module loggers are children of the package logger, so they pick up
    whatever handler ``setup_logging`` installed there.
    """
    return logging.getLogger(name)


def setup_logging(log_file: Path | str) -> logging.Logger:
    """Point the package logger at ``log_file``, replacing any previous handler."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # File handler - logs everything
    file_handler = logging.FileHandler(log_file, mode="a", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # Prevent propagation to root logger (avoids console spam)
    logger.propagate = False

    return logger
