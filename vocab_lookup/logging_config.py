"""Logging configuration for the vocabulary lookup service"""

import logging
import sys


def setup_logging(
    level: str = "INFO", log_file: str | None = None, fmt: str | None = None
) -> logging.Logger:
    """Setup logging configuration

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to
        fmt: Optional format for the file handler

    Returns:
        Configured logger instance
    """
    # Namespaced parent logger that children propagate to
    logger = logging.getLogger("vocab_lookup")
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    detailed_fmt = fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Concise console output unless DEBUG
    if level.upper() == "DEBUG":
        console_fmt = logging.Formatter(fmt=detailed_fmt, datefmt="%Y-%m-%d %H:%M:%S")
    else:
        console_fmt = logging.Formatter(fmt="%(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_fmt)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(fmt=detailed_fmt, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "vocab_lookup") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
