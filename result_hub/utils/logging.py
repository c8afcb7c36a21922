"""Logging configuration."""

import logging
import sys
from typing import Any

ROOT_LOGGER_NAME = "result_hub"


def configure_logging(log_level: str = "INFO") -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Avoid stacking handlers when called more than once
    for existing in list(logger.handlers):
        if getattr(existing, "_result_hub_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler._result_hub_handler = True

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the application namespace."""
    return logging.getLogger(name)


def log_query(
    logger: logging.Logger,
    query: str,
    batches: dict[str, int] | None = None,
):
    """
    Log query information.

    Args:
        logger: Logger instance
        query: Query being displayed
        batches: Optional batch sizes keyed by provider id
    """
    logger.info(f"Query: {query!r}")
    if batches:
        logger.debug(f"Batches: {batches}")


def log_results(logger: logging.Logger, results: dict[str, Any]):
    """
    Log result information.

    Args:
        logger: Logger instance
        results: Result information
    """
    logger.info(f"Total results: {results.get('total_results', 0)}")
    logger.debug(f"Results: {results}")
