"""
Logging package - service logger.

Usage:
    from src.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Starting query...")
    logger.success("Completed!")
"""

from src.logging.logger import get_logger, configure_logging, ServiceLogger

__all__ = [
    "get_logger",
    "configure_logging",
    "ServiceLogger",
]
