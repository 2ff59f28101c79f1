"""Logging helpers using loguru for consistency with the main app"""

from loguru import logger


def get_logger():
    """Get the loguru logger instance with vehicle_count context"""
    return logger.bind(name="vehicle_count")
