"""Logging utility."""
import logging
import sys
from typing import Optional, Union

from app.config import settings


def setup_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Set up and return a logger instance."""
    logger = logging.getLogger(name)
    
    if level is None:
        level = logging.INFO
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    
    logger.setLevel(level)
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    handler.setFormatter(formatter)
    
    # Add handler to logger
    if not logger.handlers:
        logger.addHandler(handler)
    
    return logger


def truncate_for_log(text: Optional[str], limit: int = 100) -> str:
    """Shorten user-supplied text before it goes into a log line."""
    if text is None:
        return ""
    return text if len(text) <= limit else text[:limit] + "..."


# Default logger instance
logger = setup_logger("askweb", settings.LOG_LEVEL)
