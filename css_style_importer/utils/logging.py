"""Logging utility for CSS Style Importer."""

import logging
import os
from typing import Optional
from .config import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(log_level: int = getattr(logging, LOG_LEVEL),
                  log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Args:
        log_level: Root log level
        log_file: Optional file to mirror log records into
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )

# Exported functions
__all__ = ['setup_logging']
