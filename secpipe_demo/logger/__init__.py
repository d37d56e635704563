"""Logger module for the secpipe demo service

The service logs through the Logger interface so tests and embedders can
drop in their own implementation.

Usage:
    from secpipe_demo.logger import session_logger

    session_logger.info("Application started", port=3000)
"""

import logging
import os

from .base import Logger
from .structured_logger import StructuredLogger

# Configuration from environment
LOG_LEVEL_STR = os.environ.get("SECPIPE_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.environ.get("SECPIPE_LOG_FILE")
LOG_JSON = os.environ.get("SECPIPE_LOG_JSON", "false").lower() == "true"

# Map string level to logging constant
LOG_LEVEL = getattr(logging, LOG_LEVEL_STR, logging.INFO)

# Shared logger instance
session_logger: Logger = StructuredLogger(
    level=LOG_LEVEL,
    log_file=LOG_FILE,
    json_format=LOG_JSON
)

__all__ = [
    "Logger",
    "StructuredLogger",
    "session_logger",
]
