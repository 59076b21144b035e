"""Logging utilities for the schema extractor."""

import logging
import sys

from schema_extractor.settings import settings

# Create and configure package logger
logger = logging.getLogger("schema_extractor")

logging_level = getattr(logging, settings.logging_level.upper(), logging.INFO)

logger.setLevel(logging_level)

# Create formatter with process and thread IDs
formatter = logging.Formatter("%(asctime)s - PID:%(process)d - Thread:%(thread)d - %(name)s - %(levelname)s - %(message)s")

# Create and configure stdout handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(formatter)

# Add stdout handler to logger
logger.addHandler(console_handler)

# Prevent propagation to root logger to avoid duplicate logs
logger.propagate = False
