"""Constants for the application."""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOGGING_LEVEL = os.environ.get("LOGGING_LEVEL", "INFO").upper()

# Config file lookup, relative to the working directory
CONFIG_FILE_NAME = "schema_extract_config.py"

# Output settings
DEFAULT_OUTPUT_PATH = "./schemas"
DEFAULT_OUTPUT_FILE_NAME = "schema"
