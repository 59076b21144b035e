"""App settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from schema_extractor.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_OUTPUT_FILE_NAME,
    DEFAULT_OUTPUT_PATH,
    LOGGING_LEVEL,
)


class Settings(BaseSettings):
    """Schema extractor settings."""

    model_config = SettingsConfigDict(env_prefix="SCHEMA_EXTRACT_", extra="ignore")

    # Logging
    logging_level: str = LOGGING_LEVEL

    # Config file
    config_file_name: str = CONFIG_FILE_NAME

    # Output defaults used by the config template
    default_output_path: str = DEFAULT_OUTPUT_PATH
    default_output_file_name: str = DEFAULT_OUTPUT_FILE_NAME

    # Default traversal depth
    default_depth: int = 10


settings = Settings()
