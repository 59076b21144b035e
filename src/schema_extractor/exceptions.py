"""Custom exceptions for the schema extractor."""


class SchemaExtractorError(Exception):
    """Base exception for schema extractor errors."""

    pass


class SchemaInputError(SchemaExtractorError):
    """Raised when the extraction input is not a usable model collection."""

    pass


class InvalidDescriptorError(SchemaExtractorError):
    """Raised when a field descriptor breaks its shape invariants."""

    pass


class ConfigError(SchemaExtractorError):
    """Raised when the extraction config file is missing or invalid."""

    pass


class BootstrapError(SchemaExtractorError):
    """Raised when the config bootstrap function fails or returns no models."""

    pass
