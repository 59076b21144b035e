"""Extract model schemas into compact, typed and documented formats."""

from schema_extractor.exceptions import (
    BootstrapError,
    ConfigError,
    InvalidDescriptorError,
    SchemaExtractorError,
    SchemaInputError,
)
from schema_extractor.extractor import extract_relationships, extract_schemas, resolve_models
from schema_extractor.models import ExtractOptions, FieldDescriptor, FieldKind, ModelRegistry
from schema_extractor.renderers import (
    format_compact,
    format_graphql,
    format_human,
    format_json,
    format_raw,
    format_typescript,
    map_to_graphql_type,
    map_to_typescript_type,
    render,
)
from schema_extractor.walker import extract_field, extract_model

__all__ = [
    "BootstrapError",
    "ConfigError",
    "ExtractOptions",
    "FieldDescriptor",
    "FieldKind",
    "InvalidDescriptorError",
    "ModelRegistry",
    "SchemaExtractorError",
    "SchemaInputError",
    "extract_field",
    "extract_model",
    "extract_relationships",
    "extract_schemas",
    "format_compact",
    "format_graphql",
    "format_human",
    "format_json",
    "format_raw",
    "format_typescript",
    "map_to_graphql_type",
    "map_to_typescript_type",
    "render",
    "resolve_models",
]
