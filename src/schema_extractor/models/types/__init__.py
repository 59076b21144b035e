"""Field kind definitions for the schema extractor."""

from schema_extractor.models.types.constants import (
    CIRCULAR_DESCRIPTION,
    DEFAULT_VALIDATION_MESSAGE,
    FUNCTION_MARKER,
    GRAPHQL_TYPE_MAP,
    ID_FIELD_NAMES,
    KIND_ALIASES,
    MAX_DEPTH_NOTE,
    REVISION_FIELD_NAMES,
    TIMESTAMP_FIELD_NAMES,
    TYPESCRIPT_TYPE_MAP,
    FieldKind,
)

__all__ = [
    "CIRCULAR_DESCRIPTION",
    "DEFAULT_VALIDATION_MESSAGE",
    "FUNCTION_MARKER",
    "FieldKind",
    "GRAPHQL_TYPE_MAP",
    "ID_FIELD_NAMES",
    "KIND_ALIASES",
    "MAX_DEPTH_NOTE",
    "REVISION_FIELD_NAMES",
    "TIMESTAMP_FIELD_NAMES",
    "TYPESCRIPT_TYPE_MAP",
]
