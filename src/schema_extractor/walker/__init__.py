"""Schema walker package."""

from schema_extractor.walker.kinds import resolve_kind
from schema_extractor.walker.paths import SchemaPath
from schema_extractor.walker.walker import ModelSchema, SchemaWalker, extract_field, extract_model

__all__ = [
    "ModelSchema",
    "SchemaPath",
    "SchemaWalker",
    "extract_field",
    "extract_model",
    "resolve_kind",
]
