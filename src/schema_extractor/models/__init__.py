"""Model definitions for the schema extractor."""

from schema_extractor.models.descriptor import FieldDescriptor, ValidatorDescriptor
from schema_extractor.models.options import ExtractionFlags, ExtractOptions, Feature
from schema_extractor.models.registry import ModelRegistry
from schema_extractor.models.relationship import Relationship, RelationshipType
from schema_extractor.models.types import FieldKind

__all__ = [
    "ExtractOptions",
    "ExtractionFlags",
    "Feature",
    "FieldDescriptor",
    "FieldKind",
    "ModelRegistry",
    "Relationship",
    "RelationshipType",
    "ValidatorDescriptor",
]
