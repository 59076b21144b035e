"""Constants and enums for the field kind system."""

from enum import Enum
from typing import Dict


class FieldKind(str, Enum):
    """Closed set of field kinds a descriptor can carry."""

    STRING = "String"
    NUMBER = "Number"
    DATE = "Date"
    BOOLEAN = "Boolean"
    OBJECT_REFERENCE = "ObjectReference"
    DECIMAL128 = "Decimal128"
    BINARY_BUFFER = "BinaryBuffer"
    MIXED = "Mixed"
    ARRAY = "Array"
    OBJECT = "Object"
    MAP = "Map"
    VIRTUAL = "Virtual"
    CIRCULAR = "Circular"

    @classmethod
    def from_label(cls, label: str) -> "FieldKind":
        """Normalize a declared kind label, including legacy spellings.

        Raises:
            ValueError: If the label names no known kind
        """
        if label in KIND_ALIASES:
            return KIND_ALIASES[label]
        return cls(label)


# Legacy and ODM-specific spellings of canonical kinds
KIND_ALIASES: Dict[str, FieldKind] = {
    "ObjectId": FieldKind.OBJECT_REFERENCE,
    "ObjectID": FieldKind.OBJECT_REFERENCE,
    "Buffer": FieldKind.BINARY_BUFFER,
    "Embedded": FieldKind.OBJECT,
    "Document": FieldKind.OBJECT,
}


# Interface declaration type names, anything missing falls back to "any"
TYPESCRIPT_TYPE_MAP: Dict[str, str] = {
    FieldKind.STRING.value: "string",
    FieldKind.NUMBER.value: "number",
    FieldKind.BOOLEAN.value: "boolean",
    FieldKind.DATE.value: "Date",
    FieldKind.OBJECT_REFERENCE.value: "string",
    FieldKind.DECIMAL128.value: "Decimal",
    FieldKind.BINARY_BUFFER.value: "any",
    FieldKind.MIXED.value: "any",
    FieldKind.VIRTUAL.value: "any",
}


# Graph schema type names, anything missing falls back to "JSON"
GRAPHQL_TYPE_MAP: Dict[str, str] = {
    FieldKind.STRING.value: "String",
    FieldKind.NUMBER.value: "Float",
    FieldKind.BOOLEAN.value: "Boolean",
    FieldKind.DATE.value: "DateTime",
    FieldKind.OBJECT_REFERENCE.value: "ID",
    FieldKind.DECIMAL128.value: "Decimal",
}


# Field names the walker treats specially
ID_FIELD_NAMES = frozenset({"id", "_id"})
REVISION_FIELD_NAMES = frozenset({"revision_id", "__v"})
TIMESTAMP_FIELD_NAMES = ("createdAt", "updatedAt")

MAX_DEPTH_NOTE = "max depth reached"
CIRCULAR_DESCRIPTION = "Circular reference detected"
DEFAULT_VALIDATION_MESSAGE = "Validation failed"
FUNCTION_MARKER = "[Function]"
