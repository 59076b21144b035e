"""Shared helpers for schema renderers."""

import json
from typing import Any, Dict, Iterator, Mapping, Tuple

from schema_extractor.models.types import FieldKind

Schemas = Mapping[str, Mapping[str, Any]]


def is_circular_model(fields: Any) -> bool:
    """Check whether a model schema is the root-level circular marker."""
    return isinstance(fields, Mapping) and fields.get("type") == FieldKind.CIRCULAR.value


def iter_fields(fields: Any) -> Iterator[Tuple[str, Dict[str, Any]]]:
    """Iterate field descriptors, skipping entries that are not mappings."""
    if not isinstance(fields, Mapping):
        return
    for name, info in fields.items():
        if isinstance(info, Mapping):
            yield name, dict(info)


def to_json(value: Any) -> str:
    """JSON-encode a literal, stringifying values JSON cannot represent."""
    return json.dumps(value, default=str, ensure_ascii=False)


def format_default(value: Any) -> str:
    """Render a default value, leaving strings and function markers bare."""
    if isinstance(value, str):
        return value
    return to_json(value)


def join_enum(values: Any) -> str:
    """Comma-join enum values."""
    if not isinstance(values, (list, tuple)):
        return str(values)
    return ", ".join(str(value) for value in values)
