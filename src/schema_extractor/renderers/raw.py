"""Structured renderers returning the plain mapping or its JSON text."""

import json

from schema_extractor.renderers.base import Schemas


def format_raw(schemas: Schemas) -> Schemas:
    """Return the schemas unchanged for programmatic consumers."""
    return schemas


def format_json(schemas: Schemas) -> str:
    """Serialize the schemas as indented JSON text."""
    return json.dumps(schemas, indent=2, default=str, ensure_ascii=False)
