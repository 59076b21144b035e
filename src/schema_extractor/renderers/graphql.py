"""Graph schema (GraphQL SDL) renderer."""

from typing import Any, Dict, List

from schema_extractor.models.types import GRAPHQL_TYPE_MAP, FieldKind
from schema_extractor.renderers.base import Schemas, is_circular_model, iter_fields

FALLBACK_TYPE = "JSON"


def map_to_graphql_type(field: Dict[str, Any]) -> str:
    """Map one field descriptor to a GraphQL type reference."""
    if field.get("circular"):
        return FALLBACK_TYPE
    if field.get("ref"):
        return str(field["ref"])
    if field.get("type") == FieldKind.ARRAY.value:
        item_type = map_to_graphql_type(field["items"]) if isinstance(field.get("items"), dict) else FALLBACK_TYPE
        return f"[{item_type}]"
    return GRAPHQL_TYPE_MAP.get(str(field.get("type")), FALLBACK_TYPE)


def format_graphql(schemas: Schemas) -> str:
    """Render one object type per model, required fields marked non-null."""
    output: List[str] = []
    for model_name, fields in schemas.items():
        if is_circular_model(fields):
            output.append(f"# {model_name}: circular reference\n")
            continue
        output.append(f"type {model_name} {{")
        for field_name, field in iter_fields(fields):
            non_null = "!" if field.get("required") else ""
            output.append(f"  {field_name}: {map_to_graphql_type(field)}{non_null}")
        output.append("}\n")
    return "\n".join(output) + "\n" if output else ""
