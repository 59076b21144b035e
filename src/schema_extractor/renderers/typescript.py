"""Interface declaration renderer."""

from typing import Any, Dict, List

from schema_extractor.models.types import TYPESCRIPT_TYPE_MAP, FieldKind
from schema_extractor.renderers.base import Schemas, is_circular_model, iter_fields, to_json

FALLBACK_TYPE = "any"


def _literal(value: Any) -> str:
    if isinstance(value, str):
        return "'" + value.replace("'", "\\'") + "'"
    return to_json(value)


def _member(name: str, field: Dict[str, Any]) -> str:
    optional = "" if field.get("required") else "?"
    return f"{name}{optional}: {map_to_typescript_type(field)}"


def map_to_typescript_type(field: Dict[str, Any]) -> str:
    """Map one field descriptor to an interface member type."""
    field_type = field.get("type")

    if field.get("ref"):
        return f"string | I{field['ref']}"

    if field_type == FieldKind.ARRAY.value:
        item_type = map_to_typescript_type(field["items"]) if isinstance(field.get("items"), dict) else FALLBACK_TYPE
        if " " in item_type:
            item_type = f"({item_type})"
        return f"{item_type}[]"

    if field_type == FieldKind.OBJECT.value:
        if field.get("circular"):
            return f"{FALLBACK_TYPE} /* circular reference */"
        if isinstance(field.get("properties"), dict):
            members = [_member(name, nested) for name, nested in iter_fields(field["properties"])]
            return "{ " + "; ".join(members) + " }" if members else "{}"
        return FALLBACK_TYPE

    if field_type == FieldKind.MAP.value:
        value_type = map_to_typescript_type(field["values"]) if isinstance(field.get("values"), dict) else FALLBACK_TYPE
        return f"Record<string, {value_type}>"

    if isinstance(field.get("enum"), (list, tuple)) and field["enum"]:
        return " | ".join(_literal(value) for value in field["enum"])

    return TYPESCRIPT_TYPE_MAP.get(str(field_type), FALLBACK_TYPE)


def format_typescript(schemas: Schemas) -> str:
    """Render one exported interface per model."""
    output: List[str] = []
    for model_name, fields in schemas.items():
        if is_circular_model(fields):
            output.append(f"export type I{model_name} = {FALLBACK_TYPE}; // circular reference\n")
            continue
        output.append(f"export interface I{model_name} {{")
        for field_name, field in iter_fields(fields):
            output.append(f"  {_member(field_name, field)};")
        output.append("}\n")
    return "\n".join(output) + "\n" if output else ""
