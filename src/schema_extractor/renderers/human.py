"""Human-readable multi-line report renderer."""

from typing import Any, Dict, List

from schema_extractor.models.types import FieldKind
from schema_extractor.renderers.base import Schemas, is_circular_model, iter_fields, join_enum, to_json


def _or(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def _field_block(field_name: str, field: Dict[str, Any]) -> List[str]:
    lines = [f"  {field_name}:", f"    Type: {field.get('type') or FieldKind.MIXED.value}"]
    if field.get("required"):
        lines.append("    Required: Yes")
    if field.get("unique"):
        lines.append("    Unique: Yes")
    items = field.get("items")
    ref = field.get("ref") or (items.get("ref") if isinstance(items, dict) else None)
    if ref:
        lines.append(f"    References: {ref}")
    if field.get("enum"):
        lines.append(f"    Allowed Values: {join_enum(field['enum'])}")
    if field.get("min") is not None or field.get("max") is not None:
        lines.append(f"    Range: {_or(field.get('min'), 'N/A')} - {_or(field.get('max'), 'N/A')}")
    if field.get("min_length") is not None or field.get("max_length") is not None:
        lines.append(f"    Length: {_or(field.get('min_length'), 0)} - {_or(field.get('max_length'), 'unlimited')}")
    if "default_value" in field:
        lines.append(f"    Default: {to_json(field['default_value'])}")
    if isinstance(field.get("properties"), dict):
        lines.append(f"    Nested Fields: {', '.join(field['properties'])}")
    if field.get("circular"):
        lines.append("    ⚠️  Circular Reference Detected")
    return lines


def format_human(schemas: Schemas) -> str:
    """Render schemas as a report meant for direct reading."""
    output: List[str] = []
    for model_name, fields in schemas.items():
        output.append(f"📋 {model_name} Model")
        output.append("-" * 40)
        if is_circular_model(fields):
            output.append("  ⚠️  Circular Reference Detected")
        else:
            for field_name, field in iter_fields(fields):
                output.extend(_field_block(field_name, field))
                output.append("")
        output.append("")
    return "\n".join(output) + "\n"
