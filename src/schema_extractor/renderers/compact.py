"""Compact annotated-bullet renderer, the primary prompt format."""

import re
from typing import Any, Dict, List, Tuple

from schema_extractor.models.types import FieldKind
from schema_extractor.renderers.base import Schemas, format_default, is_circular_model, iter_fields, join_enum

UNESCAPE_PATTERN = re.compile(r"\\(.)")
FALLBACK_TYPE = FieldKind.MIXED.value


def _type_label(field: Dict[str, Any]) -> str:
    field_type = field.get("type") or FALLBACK_TYPE
    items = field.get("items")
    if field_type == FieldKind.ARRAY.value and isinstance(items, dict):
        if items.get("ref"):
            return f"Array of {FieldKind.OBJECT_REFERENCE.value}, ref: {items['ref']}"
        return f"Array of {items.get('type') or FALLBACK_TYPE}"
    if field.get("ref"):
        return f"{FieldKind.OBJECT_REFERENCE.value}, ref: {field['ref']}"
    return field_type


def _range(low: Any, high: Any, both: str, low_only: str, high_only: str) -> List[str]:
    if low is not None and high is not None:
        return [both.format(low=low, high=high)]
    if low is not None:
        return [low_only.format(low=low)]
    if high is not None:
        return [high_only.format(high=high)]
    return []


def _constraints(field: Dict[str, Any]) -> List[str]:
    """Constraint tokens in their fixed precedence order."""
    constraints = [flag for flag in ("required", "unique", "indexed", "lowercase", "uppercase", "trim") if field.get(flag)]
    constraints += _range(field.get("min_length"), field.get("max_length"), "{low}-{high} chars", "min {low} chars", "max {high} chars")
    constraints += _range(field.get("min"), field.get("max"), "range: {low}-{high}", "min: {low}", "max: {high}")
    if field.get("pattern"):
        pattern = UNESCAPE_PATTERN.sub(r"\1", str(field["pattern"]))
        constraints.append(f"pattern: {pattern}")
    if isinstance(field.get("enum"), (list, tuple)):
        constraints.append(f"enum: [{join_enum(field['enum'])}]")
    if field.get("sparse"):
        constraints.append("sparse")
    if field.get("immutable"):
        constraints.append("immutable")
    if field.get("select") is False:
        constraints.append("not selected")
    if field.get("auto"):
        constraints.append("auto-generated")
    return constraints


def _line(indent: str, name: str, type_label: str, constraints: List[str], field: Dict[str, Any]) -> str:
    parts = [str(type_label), *constraints]
    if "default_value" in field:
        parts.append(f"default: {format_default(field['default_value'])}")
    return f"{indent}- {name} ({', '.join(parts)})"


def _nested_constraints(field: Dict[str, Any]) -> List[str]:
    constraints = ["required"] if field.get("required") else []
    constraints += _range(field.get("min_length"), field.get("max_length"), "{low}-{high} chars", "min {low} chars", "max {high} chars")
    if field.get("ref"):
        constraints.append(f"ref: {field['ref']}")
    if isinstance(field.get("enum"), (list, tuple)):
        constraints.append(f"enum: [{join_enum(field['enum'])}]")
    if field.get("circular"):
        constraints.append("circular")
    return constraints


def _sub_fields(properties: Any, indent: str) -> List[str]:
    """One line per direct sub-field, deeper nesting summarized by its type."""
    if not isinstance(properties, dict):
        return []
    return [_line(indent, name, nested.get("type") or FALLBACK_TYPE, _nested_constraints(nested), nested) for name, nested in iter_fields(properties)]


def _group_dotted(fields: Dict[str, Any]) -> Tuple[Dict[str, Dict[str, Any]], Dict[str, List[Tuple[str, Dict[str, Any]]]]]:
    regular: Dict[str, Dict[str, Any]] = {}
    groups: Dict[str, List[Tuple[str, Dict[str, Any]]]] = {}
    for name, info in iter_fields(fields):
        if "." in name:
            parent, child = name.split(".", 1)
            groups.setdefault(parent, []).append((child, info))
        else:
            regular[name] = info
    return regular, groups


def format_compact(schemas: Schemas) -> str:
    """Render schemas as compact annotated bullets.

    Args:
        schemas: Plain schemas keyed by model name

    Returns:
        One ``**Model**`` block per model, separated by blank lines
    """
    lines: List[str] = []
    for model_name, fields in schemas.items():
        lines.append(f"**{model_name}**")
        if is_circular_model(fields):
            lines.append("- (circular reference)")
            lines.append("")
            continue

        regular, groups = _group_dotted(fields)
        for field_name, field in regular.items():
            lines.append(_line("", field_name, _type_label(field), _constraints(field), field))

            if field.get("type") == FieldKind.OBJECT.value and not field.get("circular"):
                lines.extend(_sub_fields(field.get("properties"), "  "))

            items = field.get("items")
            if field.get("type") == FieldKind.ARRAY.value and isinstance(items, dict) and items.get("type") == FieldKind.OBJECT.value and items.get("properties"):
                lines.append("  Array contains:")
                lines.extend(_sub_fields(items["properties"], "    "))

        for parent, children in groups.items():
            lines.append(f"- {parent} ({FieldKind.OBJECT.value})")
            for child_name, child in children:
                constraints = [flag for flag in ("required", "unique") if child.get(flag)]
                if child.get("ref"):
                    constraints.append(f"ref: {child['ref']}")
                if isinstance(child.get("enum"), (list, tuple)):
                    constraints.append(f"enum: [{join_enum(child['enum'])}]")
                lines.append(_line("  ", child_name, child.get("type") or FALLBACK_TYPE, constraints, child))

        lines.append("")
    return "\n".join(lines).strip()
