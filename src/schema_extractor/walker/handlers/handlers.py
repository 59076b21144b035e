"""Concrete handler implementations for each field kind."""

from typing import TYPE_CHECKING, Any, Dict

from schema_extractor.models.types import FieldKind
from schema_extractor.walker.handlers.base import KindHandler
from schema_extractor.walker.kinds import kind_label, reference_target, resolve_kind
from schema_extractor.walker.paths import SchemaPath

if TYPE_CHECKING:
    from schema_extractor.walker.walker import SchemaWalker


class StringHandler(KindHandler):
    """Handler for string fields."""

    field_kind = FieldKind.STRING

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        info: Dict[str, Any] = {"type": self.field_kind.value}
        enum_values = path.enum_values() or path.options.get("enum")
        if enum_values:
            info["enum"] = list(enum_values)
            info["enum_count"] = len(info["enum"])
        min_length = path.constraint("min_length")
        if min_length is not None:
            info["min_length"] = min_length
        max_length = path.constraint("max_length")
        if max_length is not None:
            info["max_length"] = max_length
        pattern = path.pattern()
        if pattern is not None:
            info["pattern"] = pattern
        if path.constraint("to_lower") or path.options.get("lowercase"):
            info["lowercase"] = True
        if path.constraint("to_upper") or path.options.get("uppercase"):
            info["uppercase"] = True
        if path.constraint("strip_whitespace") or path.options.get("trim"):
            info["trim"] = True
        return info


class NumberHandler(KindHandler):
    """Handler for numeric fields."""

    field_kind = FieldKind.NUMBER

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        info: Dict[str, Any] = {"type": self.field_kind.value}
        minimum = path.constraint("ge", "gt")
        if minimum is not None:
            info["min"] = minimum
        maximum = path.constraint("le", "lt")
        if maximum is not None:
            info["max"] = maximum
        # Annotation-level enum wins over the option-level one
        enum_values = path.enum_values() or path.options.get("enum")
        if enum_values:
            info["enum"] = list(enum_values)
        return info


class DateHandler(KindHandler):
    """Handler for date and datetime fields."""

    field_kind = FieldKind.DATE

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        info: Dict[str, Any] = {"type": self.field_kind.value}
        min_date = path.constraint("ge", "gt")
        if min_date is not None:
            info["min_date"] = min_date
        max_date = path.constraint("le", "lt")
        if max_date is not None:
            info["max_date"] = max_date
        return info


class ObjectReferenceHandler(KindHandler):
    """Handler for ObjectId and Link fields."""

    field_kind = FieldKind.OBJECT_REFERENCE

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        info: Dict[str, Any] = {"type": self.field_kind.value}
        ref = reference_target(path)
        if ref:
            info["ref"] = ref
        return info


class ScalarHandler(KindHandler):
    """Handler for kinds described by their type tag alone."""

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        return {"type": self.field_kind.value}


class BooleanHandler(ScalarHandler):
    field_kind = FieldKind.BOOLEAN


class Decimal128Handler(ScalarHandler):
    field_kind = FieldKind.DECIMAL128


class BinaryBufferHandler(ScalarHandler):
    field_kind = FieldKind.BINARY_BUFFER


class MixedHandler(ScalarHandler):
    field_kind = FieldKind.MIXED


class ArrayHandler(KindHandler):
    """Handler for list, set and tuple fields."""

    field_kind = FieldKind.ARRAY

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        info: Dict[str, Any] = {"type": self.field_kind.value}
        if not path.args:
            return info
        element = SchemaPath.from_annotation(path.args[0], owner=path.owner)
        items = walker.extract_field(element, depth + 1)
        # A ref declared on the array field belongs to its reference elements
        ref = reference_target(element)
        if ref is None and resolve_kind(element) is FieldKind.OBJECT_REFERENCE:
            ref = path.options.get("ref")
        if ref:
            items.ref = str(ref)
        info["items"] = items
        return info


class ObjectHandler(KindHandler):
    """Handler for embedded documents."""

    field_kind = FieldKind.OBJECT

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        info: Dict[str, Any] = {"type": self.field_kind.value}
        model = path.annotation
        if not hasattr(model, "model_fields"):
            return info
        if model in walker.visited:
            info["circular"] = True
            return info
        walker.visited.add(model)
        properties = walker.extract_properties(model, depth + 1)
        info["properties"] = properties
        info["property_count"] = len(properties)
        return info


class MapHandler(KindHandler):
    """Handler for dict fields with a declared value type."""

    field_kind = FieldKind.MAP

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        info: Dict[str, Any] = {"type": self.field_kind.value}
        if len(path.args) == 2:
            value = SchemaPath.from_annotation(path.args[1], owner=path.owner)
            info["values"] = walker.extract_field(value, depth + 1)
        return info


class VirtualHandler(KindHandler):
    """Handler for back-references, which are never stored."""

    field_kind = FieldKind.VIRTUAL

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        info: Dict[str, Any] = {"type": self.field_kind.value, "computed": True}
        ref = reference_target(path)
        if ref:
            info["ref"] = ref
        return info


class UnrecognizedHandler:
    """Fallback for annotations outside the closed kind set."""

    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        return {"type": kind_label(path)}
