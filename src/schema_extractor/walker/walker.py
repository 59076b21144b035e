"""Recursive schema walker converting model classes to plain mappings."""

import inspect
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Set, Type

from pydantic import BaseModel
from pydantic.fields import FieldInfo
from pydantic_core import PydanticUndefined
from pymongo import ASCENDING

from schema_extractor.models.descriptor import FieldDescriptor, ValidatorDescriptor
from schema_extractor.models.options import ExtractionFlags
from schema_extractor.models.types import (
    CIRCULAR_DESCRIPTION,
    DEFAULT_VALIDATION_MESSAGE,
    FUNCTION_MARKER,
    ID_FIELD_NAMES,
    MAX_DEPTH_NOTE,
    REVISION_FIELD_NAMES,
    TIMESTAMP_FIELD_NAMES,
    FieldKind,
)
from schema_extractor.walker.handlers import HandlerRegistry, UnrecognizedHandler
from schema_extractor.walker.kinds import is_virtual, resolve_kind
from schema_extractor.walker.paths import SchemaPath

ModelSchema = Dict[str, Any]


def function_marker(func: Callable) -> str:
    """Opaque marker standing in for a default factory."""
    name = getattr(func, "__name__", None)
    if name and name != "<lambda>":
        return f"[Function {name}]"
    return FUNCTION_MARKER


def _plain_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value


def _field_names(name: str, field_info: FieldInfo) -> Set[str]:
    return {name, field_info.alias} if field_info.alias else {name}


class SchemaWalker:
    """Depth-first walker over model field declarations.

    The visited set holds model classes already expanded during this walk.
    Sharing one walker across several models also suppresses cross-model
    cycles; a fresh walker per model only detects self-cycles.
    """

    def __init__(self, flags: ExtractionFlags, visited: Optional[Set[type]] = None) -> None:
        self.flags = flags
        self.visited: Set[type] = visited if visited is not None else set()

    def extract_model(self, model: Type[BaseModel]) -> ModelSchema:
        """Extract the plain schema of one model.

        Args:
            model: Model class exposing ``model_fields``

        Returns:
            Mapping of field name to plain field descriptor
        """
        if model in self.visited:
            return {"type": FieldKind.CIRCULAR.value, "description": CIRCULAR_DESCRIPTION}
        self.visited.add(model)

        extracted: ModelSchema = {name: descriptor.to_dict() for name, descriptor in self.extract_properties(model, 0).items()}

        if self.flags.include_virtuals:
            for name in getattr(model, "model_computed_fields", {}):
                if name in ID_FIELD_NAMES and not self.flags.include_id:
                    continue
                extracted[name] = FieldDescriptor(type=FieldKind.VIRTUAL.value, computed=True).to_dict()

        # Auto timestamps replace same-named declared fields
        model_settings = getattr(model, "Settings", None)
        if self.flags.include_timestamps and getattr(model_settings, "timestamps", False):
            for name in TIMESTAMP_FIELD_NAMES:
                extracted[name] = FieldDescriptor(type=FieldKind.DATE.value, auto=True).to_dict()

        return extracted

    def extract_properties(self, model: Type[BaseModel], depth: int) -> Dict[str, FieldDescriptor]:
        """Extract every walkable field of a model at the given depth."""
        return {path.name: self.extract_field(path, depth) for path in self._iter_paths(model)}

    def _iter_paths(self, model: Type[BaseModel]) -> Iterator[SchemaPath]:
        for name, field_info in model.model_fields.items():
            names = _field_names(name, field_info)
            if names & REVISION_FIELD_NAMES:
                continue
            if names & ID_FIELD_NAMES and not self.flags.include_id:
                continue
            path = SchemaPath.from_field_info(name, field_info, owner=model)
            if not self.flags.include_virtuals and is_virtual(path):
                continue
            yield path

    def extract_field(self, path: SchemaPath, depth: int = 0) -> FieldDescriptor:
        """Extract the descriptor of one field.

        Args:
            path: Field declaration
            depth: Nesting depth of the field, 0 for top-level fields

        Returns:
            The field descriptor
        """
        if depth > self.flags.depth:
            return FieldDescriptor(type=FieldKind.MIXED.value, note=MAX_DEPTH_NOTE)

        kind = resolve_kind(path)
        if kind is not None and HandlerRegistry.has_handler(kind):
            handler = HandlerRegistry.get_handler(kind)
        else:
            handler = UnrecognizedHandler()

        info = handler.extract(path, self, depth)
        info.update(self._common_attributes(path))
        return FieldDescriptor(**info)

    def _common_attributes(self, path: SchemaPath) -> Dict[str, Any]:
        """Attributes applied to every field regardless of kind."""
        info: Dict[str, Any] = {}
        field_info = path.field_info
        options = path.options
        index_spec = path.index_spec()
        index_type, index_options = index_spec or (None, {})

        if options.get("required") or (field_info is not None and field_info.is_required()):
            info["required"] = True

        if self.flags.include_defaults and field_info is not None:
            if field_info.default_factory is not None:
                info["has_default"] = True
                info["default_value"] = function_marker(field_info.default_factory)
            elif field_info.default is not PydanticUndefined and not (field_info.default is None and path.name in ID_FIELD_NAMES):
                info["has_default"] = True
                info["default_value"] = _plain_default(field_info.default)

        if options.get("unique") or index_options.get("unique"):
            info["unique"] = True

        if self.flags.include_indexes:
            if options.get("index"):
                info["indexed"] = True if options["index"] is True else options["index"]
            elif index_spec is not None:
                info["indexed"] = True if index_type in (None, ASCENDING) else index_type
            if options.get("sparse") or index_options.get("sparse"):
                info["sparse"] = True

        if options.get("select") is not None:
            info["select"] = bool(options["select"])
        elif field_info is not None and field_info.exclude is True:
            info["select"] = False

        if options.get("immutable") or (field_info is not None and field_info.frozen):
            info["immutable"] = True

        if self.flags.include_validators:
            validators = self._validators(path)
            if validators:
                info["has_validators"] = True
                info["validator_count"] = len(validators)
                info["validators"] = validators

        return info

    @staticmethod
    def _validators(path: SchemaPath) -> List[ValidatorDescriptor]:
        validators = []
        for mode, func in path.validator_functions():
            doc = inspect.getdoc(func) if func is not None else None
            descriptor = {"kind": mode, "message": doc.splitlines()[0] if doc else DEFAULT_VALIDATION_MESSAGE}
            if callable(func):
                descriptor["validator"] = FUNCTION_MARKER
            validators.append(ValidatorDescriptor(**descriptor))
        return validators


def extract_model(model: Type[BaseModel], flags: ExtractionFlags, visited: Optional[Set[type]] = None) -> ModelSchema:
    """Extract the plain schema of one model with a caller-owned visited set."""
    return SchemaWalker(flags, visited).extract_model(model)


def extract_field(path: SchemaPath, depth: int, flags: ExtractionFlags, visited: Optional[Set[type]] = None) -> FieldDescriptor:
    """Extract one field descriptor with a caller-owned visited set."""
    return SchemaWalker(flags, visited).extract_field(path, depth)
