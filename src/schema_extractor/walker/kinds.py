"""Resolution of field annotations to field kinds."""

import inspect
from collections import abc
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from numbers import Number
from typing import Any, Literal, Optional

from beanie import BackLink, Link
from bson import Decimal128, ObjectId
from pydantic import BaseModel

from schema_extractor.models.types import FieldKind
from schema_extractor.walker.paths import UNION_TYPES, SchemaPath

ARRAY_ORIGINS = (list, set, frozenset, tuple, abc.Sequence, abc.MutableSequence, abc.Set, abc.MutableSet)
MAP_ORIGINS = (dict, abc.Mapping, abc.MutableMapping)


def _kind_of_values(values: list) -> FieldKind:
    """Kind for a closed set of literal values."""
    if values and all(isinstance(value, bool) for value in values):
        return FieldKind.BOOLEAN
    if values and all(isinstance(value, Number) and not isinstance(value, bool) for value in values):
        return FieldKind.NUMBER
    return FieldKind.STRING


def resolve_kind(path: SchemaPath) -> Optional[FieldKind]:
    """Resolve the declared kind of a field.

    An explicit ``kind`` option wins over the annotation. Returns None for
    anything outside the closed kind set.
    """
    declared = path.options.get("kind")
    if declared:
        try:
            return FieldKind.from_label(str(declared))
        except ValueError:
            return None

    annotation = path.annotation
    origin = path.origin

    if annotation is Any or annotation is object:
        return FieldKind.MIXED

    if origin is not None:
        if origin is Literal:
            return _kind_of_values(list(path.args))
        if inspect.isclass(origin) and issubclass(origin, BackLink):
            return FieldKind.VIRTUAL
        if inspect.isclass(origin) and issubclass(origin, Link):
            return FieldKind.OBJECT_REFERENCE
        if origin in ARRAY_ORIGINS:
            return FieldKind.ARRAY
        if origin in MAP_ORIGINS:
            return FieldKind.MAP
        return None

    if not inspect.isclass(annotation):
        return None

    if issubclass(annotation, Enum):
        return _kind_of_values([member.value for member in annotation])
    if issubclass(annotation, bool):
        return FieldKind.BOOLEAN
    if issubclass(annotation, (int, float)):
        return FieldKind.NUMBER
    if issubclass(annotation, (datetime, date)):
        return FieldKind.DATE
    if issubclass(annotation, str):
        return FieldKind.STRING
    if issubclass(annotation, BackLink):
        return FieldKind.VIRTUAL
    if issubclass(annotation, (ObjectId, Link)):
        return FieldKind.OBJECT_REFERENCE
    if issubclass(annotation, (Decimal, Decimal128)):
        return FieldKind.DECIMAL128
    if issubclass(annotation, (bytes, bytearray)):
        return FieldKind.BINARY_BUFFER
    if issubclass(annotation, BaseModel):
        return FieldKind.OBJECT
    if annotation in (list, set, frozenset, tuple):
        return FieldKind.ARRAY
    if annotation is dict:
        return FieldKind.MIXED

    try:
        return FieldKind.from_label(annotation.__name__)
    except ValueError:
        return None


def kind_label(path: SchemaPath) -> str:
    """Human label for a field whose kind is not recognized."""
    declared = path.options.get("kind")
    if declared:
        return str(declared)
    if path.origin in UNION_TYPES:
        return "Union"
    annotation = path.origin or path.annotation
    for attribute in ("__name__", "_name"):
        label = getattr(annotation, attribute, None)
        if label:
            return str(label)
    return str(annotation) if annotation is not None else FieldKind.MIXED.value


def reference_target(path: SchemaPath) -> Optional[str]:
    """Name of the model referenced by a Link/BackLink annotation or a ``ref`` option."""
    if path.options.get("ref"):
        return str(path.options["ref"])
    origin = path.origin
    if inspect.isclass(origin) and issubclass(origin, (Link, BackLink)) and path.args:
        target = path.args[0]
        forward = getattr(target, "__forward_arg__", None)
        if forward:
            return forward
        if isinstance(target, str):
            return target
        return getattr(target, "__name__", None)
    return None


def is_virtual(path: SchemaPath) -> bool:
    """Whether a field is a back-reference, directly or as a list of them."""
    kind = resolve_kind(path)
    if kind is FieldKind.ARRAY and path.args:
        kind = resolve_kind(SchemaPath.from_annotation(path.args[0]))
    return kind is FieldKind.VIRTUAL
