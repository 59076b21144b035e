"""Normalized view of a single field declaration."""

import inspect
import re
import types
from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Type, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo
from pydantic.functional_validators import AfterValidator, BeforeValidator, PlainValidator, WrapValidator

UNION_TYPES = (Union, types.UnionType)

# Annotated validator markers -> validator mode
ANNOTATED_VALIDATORS: Dict[type, str] = {
    AfterValidator: "after",
    BeforeValidator: "before",
    PlainValidator: "plain",
    WrapValidator: "wrap",
}


@dataclass
class SchemaPath:
    """One field declaration with Optional/Annotated wrappers peeled off.

    Attributes:
        annotation: The bare type annotation
        metadata: Constraint objects collected from the field and any Annotated layers
        field_info: The pydantic field, absent for array elements and map values
        owner: Model class declaring the field
        name: Field name, empty for array elements and map values
    """

    annotation: Any
    metadata: List[Any] = field(default_factory=list)
    field_info: Optional[FieldInfo] = None
    owner: Optional[Type[BaseModel]] = None
    name: str = ""

    @classmethod
    def from_field_info(cls, name: str, field_info: FieldInfo, owner: Optional[Type[BaseModel]] = None) -> "SchemaPath":
        """Build a path for a declared model field."""
        path = cls(annotation=field_info.annotation, metadata=list(field_info.metadata), field_info=field_info, owner=owner, name=name)
        return path.unwrap()

    @classmethod
    def from_annotation(cls, annotation: Any, owner: Optional[Type[BaseModel]] = None) -> "SchemaPath":
        """Build a path for a nested annotation such as an array element."""
        return cls(annotation=annotation, owner=owner).unwrap()

    def unwrap(self) -> "SchemaPath":
        """Strip Annotated and Optional layers, keeping Annotated metadata."""
        while True:
            origin = get_origin(self.annotation)
            if origin is Annotated:
                base, *extra = get_args(self.annotation)
                self.annotation = base
                self.metadata.extend(extra)
                continue
            if origin in UNION_TYPES:
                args = get_args(self.annotation)
                non_none = [arg for arg in args if arg is not type(None)]
                if len(non_none) == 1 and len(non_none) < len(args):
                    self.annotation = non_none[0]
                    continue
            return self

    @property
    def origin(self) -> Any:
        return get_origin(self.annotation)

    @property
    def args(self) -> Tuple[Any, ...]:
        return get_args(self.annotation)

    @property
    def options(self) -> Dict[str, Any]:
        """Options declared through ``json_schema_extra``."""
        if self.field_info is None or not isinstance(self.field_info.json_schema_extra, dict):
            return {}
        return self.field_info.json_schema_extra

    def constraint(self, *names: str) -> Any:
        """Return the first non-None constraint among the given attribute names."""
        for meta in self.metadata:
            for name in names:
                value = getattr(meta, name, None)
                if value is not None:
                    return value
        return None

    def enum_values(self) -> Optional[List[Any]]:
        """Allowed values from a Literal or Enum annotation."""
        if self.origin is Literal:
            return list(self.args)
        if inspect.isclass(self.annotation) and issubclass(self.annotation, Enum):
            return [member.value for member in self.annotation]
        return None

    def pattern(self) -> Optional[str]:
        """Validation pattern, with ``[pattern, message]`` pairs reduced to the pattern."""
        pattern = self.constraint("pattern")
        if pattern is None:
            pattern = self.options.get("match")
            if isinstance(pattern, (list, tuple)):
                pattern = pattern[0] if pattern else None
        if isinstance(pattern, re.Pattern):
            return pattern.pattern
        return None if pattern is None else str(pattern)

    def index_spec(self) -> Optional[Tuple[Any, Dict[str, Any]]]:
        """Index type and options declared with ``beanie.Indexed``."""
        for candidate in (self.annotation, *self.metadata):
            indexed = getattr(candidate, "_indexed", None)
            if isinstance(indexed, tuple) and len(indexed) == 2:
                index_type, kwargs = indexed
                return index_type, dict(kwargs or {})
        return None

    def validator_functions(self) -> List[Tuple[str, Any]]:
        """(mode, callable) pairs for every custom validator on this field."""
        found = [(mode, meta.func) for meta in self.metadata for marker, mode in ANNOTATED_VALIDATORS.items() if isinstance(meta, marker)]
        decorators = getattr(self.owner, "__pydantic_decorators__", None)
        if decorators is not None and self.name:
            for decorator in decorators.field_validators.values():
                if self.name in decorator.info.fields or "*" in decorator.info.fields:
                    found.append((decorator.info.mode, decorator.func))
        return found
