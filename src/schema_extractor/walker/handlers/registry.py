"""Registry for kind handler implementations."""

from typing import Dict, Type

from schema_extractor.models.types import FieldKind
from schema_extractor.walker.handlers.base import KindHandler
from schema_extractor.walker.handlers.handlers import (
    ArrayHandler,
    BinaryBufferHandler,
    BooleanHandler,
    DateHandler,
    Decimal128Handler,
    MapHandler,
    MixedHandler,
    NumberHandler,
    ObjectHandler,
    ObjectReferenceHandler,
    StringHandler,
    VirtualHandler,
)


class HandlerRegistry:
    """Registry for kind handlers."""

    _handlers: Dict[str, Type[KindHandler]] = {
        FieldKind.STRING.value: StringHandler,
        FieldKind.NUMBER.value: NumberHandler,
        FieldKind.DATE.value: DateHandler,
        FieldKind.BOOLEAN.value: BooleanHandler,
        FieldKind.OBJECT_REFERENCE.value: ObjectReferenceHandler,
        FieldKind.DECIMAL128.value: Decimal128Handler,
        FieldKind.BINARY_BUFFER.value: BinaryBufferHandler,
        FieldKind.MIXED.value: MixedHandler,
        FieldKind.ARRAY.value: ArrayHandler,
        FieldKind.OBJECT.value: ObjectHandler,
        FieldKind.MAP.value: MapHandler,
        FieldKind.VIRTUAL.value: VirtualHandler,
    }

    @classmethod
    def register_handler(cls, handler_class: Type[KindHandler]) -> None:
        """Register a new handler implementation.

        Args:
            handler_class: Handler class to register
        """
        cls._handlers[handler_class.get_field_kind().value] = handler_class

    @classmethod
    def has_handler(cls, field_kind: FieldKind) -> bool:
        """Check whether a handler is registered for a field kind."""
        return getattr(field_kind, "value", None) in cls._handlers

    @classmethod
    def get_handler(cls, field_kind: FieldKind) -> KindHandler:
        """Get a handler instance for a field kind.

        Args:
            field_kind: Field kind to get a handler for

        Returns:
            Handler instance

        Raises:
            ValueError: If no handler exists for the field kind
        """
        handler_class = cls._handlers.get(getattr(field_kind, "value", None))
        if not handler_class:
            raise ValueError(f"No handler registered for field kind: {field_kind}")
        return handler_class()
