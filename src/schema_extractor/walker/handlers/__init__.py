"""Kind handlers used by the schema walker."""

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
    UnrecognizedHandler,
    VirtualHandler,
)
from schema_extractor.walker.handlers.registry import HandlerRegistry

__all__ = [
    "ArrayHandler",
    "BinaryBufferHandler",
    "BooleanHandler",
    "DateHandler",
    "Decimal128Handler",
    "HandlerRegistry",
    "KindHandler",
    "MapHandler",
    "MixedHandler",
    "NumberHandler",
    "ObjectHandler",
    "ObjectReferenceHandler",
    "StringHandler",
    "UnrecognizedHandler",
    "VirtualHandler",
]
