"""Renderers turning plain schemas into text."""

from schema_extractor.renderers.compact import format_compact
from schema_extractor.renderers.graphql import format_graphql, map_to_graphql_type
from schema_extractor.renderers.human import format_human
from schema_extractor.renderers.raw import format_json, format_raw
from schema_extractor.renderers.registry import RendererRegistry, render
from schema_extractor.renderers.typescript import format_typescript, map_to_typescript_type

__all__ = [
    "RendererRegistry",
    "format_compact",
    "format_graphql",
    "format_human",
    "format_json",
    "format_raw",
    "format_typescript",
    "map_to_graphql_type",
    "map_to_typescript_type",
    "render",
]
