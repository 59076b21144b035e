"""Format name dispatch for renderers."""

from typing import Any, Callable, Dict, Optional

from schema_extractor.renderers.base import Schemas
from schema_extractor.renderers.compact import format_compact
from schema_extractor.renderers.graphql import format_graphql
from schema_extractor.renderers.human import format_human
from schema_extractor.renderers.raw import format_json, format_raw
from schema_extractor.renderers.typescript import format_typescript
from schema_extractor.utils.logging import logger

RAW_FORMAT = "raw"


class RendererRegistry:
    """Registry of renderers keyed by format name."""

    _renderers: Dict[str, Callable[[Schemas], Any]] = {
        RAW_FORMAT: format_raw,
        "json": format_json,
        "compact": format_compact,
        "llm-compact": format_compact,
        "human": format_human,
        "typescript": format_typescript,
        "graphql": format_graphql,
    }

    @classmethod
    def register_renderer(cls, name: str, renderer: Callable[[Schemas], Any]) -> None:
        """Register a renderer under a format name.

        Args:
            name: Format name, matched case-insensitively
            renderer: Pure function from schemas to output
        """
        cls._renderers[name.lower()] = renderer

    @classmethod
    def get_renderer(cls, name: Optional[str]) -> Callable[[Schemas], Any]:
        """Get the renderer for a format name, falling back to the raw renderer."""
        if not name:
            return format_raw
        renderer = cls._renderers.get(str(name).lower())
        if renderer is None:
            logger.warning(f"Unknown format '{name}', returning the raw schema mapping")
            return format_raw
        return renderer

    @classmethod
    def formats(cls) -> list:
        """Registered format names."""
        return sorted(cls._renderers)


def render(schemas: Schemas, format: Optional[str]) -> Any:
    """Render schemas in the requested format."""
    return RendererRegistry.get_renderer(format)(schemas)
