"""Base handler class for field kind extraction."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict

from schema_extractor.models.types import FieldKind
from schema_extractor.walker.paths import SchemaPath

if TYPE_CHECKING:
    from schema_extractor.walker.walker import SchemaWalker


class KindHandler(ABC):
    """Base class for kind-specific extraction."""

    field_kind: FieldKind

    @abstractmethod
    def extract(self, path: SchemaPath, walker: "SchemaWalker", depth: int) -> Dict[str, Any]:
        """Extract the kind-specific attributes of a field.

        Args:
            path: Field declaration to inspect
            walker: Walker driving the extraction, used to recurse into nested shapes
            depth: Depth of the field being extracted

        Returns:
            Descriptor attributes, always including ``type``
        """
        pass

    @classmethod
    def get_field_kind(cls) -> FieldKind:
        """Get the field kind this handler handles."""
        return cls.field_kind
