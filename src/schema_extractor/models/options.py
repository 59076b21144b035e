"""Extraction option models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from schema_extractor.settings import settings


class Feature(str, Enum):
    """Optional parts of a schema that can be included or excluded."""

    ID = "id"
    DEFAULTS = "defaults"
    VALIDATORS = "validators"
    TIMESTAMPS = "timestamps"
    VIRTUALS = "virtuals"
    INDEXES = "indexes"


DEFAULT_INCLUDE: List[Feature] = [
    Feature.DEFAULTS,
    Feature.VALIDATORS,
    Feature.TIMESTAMPS,
    Feature.VIRTUALS,
    Feature.INDEXES,
]


class ExtractionFlags(BaseModel):
    """Resolved boolean switches consumed by the walker."""

    include_id: bool = True
    include_timestamps: bool = False
    include_virtuals: bool = False
    include_indexes: bool = False
    include_validators: bool = False
    include_defaults: bool = False
    depth: NonNegativeInt = 10

    model_config = {"frozen": True}


class ExtractOptions(BaseModel):
    """Caller-facing extraction options."""

    format: Optional[str] = Field(default="raw", description="Output format name, None or 'raw' for the plain mapping")
    include: List[Feature] = Field(default_factory=lambda: list(DEFAULT_INCLUDE), description="Features to include")
    exclude: List[Feature] = Field(default_factory=list, description="Features to exclude")
    depth: NonNegativeInt = Field(default=settings.default_depth, description="Maximum nesting depth to traverse")

    def _enabled(self, feature: Feature) -> bool:
        return feature in self.include and feature not in self.exclude

    def to_flags(self) -> ExtractionFlags:
        """Resolve include/exclude lists into walker flags.

        The id field stays included unless it is explicitly excluded.
        """
        return ExtractionFlags(
            include_id=Feature.ID in self.include or Feature.ID not in self.exclude,
            include_timestamps=self._enabled(Feature.TIMESTAMPS),
            include_virtuals=self._enabled(Feature.VIRTUALS),
            include_indexes=self._enabled(Feature.INDEXES),
            include_validators=self._enabled(Feature.VALIDATORS),
            include_defaults=self._enabled(Feature.DEFAULTS),
            depth=self.depth,
        )
