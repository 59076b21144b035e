"""Relationship model definitions."""

from enum import Enum

from pydantic import BaseModel, Field


class RelationshipType(str, Enum):
    """Ways a model can point at another model."""

    REFERENCE = "reference"
    ARRAY_REFERENCE = "array-reference"
    NESTED_REFERENCE = "nested-reference"


class Relationship(BaseModel):
    """One reference from a model field to a target model."""

    field: str = Field(description="Field path holding the reference")
    type: RelationshipType = Field(description="Shape of the reference")
    target: str = Field(description="Name of the referenced model")
    required: bool = Field(default=False, description="Whether the referencing field is required")
