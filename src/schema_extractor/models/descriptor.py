"""Field descriptor model definitions."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from schema_extractor.exceptions import InvalidDescriptorError
from schema_extractor.models.types import DEFAULT_VALIDATION_MESSAGE, FieldKind

# Nested shape attribute -> kind it belongs to
NESTED_SHAPES: Dict[str, FieldKind] = {
    "items": FieldKind.ARRAY,
    "properties": FieldKind.OBJECT,
    "values": FieldKind.MAP,
}


class ValidatorDescriptor(BaseModel):
    """Opaque description of one custom validator."""

    kind: str = Field(description="Validator mode or declared kind")
    message: str = Field(default=DEFAULT_VALIDATION_MESSAGE, description="Failure message shown to users")
    validator: Optional[str] = Field(default=None, description="Marker standing in for the validator callable")


class FieldDescriptor(BaseModel):
    """Normalized description of one schema field.

    Only attributes that were explicitly set are emitted by `to_dict`, so a
    descriptor serializes to the smallest mapping describing the field.
    """

    type: str = Field(description="Field kind label, or the raw label of an unrecognized kind")

    # Flags
    required: Optional[bool] = None
    unique: Optional[bool] = None
    indexed: Optional[Any] = None
    sparse: Optional[bool] = None
    immutable: Optional[bool] = None
    lowercase: Optional[bool] = None
    uppercase: Optional[bool] = None
    trim: Optional[bool] = None
    select: Optional[bool] = None
    computed: Optional[bool] = None
    auto: Optional[bool] = None
    circular: Optional[bool] = None

    # Constraints
    enum: Optional[List[Any]] = None
    enum_count: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min: Optional[Any] = None
    max: Optional[Any] = None
    min_date: Optional[Any] = None
    max_date: Optional[Any] = None
    pattern: Optional[str] = None
    ref: Optional[str] = None

    # Defaults and validators
    has_default: Optional[bool] = None
    default_value: Optional[Any] = None
    has_validators: Optional[bool] = None
    validator_count: Optional[int] = None
    validators: Optional[List[ValidatorDescriptor]] = None

    # Nested shapes
    items: Optional["FieldDescriptor"] = None
    properties: Optional[Dict[str, "FieldDescriptor"]] = None
    property_count: Optional[int] = None
    values: Optional["FieldDescriptor"] = None

    # Annotations
    note: Optional[str] = None
    description: Optional[str] = None

    model_config = {"extra": "forbid", "arbitrary_types_allowed": True}

    @model_validator(mode="after")
    def validate_shape(self) -> "FieldDescriptor":
        """Validate the nested shape matches the declared kind."""
        nested = [name for name in NESTED_SHAPES if getattr(self, name) is not None]
        if len(nested) > 1:
            raise InvalidDescriptorError(f"Descriptor of type '{self.type}' carries more than one nested shape: {', '.join(nested)}")
        if nested and self.type != NESTED_SHAPES[nested[0]].value:
            raise InvalidDescriptorError(f"Descriptor of type '{self.type}' cannot carry '{nested[0]}'")
        if self.circular and self.properties is not None:
            raise InvalidDescriptorError("Circular descriptor cannot carry properties")
        if self.property_count is not None and (self.properties is None or self.property_count != len(self.properties)):
            raise InvalidDescriptorError("property_count must equal the number of properties")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert the descriptor to a plain nested mapping."""
        return self.model_dump(exclude_unset=True)


FieldDescriptor.model_rebuild()
