"""Tests for the schema walker."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Annotated, Any, Dict, List, Optional, Set, Union
from uuid import UUID

import pytest
from beanie import PydanticObjectId
from pydantic import AfterValidator, BaseModel, Field, computed_field, field_validator

from schema_extractor.models.options import ExtractionFlags
from schema_extractor.walker import SchemaPath, SchemaWalker, extract_field, extract_model

MAX_DEPTH = {"type": "Mixed", "note": "max depth reached"}


class Status(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


class Address(BaseModel):
    street: str
    city: str = "Athens"


class Kitchen(BaseModel):
    name: str
    count: int
    ratio: float
    active: bool
    born: date
    created: datetime
    price: Decimal
    blob: bytes
    ref_id: PydanticObjectId
    anything: Any
    status: Status
    priority: Priority
    tags: List[str]
    unique_tags: Set[str]
    address: Address
    scores: Dict[str, float]
    payload: dict
    token: UUID
    either: Union[int, str]


class Shop(BaseModel):
    name: str
    address: Address
    branches: List[Address] = []


class Legacy(BaseModel):
    owner: Any = Field(default=None, json_schema_extra={"kind": "ObjectID", "ref": "User"})
    avatar: Any = Field(default=None, json_schema_extra={"kind": "Buffer"})
    shape: Any = Field(default=None, json_schema_extra={"kind": "Polygon"})


class Event(BaseModel):
    title: str
    createdAt: str = "now"

    class Settings:
        timestamps = True


def no_spaces(value: str) -> str:
    """Handles cannot contain spaces."""
    if " " in value:
        raise ValueError("spaces")
    return value


class Account(BaseModel):
    handle: Annotated[str, AfterValidator(no_spaces)]
    nickname: Annotated[str, AfterValidator(lambda value: value)] = ""
    balance: float = 0

    @field_validator("balance")
    @classmethod
    def check_balance(cls, value: float) -> float:
        """Balance cannot be negative."""
        if value < 0:
            raise ValueError("negative")
        return value


class Defaults(BaseModel):
    status: Status = Status.ACTIVE
    created: datetime = Field(default_factory=datetime.now)
    seed: int = Field(default_factory=lambda: 4)
    address: Address = Address(street="Main")
    note: Optional[str] = None


class Person(BaseModel):
    first: str
    last: str

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first} {self.last}"


@pytest.fixture
def flags():
    """Flags with every optional feature disabled."""
    return ExtractionFlags()


def test_scalar_kinds(flags):
    """Test each annotation resolves to its field kind."""
    schema = extract_model(Kitchen, flags)
    expected_types = {
        "name": "String",
        "count": "Number",
        "ratio": "Number",
        "active": "Boolean",
        "born": "Date",
        "created": "Date",
        "price": "Decimal128",
        "blob": "BinaryBuffer",
        "ref_id": "ObjectReference",
        "anything": "Mixed",
        "status": "String",
        "priority": "Number",
        "tags": "Array",
        "unique_tags": "Array",
        "address": "Object",
        "scores": "Map",
        "payload": "Mixed",
    }
    for name, field_type in expected_types.items():
        assert schema[name]["type"] == field_type, name


def test_unrecognized_kinds_keep_their_label(flags):
    """Test annotations outside the kind set keep their raw label."""
    schema = extract_model(Kitchen, flags)
    assert schema["token"] == {"type": "UUID", "required": True}
    assert schema["either"] == {"type": "Union", "required": True}


def test_enum_values_captured(flags):
    """Test enum annotations capture their allowed values."""
    schema = extract_model(Kitchen, flags)
    assert schema["status"] == {"type": "String", "enum": ["active", "archived"], "enum_count": 2, "required": True}
    assert schema["priority"] == {"type": "Number", "enum": [1, 2], "required": True}


def test_nested_shapes(flags):
    """Test arrays, embedded objects and maps carry their nested shape."""
    schema = extract_model(Kitchen, flags)
    assert schema["tags"] == {"type": "Array", "items": {"type": "String"}, "required": True}
    assert schema["address"] == {
        "type": "Object",
        "properties": {"street": {"type": "String", "required": True}, "city": {"type": "String"}},
        "property_count": 2,
        "required": True,
    }
    assert schema["scores"] == {"type": "Map", "values": {"type": "Number"}, "required": True}


def test_legacy_kind_labels_normalized(flags):
    """Test legacy kind overrides resolve to canonical kinds."""
    schema = extract_model(Legacy, flags)
    assert schema["owner"] == {"type": "ObjectReference", "ref": "User"}
    assert schema["avatar"] == {"type": "BinaryBuffer"}
    assert schema["shape"] == {"type": "Polygon"}


def test_depth_zero_truncates_nested_fields():
    """Test nested fields past the depth bound become Mixed with a note."""
    schema = extract_model(Shop, ExtractionFlags(depth=0))
    assert schema["name"] == {"type": "String", "required": True}
    assert schema["address"]["properties"] == {"street": MAX_DEPTH, "city": MAX_DEPTH}
    assert schema["branches"]["items"] == MAX_DEPTH


def test_repeated_embedded_model_marked_circular(flags):
    """Test an embedded model already expanded in the same pass is marked circular."""
    schema = extract_model(Shop, flags)
    assert schema["address"]["property_count"] == 2
    assert schema["branches"]["items"] == {"type": "Object", "circular": True}


def test_self_reference_terminates(category_model, flags):
    """Test a self-referencing model yields circular fields."""
    schema = extract_model(category_model, flags)
    assert schema["name"] == {"type": "String", "required": True}
    assert schema["parent"] == {"type": "Object", "circular": True}
    assert schema["children"] == {"type": "Array", "items": {"type": "Object", "circular": True}}


def test_root_model_already_visited(category_model, flags):
    """Test a model already in the visited set returns the circular marker."""
    walker = SchemaWalker(flags, visited={category_model})
    assert walker.extract_model(category_model) == {"type": "Circular", "description": "Circular reference detected"}


def test_extraction_is_idempotent(user_model, flags):
    """Test extracting twice with fresh visited sets yields equal results."""
    assert extract_model(user_model, flags) == extract_model(user_model, flags)


def test_visited_set_is_caller_owned(category_model, flags):
    """Test the caller-provided visited set is filled during extraction."""
    visited = set()
    extract_model(category_model, flags, visited)
    assert category_model in visited


def test_id_included_by_default(user_model, flags):
    """Test the identity field is kept and the revision counter is skipped."""
    schema = extract_model(user_model, flags)
    assert schema["id"]["type"] == "ObjectReference"
    assert "revision_id" not in schema


def test_id_excluded(user_model):
    """Test the identity field is dropped when excluded."""
    schema = extract_model(user_model, ExtractionFlags(include_id=False))
    assert "id" not in schema
    assert "username" in schema


def test_string_constraints(user_model, flags):
    """Test length, uniqueness and case constraints on string fields."""
    schema = extract_model(user_model, flags)
    assert schema["username"] == {"type": "String", "min_length": 3, "max_length": 30, "required": True, "unique": True}
    assert schema["email"] == {"type": "String", "lowercase": True, "required": True, "unique": True}
    assert schema["role"] == {"type": "String", "enum": ["user", "admin"], "enum_count": 2}


def test_number_range(user_model, flags):
    """Test numeric bounds are captured."""
    schema = extract_model(user_model, flags)
    assert schema["age"] == {"type": "Number", "min": 13, "max": 120}


def test_array_of_references(user_model, flags):
    """Test a list of links carries the target on its items."""
    schema = extract_model(user_model, flags)
    assert schema["posts"] == {"type": "Array", "items": {"type": "ObjectReference", "ref": "Post"}}


def test_reference_targets(post_model, flags):
    """Test links and ref options produce object references."""
    schema = extract_model(post_model, flags)
    assert schema["author"] == {"type": "ObjectReference", "ref": "User", "required": True}
    assert schema["reviewer"] == {"type": "ObjectReference", "ref": "User"}


def test_timestamps_added(user_model):
    """Test timestamp fields are appended when the model enables them."""
    schema = extract_model(user_model, ExtractionFlags(include_timestamps=True))
    assert schema["createdAt"] == {"type": "Date", "auto": True}
    assert schema["updatedAt"] == {"type": "Date", "auto": True}


def test_timestamps_skipped_when_disabled(user_model, flags):
    """Test timestamp fields are omitted without the feature."""
    schema = extract_model(user_model, flags)
    assert "createdAt" not in schema


def test_timestamps_overwrite_declared_fields():
    """Test an auto timestamp replaces a same-named declared field."""
    schema = extract_model(Event, ExtractionFlags(include_timestamps=True))
    assert schema["createdAt"] == {"type": "Date", "auto": True}
    assert schema["title"] == {"type": "String", "required": True}


def test_validators_described():
    """Test custom validators are described without exposing callables."""
    schema = extract_model(Account, ExtractionFlags(include_validators=True))
    assert schema["handle"]["has_validators"] is True
    assert schema["handle"]["validator_count"] == 1
    assert schema["handle"]["validators"] == [{"kind": "after", "message": "Handles cannot contain spaces.", "validator": "[Function]"}]
    assert schema["nickname"]["validators"][0]["message"] == "Validation failed"
    assert schema["balance"]["validators"] == [{"kind": "after", "message": "Balance cannot be negative.", "validator": "[Function]"}]


def test_validators_skipped_when_disabled(flags):
    """Test validators are omitted without the feature."""
    schema = extract_model(Account, flags)
    assert "validators" not in schema["handle"]
    assert "has_validators" not in schema["balance"]


def test_defaults_described():
    """Test default values and factory markers."""
    schema = extract_model(Defaults, ExtractionFlags(include_defaults=True))
    assert schema["status"]["default_value"] == "active"
    assert schema["created"]["default_value"] == "[Function now]"
    assert schema["seed"]["default_value"] == "[Function]"
    assert schema["address"]["default_value"] == {"street": "Main", "city": "Athens"}
    assert schema["note"]["has_default"] is True
    assert schema["note"]["default_value"] is None


def test_defaults_skipped_when_disabled(flags):
    """Test defaults are omitted without the feature."""
    schema = extract_model(Defaults, flags)
    assert all("has_default" not in field for field in schema.values())


def test_computed_fields_as_virtuals():
    """Test computed properties are listed as virtual fields."""
    schema = extract_model(Person, ExtractionFlags(include_virtuals=True))
    assert schema["full_name"] == {"type": "Virtual", "computed": True}
    assert "full_name" not in extract_model(Person, ExtractionFlags())


def test_extract_single_field(flags):
    """Test a single field can be extracted from its declaration."""
    path = SchemaPath.from_field_info("tags", Kitchen.model_fields["tags"], owner=Kitchen)
    descriptor = extract_field(path, 0, flags)
    assert descriptor.to_dict() == {"type": "Array", "items": {"type": "String"}, "required": True}


def test_extract_single_field_past_depth(flags):
    """Test a field deeper than the bound is truncated."""
    path = SchemaPath.from_field_info("name", Kitchen.model_fields["name"], owner=Kitchen)
    assert extract_field(path, 11, flags).to_dict() == MAX_DEPTH
