"""Plain schema fixtures for renderer tests."""

import pytest


@pytest.fixture
def schemas():
    """Hand-built schemas covering every descriptor shape."""
    return {
        "User": {
            "id": {"type": "ObjectReference"},
            "username": {"type": "String", "required": True, "unique": True, "min_length": 3, "max_length": 30},
            "email": {"type": "String", "required": True, "lowercase": True},
            "role": {"type": "String", "enum": ["user", "admin"], "enum_count": 2, "has_default": True, "default_value": "user"},
            "age": {"type": "Number", "min": 13, "max": 120},
            "posts": {"type": "Array", "items": {"type": "ObjectReference", "ref": "Post"}},
            "profile": {
                "type": "Object",
                "properties": {
                    "bio": {"type": "String", "max_length": 200},
                    "owner": {"type": "ObjectReference", "ref": "User", "required": True},
                },
                "property_count": 2,
            },
            "createdAt": {"type": "Date", "auto": True},
        },
        "Post": {
            "title": {"type": "String", "required": True, "max_length": 200},
            "author": {"type": "ObjectReference", "ref": "User", "required": True},
            "comments": {
                "type": "Array",
                "items": {"type": "Object", "properties": {"body": {"type": "String", "required": True}}, "property_count": 1},
            },
            "tags": {"type": "Array", "items": {"type": "String"}},
            "counters": {"type": "Map", "values": {"type": "Number"}},
            "price": {"type": "Decimal128"},
            "cover": {"type": "BinaryBuffer"},
            "parent": {"type": "Object", "circular": True},
        },
    }


@pytest.fixture
def circular_schemas():
    """A model that degraded to the root-level circular marker."""
    return {"Loop": {"type": "Circular", "description": "Circular reference detected"}}
