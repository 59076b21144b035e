"""Shared model fixtures for schema extractor tests."""

from datetime import datetime
from typing import Annotated, Dict, List, Literal, Optional

import pytest
from beanie import Document, Link, PydanticObjectId
from pydantic import BaseModel, Field, StringConstraints

from schema_extractor.models import ModelRegistry


class User(Document):
    username: str = Field(min_length=3, max_length=30, json_schema_extra={"unique": True})
    email: Annotated[str, StringConstraints(to_lower=True)] = Field(json_schema_extra={"unique": True})
    role: Literal["user", "admin"] = "user"
    age: Optional[int] = Field(default=None, ge=13, le=120)
    posts: List[Link["Post"]] = Field(default_factory=list)

    class Settings:
        timestamps = True


class Comment(BaseModel):
    body: str = Field(max_length=500)
    author_id: PydanticObjectId = Field(json_schema_extra={"ref": "User"})


class Post(Document):
    title: str = Field(max_length=200)
    author: Link[User]
    reviewer: Optional[PydanticObjectId] = Field(default=None, json_schema_extra={"ref": "User"})
    pinned: Optional[Comment] = None
    comments: List[Comment] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    counters: Dict[str, int] = Field(default_factory=dict)
    published_at: Optional[datetime] = None


User.model_rebuild()


class Category(BaseModel):
    name: str
    parent: Optional["Category"] = None
    children: List["Category"] = Field(default_factory=list)


Category.model_rebuild()


@pytest.fixture
def user_model():
    """User document with string constraints, an enum and an array of references."""
    return User


@pytest.fixture
def post_model():
    """Post document with references and embedded comments."""
    return Post


@pytest.fixture
def comment_model():
    """Embedded comment model."""
    return Comment


@pytest.fixture
def category_model():
    """Self-referencing embedded model."""
    return Category


@pytest.fixture
def registry():
    """Registry holding the User and Post documents."""
    models = ModelRegistry()
    models.register(User)
    models.register(Post)
    return models
