"""Blog post records."""

from __future__ import annotations

import dataclasses
import uuid
from datetime import datetime
from typing import ClassVar


@dataclasses.dataclass(kw_only=True)
class Comment:
    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    name: str | None = None
    email: str | None = None
    message: str | None = None
    date: datetime | None = None


@dataclasses.dataclass(kw_only=True)
class Post:
    __text_fields__: ClassVar[tuple[str, ...]] = ("title", "sub_title", "text")

    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    title: str
    sub_title: str | None = None
    link: str
    image: str | None = None
    text: str | None = None
    category: str | None = None
    tags: list[str] = dataclasses.field(default_factory=list)
    publish_date: datetime
    comments: list[Comment] = dataclasses.field(default_factory=list)
    views: int = 0


@dataclasses.dataclass(kw_only=True)
class PostListItem:
    id: uuid.UUID
    title: str
    link: str
    category: str | None = None
    publish_date: datetime | None = None
    comments_count: int = 0


@dataclasses.dataclass(kw_only=True)
class CommentListItem:
    """A comment flattened together with the post it belongs to."""

    post_id: uuid.UUID
    post_title: str
    id: uuid.UUID
    name: str | None = None
    email: str | None = None
    message: str | None = None
    date: datetime | None = None


__all__ = ["Comment", "CommentListItem", "Post", "PostListItem"]
