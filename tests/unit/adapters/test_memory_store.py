"""Unit tests for the in-memory document store."""

from __future__ import annotations

import asyncio
import random
from datetime import UTC, datetime
from typing import Any

from realty_query.adapters.memory import InMemoryDocumentStore
from realty_query.application.pagination import Sort, SortOrder
from realty_query.application.query.predicates import Eq, Gte
from realty_query.application.query.projection import MappingRegistry
from realty_query.kernel.ddd import TrueSpecification
from realty_query.models import Comment, CommentListItem, Post, PostListItem


def _run(coro: Any) -> Any:
    return asyncio.run(coro)


def _post(
    title: str,
    views: int,
    category: str | None = None,
    tags: list[str] | None = None,
    comments: list[Comment] | None = None,
) -> Post:
    return Post(
        title=title,
        link=title.lower(),
        publish_date=datetime(2024, 1, 1, tzinfo=UTC),
        views=views,
        category=category,
        tags=tags or [],
        comments=comments or [],
    )


_COMMENT_FIELDS = {"post_id": "id", "post_title": "title", "id": "comments.id", "name": "comments.name"}


def _store() -> InMemoryDocumentStore[Post]:
    return InMemoryDocumentStore(
        Post,
        [
            _post("A", 5, "news", ["x", "y"]),
            _post("B", 1, "news", ["y"]),
            _post("C", 9, None, ["z"]),
        ],
        rng=random.Random(7),
    )


class TestInMemoryDocumentStore:
    def test_name_defaults_to_type(self) -> None:
        assert _store().name == "post"
        assert InMemoryDocumentStore(Post, name="posts").name == "posts"

    def test_count_and_find(self) -> None:
        store = _store()
        assert _run(store.count(Gte("views", 5))) == 2
        found = _run(store.find(TrueSpecification(), sort=(Sort("views", SortOrder.DESC),), skip=1, limit=1))
        assert [p.title for p in found] == ["A"]

    def test_find_with_projection(self) -> None:
        mapping = MappingRegistry().register(Post, PostListItem)
        found = _run(_store().find(Eq("title", "B"), projection=mapping))
        assert found == [PostListItem(id=found[0].id, title="B", link="b", category="news",
                                      publish_date=datetime(2024, 1, 1, tzinfo=UTC))]

    def test_find_one(self) -> None:
        store = _store()
        assert _run(store.find_one(Eq("title", "C"))).views == 9
        assert _run(store.find_one(Eq("title", "nope"))) is None

    def test_sample_caps_at_matches(self) -> None:
        store = _store()
        assert len(_run(store.sample(TrueSpecification(), 10))) == 3
        assert len(_run(store.sample(TrueSpecification(), 2))) == 2
        assert _run(store.sample(Eq("title", "nope"), 2)) == []

    def test_distinct_flattens_sequences(self) -> None:
        assert sorted(_run(_store().distinct("tags", TrueSpecification()))) == ["x", "y", "z"]
        assert set(_run(_store().distinct("category", TrueSpecification()))) == {"news", None}

    def test_count_by(self) -> None:
        assert _run(_store().count_by("category", TrueSpecification())) == {"news": 2, None: 1}

    def test_element_reads_unwind_comments(self) -> None:
        store = InMemoryDocumentStore(
            Post,
            [
                _post("A", 1, comments=[Comment(name="b"), Comment(name="a")]),
                _post("B", 2),
                _post("C", 3, comments=[Comment(name="c")]),
            ],
        )
        assert _run(store.count_elements("comments", TrueSpecification())) == 3
        assert _run(store.count_elements("comments", Eq("title", "B"))) == 0
        rows = _run(
            store.find_elements(
                "comments", TrueSpecification(), _COMMENT_FIELDS, CommentListItem, sort=(Sort("name", SortOrder.ASC),), skip=1, limit=1
            )
        )
        assert [(r.post_title, r.name) for r in rows] == [("A", "b")]
        assert isinstance(rows[0], CommentListItem)

    def test_element_reads_keep_store_order_without_sort(self) -> None:
        store = InMemoryDocumentStore(Post, [_post("A", 1, comments=[Comment(name="z"), Comment(name="y")])])
        rows = _run(store.find_elements("comments", TrueSpecification(), _COMMENT_FIELDS, CommentListItem))
        assert [r.name for r in rows] == ["z", "y"]

    def test_add_and_clear(self) -> None:
        store = InMemoryDocumentStore(Post)
        store.add(_post("D", 0))
        assert _run(store.count(TrueSpecification())) == 1
        store.clear()
        assert _run(store.count(TrueSpecification())) == 0
