"""Unit tests for the per-entity query facades over the in-memory store."""

from __future__ import annotations

import asyncio
import random
import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from realty_query.adapters.memory import InMemoryDocumentStore
from realty_query.application.facades import (
    CustomerRequestsQueries,
    EventsQueries,
    ListingsQueries,
    PagesQueries,
    PostsQueries,
    SettingsQueries,
    decode_setting,
)
from realty_query.application.pagination import PaginationRequest, SortOrder
from realty_query.application.search import (
    ListingCoordinates,
    ListingSearchRequest,
    ListingsSortBy,
    TransactionTypeSearch,
)
from realty_query.config import QuerySettings
from realty_query.kernel.errors import NotFoundError, ValidationError
from realty_query.kernel.time import FrozenClock
from realty_query.kernel.types import Coordinates
from realty_query.models import (
    Address,
    Comment,
    CustomerRequest,
    CustomerRequestListItem,
    Event,
    EventType,
    GenericSettings,
    Listing,
    ListingListItem,
    ListingSource,
    ListingsSettings,
    Page,
    PageListItem,
    Post,
    PropertyType,
    RequestInformation,
    Setting,
    TransactionType,
    WebsiteSettings,
)

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def _run(coro: Any) -> Any:
    return asyncio.run(coro)


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


def _listing(**kwargs: Any) -> Listing:
    values: dict[str, Any] = {
        "transaction_type": TransactionType.FOR_SALE,
        "property_type": PropertyType.RESIDENTIAL,
    }
    values.update(kwargs)
    return Listing(**values)


class TestListingsSearch:
    def _queries(self) -> ListingsQueries:
        store = InMemoryDocumentStore(
            Listing,
            [
                _listing(mls_number="A1", price=300_000, address=Address(coordinates=Coordinates(44.0, -76.0))),
                _listing(mls_number="A2", price=100_000, address=Address(coordinates=Coordinates(44.1, -76.1))),
                _listing(mls_number="A3", price=200_000, address=Address(city="Kingston")),
                _listing(mls_number="R1", price=1_500, transaction_type=TransactionType.FOR_RENT),
            ],
        )
        return ListingsQueries(store)

    def test_page_and_markers(self) -> None:
        search = ListingSearchRequest(
            transaction_type=TransactionTypeSearch.FOR_SALE,
            sort_by=ListingsSortBy.PRICE_ASC,
            pagination=PaginationRequest(limit=2),
        )
        result = _run(self._queries().search(search))
        assert result.search is search
        assert result.result.total_records == 3
        assert [r.mls_number for r in result.result.results] == ["A2", "A3"]
        assert len(result.coordinates) == 2
        assert all(isinstance(c, ListingCoordinates) for c in result.coordinates)
        assert {c.latitude for c in result.coordinates} == {44.0, 44.1}

    def test_explicit_sort_field_wins(self) -> None:
        search = ListingSearchRequest(
            sort_by=ListingsSortBy.PRICE_ASC,
            pagination=PaginationRequest(sort_field="mls_number", sort_order=SortOrder.DESC),
        )
        result = _run(self._queries().search(search))
        assert result.result.results[0].mls_number == "R1"

    def test_marker_type_defaults_to_other(self) -> None:
        store = InMemoryDocumentStore(
            Listing, [Listing(address=Address(coordinates=Coordinates(1.0, 1.0)))]
        )
        result = _run(ListingsQueries(store).search(ListingSearchRequest()))
        assert result.coordinates[0].type is PropertyType.OTHER


class TestListingsReads:
    def test_get_listing(self) -> None:
        listing = _listing()
        queries = ListingsQueries(InMemoryDocumentStore(Listing, [listing]))
        assert _run(queries.get_listing(listing.id)) is listing

    def test_get_listing_missing(self) -> None:
        queries = ListingsQueries(InMemoryDocumentStore(Listing))
        with pytest.raises(NotFoundError):
            _run(queries.get_listing(uuid.uuid4()))

    def test_get_listings_filtered_and_projected(self) -> None:
        store = InMemoryDocumentStore(
            Listing, [_listing(mls_number="X1", price=125_000), _listing(mls_number="X2", price=90_000)]
        )
        page = _run(
            ListingsQueries(store).get_listings(
                PaginationRequest(), {"price": "250"}, destination=ListingListItem
            )
        )
        assert page.total_records == 1
        assert isinstance(page.results[0], ListingListItem)
        assert page.results[0].mls_number == "X1"

    def test_similar_listings(self) -> None:
        reference = _listing(price=500_000)
        close = _listing(price=520_000)
        far = _listing(price=900_000)
        queries = ListingsQueries(InMemoryDocumentStore(Listing, [reference, close, far]))
        assert _run(queries.get_similar_listings(reference.id)) == [close]

    def test_similar_listings_uses_settings_delta(self) -> None:
        reference = _listing(price=500_000)
        other = _listing(price=800_000)
        queries = ListingsQueries(
            InMemoryDocumentStore(Listing, [reference, other]),
            settings=QuerySettings(similar_max_price_delta=0.7),
        )
        assert _run(queries.get_similar_listings(reference.id)) == [other]

    def test_search_suggestions(self) -> None:
        listing = _listing(mls_number="K123", address=Address(city="Kingston"))
        queries = ListingsQueries(InMemoryDocumentStore(Listing, [listing, _listing(mls_number="Z9")]))
        suggestions = _run(queries.get_search_suggestions("  K12 "))
        assert len(suggestions) == 1
        assert suggestions[0].listing_id == listing.id
        assert suggestions[0].address == listing.address

    def test_featured_without_top_up(self) -> None:
        store = InMemoryDocumentStore(
            Listing, [_listing(featured=True), _listing(photos=["a.jpg"])], rng=random.Random(1)
        )
        featured = _run(ListingsQueries(store).get_featured_listings(limit=3))
        assert len(featured) == 1
        assert featured[0].featured

    def test_featured_top_up_requires_photos(self) -> None:
        store = InMemoryDocumentStore(
            Listing,
            [_listing(featured=True, photos=["f.jpg"]), _listing(photos=["a.jpg"]), _listing()],
            rng=random.Random(1),
        )
        featured = _run(ListingsQueries(store).get_featured_listings(limit=3, take_random_if_not_enough=True))
        assert len(featured) == 2
        assert featured[0].featured
        assert featured[1].photos == ["a.jpg"]
        assert len({listing.id for listing in featured}) == 2

    def test_empty_coordinates(self) -> None:
        missing = _listing(address=Address(city="Kingston"))
        store = InMemoryDocumentStore(
            Listing, [missing, _listing(), _listing(address=Address(coordinates=Coordinates(1.0, 1.0)))]
        )
        assert _run(ListingsQueries(store).get_listings_with_empty_coordinates()) == [missing]

    def test_external_ids_and_latest_update(self) -> None:
        store = InMemoryDocumentStore(
            Listing,
            [
                _listing(source=ListingSource.FEED, external_id="e1", last_updated=NOW - timedelta(days=2)),
                _listing(source=ListingSource.FEED, external_id="e2", last_updated=NOW),
                _listing(source=ListingSource.FEED),
                _listing(source=ListingSource.MANUAL, external_id="m1", last_updated=NOW + timedelta(days=1)),
            ],
        )
        queries = ListingsQueries(store)
        assert sorted(_run(queries.get_external_ids(ListingSource.FEED))) == ["e1", "e2"]
        assert _run(queries.get_latest_update(ListingSource.FEED)) == NOW

    def test_latest_update_none_when_empty(self) -> None:
        queries = ListingsQueries(InMemoryDocumentStore(Listing))
        assert _run(queries.get_latest_update(ListingSource.FEED)) is None


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------


def _post(title: str, days_ago: int, **kwargs: Any) -> Post:
    return Post(title=title, link=title.lower(), publish_date=NOW - timedelta(days=days_ago), **kwargs)


class _RecordingPostStore(InMemoryDocumentStore[Post]):
    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.find_calls: list[dict[str, Any]] = []
        self.element_calls: list[dict[str, Any]] = []

    async def find(self, spec: Any, **kwargs: Any) -> list[Any]:
        self.find_calls.append(kwargs)
        return await super().find(spec, **kwargs)

    async def find_elements(self, path: str, spec: Any, fields: Any, destination: type, **kwargs: Any) -> list[Any]:
        self.element_calls.append(kwargs)
        return await super().find_elements(path, spec, fields, destination, **kwargs)


class TestPostsQueries:
    def _queries(self) -> PostsQueries:
        posts = [
            _post("Old", 10, category="news", tags=["market", "tips"]),
            _post("New", 1, category="news", tags=["market"], comments=[Comment(name="a", date=NOW)]),
            _post("Future", -3, category="guides", tags=["draft"]),
            _post(
                "Guide",
                5,
                category="guides",
                text="How to stage a home",
                comments=[Comment(name="b", date=NOW - timedelta(hours=1)), Comment(name="c", date=NOW)],
            ),
        ]
        return PostsQueries(InMemoryDocumentStore(Post, posts), clock=FrozenClock(NOW))

    def test_published_newest_first(self) -> None:
        page = _run(self._queries().get_posts(PaginationRequest()))
        assert [p.title for p in page.results] == ["New", "Guide", "Old"]

    def test_include_not_published(self) -> None:
        page = _run(self._queries().get_posts(PaginationRequest(), include_not_published=True))
        assert page.total_records == 4
        assert page.results[0].title == "Future"

    def test_category_and_tag(self) -> None:
        queries = self._queries()
        assert _run(queries.get_category_posts(PaginationRequest(), "guides")).total_records == 1
        assert _run(queries.get_posts_by_tag(PaginationRequest(), "market")).total_records == 2

    def test_search_posts(self) -> None:
        page = _run(self._queries().search_posts(PaginationRequest(), "stage"))
        assert [p.title for p in page.results] == ["Guide"]

    def test_get_post_by_link_missing(self) -> None:
        with pytest.raises(NotFoundError):
            _run(self._queries().get_post_by_link("nope"))

    def test_categories_and_tags(self) -> None:
        queries = self._queries()
        assert _run(queries.get_categories()) == {"news": 2, "guides": 1}
        assert _run(queries.get_tags()) == ["market", "tips"]
        assert "draft" in _run(queries.get_tags(include_not_published=True))

    def test_clock_moves_publication(self) -> None:
        clock = FrozenClock(NOW)
        queries = PostsQueries(InMemoryDocumentStore(Post, [_post("Soon", -1)]), clock=clock)
        assert _run(queries.get_posts(PaginationRequest())).total_records == 0
        clock.advance(days=2)
        assert _run(queries.get_posts(PaginationRequest())).total_records == 1

    def test_comments_flattened_and_sorted(self) -> None:
        request = PaginationRequest(sort_field="date", sort_order=SortOrder.DESC, limit=2)
        page = _run(self._queries().get_comments(request))
        assert page.total_records == 3
        assert len(page.results) == 2
        assert page.results[-1].name != "b"

    def test_post_comments(self) -> None:
        queries = self._queries()
        guide = _run(queries.get_post_by_link("guide"))
        page = _run(queries.get_post_comments(guide.id, PaginationRequest(sort_field="name")))
        assert [c.name for c in page.results] == ["b", "c"]
        assert all(c.post_title == "Guide" for c in page.results)

    def test_posts_without_comments_add_no_rows(self) -> None:
        queries = PostsQueries(InMemoryDocumentStore(Post, [_post("Empty", 1)]), clock=FrozenClock(NOW))
        page = _run(queries.get_comments(PaginationRequest()))
        assert page.total_records == 0
        assert page.results == []

    def test_comment_window_is_read_by_the_store(self) -> None:
        store = _RecordingPostStore(
            Post, [_post(f"P{i}", i, comments=[Comment(name=f"c{i}", date=NOW)]) for i in range(50)]
        )
        page = _run(PostsQueries(store, clock=FrozenClock(NOW)).get_comments(PaginationRequest(offset=0, limit=1)))
        assert page.total_records == 50
        assert len(page.results) == 1
        assert store.find_calls == []
        assert store.element_calls == [{"sort": (), "skip": 0, "limit": 1}]

    def test_link_used(self) -> None:
        queries = self._queries()
        old = _run(queries.get_post_by_link("old"))
        assert _run(queries.is_link_used("old"))
        assert not _run(queries.is_link_used("old", exclude_ids=[old.id]))
        assert not _run(queries.is_link_used("unused"))


# ---------------------------------------------------------------------------
# Pages, events, customer requests
# ---------------------------------------------------------------------------


class TestPagesQueries:
    def test_published_only_by_default(self) -> None:
        pages = [Page(title="About", link="about"), Page(title="Draft", link="draft", unpublished=True)]
        queries = PagesQueries(InMemoryDocumentStore(Page, pages))
        assert _run(queries.get_pages(PaginationRequest())).total_records == 1
        page = _run(queries.get_pages(PaginationRequest(), include_not_published=True, destination=PageListItem))
        assert page.total_records == 2
        assert all(isinstance(p, PageListItem) for p in page.results)

    def test_lookups(self) -> None:
        about = Page(title="About", link="about")
        queries = PagesQueries(InMemoryDocumentStore(Page, [about]))
        assert _run(queries.get_page(about.id)) is about
        assert _run(queries.get_page_by_link("about")) is about
        assert _run(queries.is_link_used("about"))
        with pytest.raises(NotFoundError):
            _run(queries.get_page(uuid.uuid4()))


class TestEventsQueries:
    def _store(self) -> InMemoryDocumentStore[Event]:
        return InMemoryDocumentStore(
            Event,
            [
                Event(created_at=NOW - timedelta(days=1), type=EventType.ERROR, title="import failed"),
                Event(created_at=NOW, type=EventType.INFO, title="import done"),
                Event(created_at=NOW - timedelta(days=5), type=EventType.ERROR, title="older"),
            ],
        )

    def test_newest_first_with_filter(self) -> None:
        page = _run(EventsQueries(self._store()).get_events(PaginationRequest(), {"type": "error"}))
        assert [e.title for e in page.results] == ["import failed", "older"]

    def test_since(self) -> None:
        events = _run(EventsQueries(self._store()).get_events_since(NOW - timedelta(days=2)))
        assert [e.title for e in events] == ["import failed", "import done"]


class TestCustomerRequestsQueries:
    def test_list_projected_newest_first(self) -> None:
        requests = [
            CustomerRequest(date_time_utc=NOW - timedelta(hours=2), request=RequestInformation(name="Ann")),
            CustomerRequest(date_time_utc=NOW, read=True, request=RequestInformation(name="Bob")),
        ]
        queries = CustomerRequestsQueries(InMemoryDocumentStore(CustomerRequest, requests))
        page = _run(queries.get_customer_requests(PaginationRequest(), destination=CustomerRequestListItem))
        assert [r.request_name for r in page.results] == ["Bob", "Ann"]
        assert _run(queries.get_unread_count()) == 1
        assert _run(queries.get_customer_request(requests[0].id)) is requests[0]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettingsQueries:
    def _queries(self) -> SettingsQueries:
        return SettingsQueries(
            InMemoryDocumentStore(
                Setting,
                [
                    Setting(id="website", value={"website_name": "Lakeside Realty"}),
                    Setting(id="listings", value={"default_page_size": "not a number"}),
                    Setting(id="homepage", value={"hero": "banner.jpg"}),
                ],
            )
        )

    def test_known_type(self) -> None:
        assert _run(self._queries().get_setting("website")) == WebsiteSettings(website_name="Lakeside Realty")

    def test_unknown_type_is_generic(self) -> None:
        value = _run(self._queries().get_setting("homepage"))
        assert value == GenericSettings(type="homepage", value={"hero": "banner.jpg"})

    def test_absent_is_none(self) -> None:
        assert _run(self._queries().get_setting("missing")) is None

    def test_invalid_payload_raises(self) -> None:
        with pytest.raises(ValidationError) as exc:
            _run(self._queries().get_setting("listings"))
        assert exc.value.errors

    def test_explicit_shape(self) -> None:
        value = _run(self._queries().get_setting_as("homepage", dict))
        assert value == {"hero": "banner.jpg"}

    def test_decode_empty_value_uses_defaults(self) -> None:
        assert decode_setting("listings", None) == ListingsSettings()
