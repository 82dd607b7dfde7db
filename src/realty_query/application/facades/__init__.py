"""Application facades – per-entity read operations."""
from realty_query.application.facades.base import EntityQueries
from realty_query.application.facades.customer_requests import CustomerRequestsQueries
from realty_query.application.facades.events import EventsQueries
from realty_query.application.facades.listings import ListingsQueries
from realty_query.application.facades.mappings import default_registry, register_defaults
from realty_query.application.facades.pages import PagesQueries
from realty_query.application.facades.posts import COMMENT_FIELDS, PostsQueries, link_in_use
from realty_query.application.facades.settings import SettingsQueries, decode_setting

__all__ = [
    "COMMENT_FIELDS",
    "CustomerRequestsQueries",
    "EntityQueries",
    "EventsQueries",
    "ListingsQueries",
    "PagesQueries",
    "PostsQueries",
    "SettingsQueries",
    "decode_setting",
    "default_registry",
    "link_in_use",
    "register_defaults",
]
