"""核心存储逻辑."""

from feedstore.core.factory import create_store
from feedstore.core.feed_query import FeedQuery
from feedstore.core.link_query import LinkQuery
from feedstore.core.query import FilterSpec, RecordQuery
from feedstore.core.store import Store, StoreOptions

__all__ = [
    "FeedQuery",
    "FilterSpec",
    "LinkQuery",
    "RecordQuery",
    "Store",
    "StoreOptions",
    "create_store",
]
