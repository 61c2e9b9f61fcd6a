"""feedstore - Feed 与 Link 的关系型数据库存储组件."""

from feedstore.core import FeedQuery, LinkQuery, Store, StoreOptions, create_store
from feedstore.exceptions import FeedStoreError, InvalidInputError, QueryValidationError
from feedstore.models import Feed, FeedStatus, Link, LinkStatus

__all__ = [
    "Feed",
    "FeedQuery",
    "FeedStatus",
    "FeedStoreError",
    "InvalidInputError",
    "Link",
    "LinkQuery",
    "LinkStatus",
    "QueryValidationError",
    "Store",
    "StoreOptions",
    "create_store",
]
