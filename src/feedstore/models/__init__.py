"""数据模型."""

from feedstore.models.columns import FeedStatus, LinkStatus
from feedstore.models.database import create_engine_from_settings, feed_table, link_table
from feedstore.models.feed import Feed
from feedstore.models.link import Link
from feedstore.models.record import DataObject, Record

__all__ = [
    "DataObject",
    "Feed",
    "FeedStatus",
    "Link",
    "LinkStatus",
    "Record",
    "create_engine_from_settings",
    "feed_table",
    "link_table",
]
