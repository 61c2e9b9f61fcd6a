"""Link 查询."""

from typing import TYPE_CHECKING, Self

from feedstore.core.query import FilterSpec, RecordQuery
from feedstore.models.columns import COLUMN_FEED_ID, COLUMN_URL, LINK_COLUMNS

if TYPE_CHECKING:
    from feedstore.core.store import Store

# 未指定 limit 时的上限，避免整表扫描
DEFAULT_LINK_LIMIT = 1000


class LinkQuery(RecordQuery):
    """Link 查询，额外支持按 feed_id 和 url 过滤."""

    columns = LINK_COLUMNS
    default_limit = DEFAULT_LINK_LIMIT
    reference_filters = (
        FilterSpec("feed_id", COLUMN_FEED_ID, "eq"),
        FilterSpec("url", COLUMN_URL, "eq"),
    )

    def table_name(self, store: "Store") -> str:
        return store.link_table_name

    def is_feed_id_set(self) -> bool:
        return self._is_set("feed_id")

    def get_feed_id(self) -> str:
        return self._get("feed_id", "")

    def set_feed_id(self, feed_id: str) -> Self:
        return self._set("feed_id", feed_id)

    def is_url_set(self) -> bool:
        return self._is_set("url")

    def get_url(self) -> str:
        return self._get("url", "")

    def set_url(self, url: str) -> Self:
        return self._set("url", url)
