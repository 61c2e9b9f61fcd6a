"""Feed 查询."""

from typing import TYPE_CHECKING, Self

from feedstore.core.query import FilterSpec, RecordQuery
from feedstore.models.columns import COLUMN_LAST_FETCHED_AT, FEED_COLUMNS

if TYPE_CHECKING:
    from feedstore.core.store import Store


class FeedQuery(RecordQuery):
    """Feed 查询，额外支持按最后抓取时间过滤."""

    columns = FEED_COLUMNS
    secondary_filters = (
        FilterSpec("last_fetched_at_gte", COLUMN_LAST_FETCHED_AT, "gte"),
        FilterSpec("last_fetched_at_lte", COLUMN_LAST_FETCHED_AT, "lte"),
    )

    def table_name(self, store: "Store") -> str:
        return store.feed_table_name

    def is_last_fetched_at_gte_set(self) -> bool:
        return self._is_set("last_fetched_at_gte")

    def get_last_fetched_at_gte(self) -> str:
        return self._get("last_fetched_at_gte", "")

    def set_last_fetched_at_gte(self, last_fetched_at_gte: str) -> Self:
        return self._set("last_fetched_at_gte", last_fetched_at_gte)

    def is_last_fetched_at_lte_set(self) -> bool:
        return self._is_set("last_fetched_at_lte")

    def get_last_fetched_at_lte(self) -> str:
        return self._get("last_fetched_at_lte", "")

    def set_last_fetched_at_lte(self, last_fetched_at_lte: str) -> Self:
        return self._set("last_fetched_at_lte", last_fetched_at_lte)
