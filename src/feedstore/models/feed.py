"""Feed 订阅源记录."""

from datetime import datetime
from typing import Self

from feedstore.models.columns import (
    COLUMN_FETCH_INTERVAL,
    COLUMN_LAST_FETCHED_AT,
    COLUMN_MEMO,
    COLUMN_NAME,
    FEED_COLUMNS,
    FeedStatus,
)
from feedstore.models.record import Record, new_id
from feedstore.utils.datetime_utils import (
    MAX_DATETIME,
    NULL_DATETIME,
    now_string,
    parse_datetime,
)

DEFAULT_FETCH_INTERVAL = "600"


class Feed(Record):
    """RSS 订阅源."""

    columns = FEED_COLUMNS

    def __init__(self) -> None:
        super().__init__()
        now = now_string()
        self.set_id(new_id())
        self.set_status(FeedStatus.INACTIVE)
        self.set_name("")
        self.set_description("")
        self.set_url("")
        self.set_fetch_interval(DEFAULT_FETCH_INTERVAL)
        self.set_last_fetched_at(NULL_DATETIME)
        self.set_memo("")
        self.set_created_at(now)
        self.set_updated_at(now)
        self.set_soft_deleted_at(MAX_DATETIME)

    @property
    def name(self) -> str:
        return self.get(COLUMN_NAME)

    def set_name(self, name: str) -> Self:
        return self.set(COLUMN_NAME, name)

    @property
    def fetch_interval(self) -> str:
        """抓取间隔（秒）."""
        return self.get(COLUMN_FETCH_INTERVAL)

    def fetch_interval_int(self) -> int:
        """抓取间隔转为整数，非法值抛出 ValueError."""
        return int(self.fetch_interval)

    def set_fetch_interval(self, fetch_interval: str | int) -> Self:
        return self.set(COLUMN_FETCH_INTERVAL, str(fetch_interval))

    @property
    def last_fetched_at(self) -> str:
        return self.get(COLUMN_LAST_FETCHED_AT)

    def last_fetched_at_datetime(self) -> datetime | None:
        return parse_datetime(self.last_fetched_at)

    def set_last_fetched_at(self, last_fetched_at: str) -> Self:
        return self.set(COLUMN_LAST_FETCHED_AT, last_fetched_at)

    @property
    def memo(self) -> str:
        return self.get(COLUMN_MEMO)

    def set_memo(self, memo: str) -> Self:
        return self.set(COLUMN_MEMO, memo)
