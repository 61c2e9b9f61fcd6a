"""Link 链接记录."""

from datetime import datetime
from typing import Self

from feedstore.models.columns import (
    COLUMN_CHECKED_AT,
    COLUMN_FEED_ID,
    COLUMN_REPORT,
    COLUMN_REPORTED_AT,
    COLUMN_TIME,
    COLUMN_TITLE,
    COLUMN_VIEWS,
    COLUMN_VOTES_DOWN,
    COLUMN_VOTES_UP,
    LINK_COLUMNS,
    LinkStatus,
)
from feedstore.models.record import Record, new_id
from feedstore.utils.datetime_utils import (
    MAX_DATETIME,
    NULL_DATETIME,
    now_string,
    parse_datetime,
)


def _to_int(value: str) -> int:
    return int(value) if value else 0


class Link(Record):
    """Feed 下抓取到的链接."""

    columns = LINK_COLUMNS

    def __init__(self) -> None:
        super().__init__()
        now = now_string()
        self.set_id(new_id())
        self.set_status(LinkStatus.INACTIVE)
        self.set_feed_id("")
        self.set_title("")
        self.set_description("")
        self.set_url("")
        self.set_time(NULL_DATETIME)
        self.set_votes_up("0")
        self.set_votes_down("0")
        self.set_views("0")
        self.set_report("")
        self.set_reported_at(NULL_DATETIME)
        self.set_checked_at(NULL_DATETIME)
        self.set_created_at(now)
        self.set_updated_at(now)
        self.set_soft_deleted_at(MAX_DATETIME)

    @property
    def feed_id(self) -> str:
        """所属 Feed 的 ID（无外键约束）."""
        return self.get(COLUMN_FEED_ID)

    def set_feed_id(self, feed_id: str) -> Self:
        return self.set(COLUMN_FEED_ID, feed_id)

    @property
    def title(self) -> str:
        return self.get(COLUMN_TITLE)

    def set_title(self, title: str) -> Self:
        return self.set(COLUMN_TITLE, title)

    @property
    def time(self) -> str:
        """链接发布时间."""
        return self.get(COLUMN_TIME)

    def time_datetime(self) -> datetime | None:
        return parse_datetime(self.time)

    def set_time(self, time: str) -> Self:
        return self.set(COLUMN_TIME, time)

    @property
    def votes_up(self) -> str:
        return self.get(COLUMN_VOTES_UP)

    def votes_up_int(self) -> int:
        return _to_int(self.votes_up)

    def set_votes_up(self, votes_up: str | int) -> Self:
        return self.set(COLUMN_VOTES_UP, str(votes_up))

    @property
    def votes_down(self) -> str:
        return self.get(COLUMN_VOTES_DOWN)

    def votes_down_int(self) -> int:
        return _to_int(self.votes_down)

    def set_votes_down(self, votes_down: str | int) -> Self:
        return self.set(COLUMN_VOTES_DOWN, str(votes_down))

    @property
    def views(self) -> str:
        return self.get(COLUMN_VIEWS)

    def views_int(self) -> int:
        return _to_int(self.views)

    def set_views(self, views: str | int) -> Self:
        return self.set(COLUMN_VIEWS, str(views))

    @property
    def report(self) -> str:
        return self.get(COLUMN_REPORT)

    def set_report(self, report: str) -> Self:
        return self.set(COLUMN_REPORT, report)

    @property
    def reported_at(self) -> str:
        return self.get(COLUMN_REPORTED_AT)

    def reported_at_datetime(self) -> datetime | None:
        return parse_datetime(self.reported_at)

    def set_reported_at(self, reported_at: str) -> Self:
        return self.set(COLUMN_REPORTED_AT, reported_at)

    @property
    def checked_at(self) -> str:
        return self.get(COLUMN_CHECKED_AT)

    def checked_at_datetime(self) -> datetime | None:
        return parse_datetime(self.checked_at)

    def set_checked_at(self, checked_at: str) -> Self:
        return self.set(COLUMN_CHECKED_AT, checked_at)
