"""表字段与状态常量."""

COLUMN_ID = "id"
COLUMN_STATUS = "status"
COLUMN_NAME = "name"
COLUMN_TITLE = "title"
COLUMN_DESCRIPTION = "description"
COLUMN_URL = "url"
COLUMN_FEED_ID = "feed_id"
COLUMN_FETCH_INTERVAL = "fetch_interval"
COLUMN_LAST_FETCHED_AT = "last_fetched_at"
COLUMN_MEMO = "memo"
COLUMN_TIME = "time"
COLUMN_VOTES_UP = "votes_up"
COLUMN_VOTES_DOWN = "votes_down"
COLUMN_VIEWS = "views"
COLUMN_REPORT = "report"
COLUMN_REPORTED_AT = "reported_at"
COLUMN_CHECKED_AT = "checked_at"
COLUMN_CREATED_AT = "created_at"
COLUMN_UPDATED_AT = "updated_at"
COLUMN_SOFT_DELETED_AT = "soft_deleted_at"

FEED_COLUMNS: tuple[str, ...] = (
    COLUMN_ID,
    COLUMN_STATUS,
    COLUMN_NAME,
    COLUMN_DESCRIPTION,
    COLUMN_URL,
    COLUMN_FETCH_INTERVAL,
    COLUMN_LAST_FETCHED_AT,
    COLUMN_MEMO,
    COLUMN_CREATED_AT,
    COLUMN_UPDATED_AT,
    COLUMN_SOFT_DELETED_AT,
)

LINK_COLUMNS: tuple[str, ...] = (
    COLUMN_ID,
    COLUMN_STATUS,
    COLUMN_FEED_ID,
    COLUMN_TITLE,
    COLUMN_DESCRIPTION,
    COLUMN_URL,
    COLUMN_TIME,
    COLUMN_VOTES_UP,
    COLUMN_VOTES_DOWN,
    COLUMN_VIEWS,
    COLUMN_REPORT,
    COLUMN_REPORTED_AT,
    COLUMN_CHECKED_AT,
    COLUMN_CREATED_AT,
    COLUMN_UPDATED_AT,
    COLUMN_SOFT_DELETED_AT,
)


class FeedStatus:
    """Feed 状态."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class LinkStatus:
    """Link 状态."""

    ACTIVE = "active"
    INACTIVE = "inactive"


# 排序方向
ASC = "asc"
DESC = "desc"
