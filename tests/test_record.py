"""测试记录的变更跟踪和字段访问."""

from datetime import UTC, datetime

from feedstore.models.columns import FEED_COLUMNS, LINK_COLUMNS, FeedStatus, LinkStatus
from feedstore.models.feed import Feed
from feedstore.models.link import Link
from feedstore.models.record import DataObject
from feedstore.utils.datetime_utils import MAX_DATETIME, NULL_DATETIME
from tests.fakes import FakeClock


class TestDataObject:
    """测试 DataObject 脏字段跟踪."""

    def test_get_returns_empty_string_when_unset(self) -> None:
        """未设置的字段返回空字符串."""
        obj = DataObject()
        assert obj.get("missing") == ""

    def test_set_marks_column_dirty(self) -> None:
        """set() 后字段出现在 data_changed 中."""
        obj = DataObject().set("name", "value")
        assert obj.data_changed() == {"name": "value"}
        assert obj.is_dirty() is True

    def test_mark_clean_empties_dirty_set(self) -> None:
        """mark_clean() 后没有脏字段，但数据保留."""
        obj = DataObject().set("name", "value")
        obj.mark_clean()
        assert obj.data_changed() == {}
        assert obj.is_dirty() is False
        assert obj.data() == {"name": "value"}

    def test_setting_back_to_persisted_value_clears_dirty(self) -> None:
        """改回已保存的值后字段不再算作修改."""
        obj = DataObject.from_existing_data({"name": "original"})
        obj.set("name", "changed")
        assert obj.dirty_columns() == {"name"}

        obj.set("name", "original")
        assert obj.dirty_columns() == set()

    def test_empty_string_on_new_column_is_dirty(self) -> None:
        """从未持久化的字段即使设为空字符串也算修改."""
        obj = DataObject().set("memo", "")
        assert obj.dirty_columns() == {"memo"}

    def test_dirty_columns_returns_copy(self) -> None:
        """dirty_columns() 返回新的集合，修改它不影响记录."""
        obj = DataObject().set("name", "value")
        columns = obj.dirty_columns()
        columns.clear()
        assert obj.dirty_columns() == {"name"}

    def test_data_returns_copy(self) -> None:
        """data() 返回副本，修改副本不影响记录."""
        obj = DataObject().set("name", "value")
        snapshot = obj.data()
        snapshot["name"] = "other"
        assert obj.get("name") == "value"

    def test_get_persisted_tracks_last_saved_value(self) -> None:
        """get_persisted() 返回上次持久化的值."""
        obj = DataObject.from_existing_data({"name": "saved"})
        obj.set("name", "current")
        assert obj.get_persisted("name") == "saved"
        assert obj.get("name") == "current"


class TestFeedRecord:
    """测试 Feed 记录."""

    def test_new_feed_is_fully_dirty(self) -> None:
        """新建的 Feed 所有字段都是脏字段."""
        feed = Feed()
        assert feed.dirty_columns() == set(FEED_COLUMNS)

    def test_new_feed_defaults(self) -> None:
        """新建 Feed 的默认值."""
        feed = Feed()
        assert len(feed.id) == 32
        assert feed.status == FeedStatus.INACTIVE
        assert feed.fetch_interval == "600"
        assert feed.fetch_interval_int() == 600
        assert feed.last_fetched_at == NULL_DATETIME
        assert feed.soft_deleted_at == MAX_DATETIME
        assert feed.created_at == feed.updated_at

    def test_new_feeds_have_distinct_ids(self) -> None:
        """每个 Feed 的 ID 唯一."""
        assert Feed().id != Feed().id

    def test_from_existing_data_is_clean(self) -> None:
        """从存储数据构建的 Feed 没有脏字段."""
        feed = Feed.from_existing_data({"id": "feed-001", "name": "Stored"})
        assert feed.is_dirty() is False
        assert feed.id == "feed-001"
        assert feed.name == "Stored"

    def test_setters_chain_and_track_changes(self) -> None:
        """setter 可链式调用，只有改动的字段进入 data_changed."""
        feed = Feed.from_existing_data({"id": "feed-001", "name": "Old", "memo": ""})
        result = feed.set_name("New").set_memo("")
        assert result is feed
        assert feed.data_changed() == {"name": "New"}

    def test_set_fetch_interval_accepts_int(self) -> None:
        """抓取间隔可以用整数设置，保存为字符串."""
        feed = Feed().set_fetch_interval(3600)
        assert feed.fetch_interval == "3600"

    def test_datetime_helpers(self) -> None:
        """时间字段可解析为带时区的 datetime."""
        feed = Feed().set_created_at("2026-01-02 03:04:05")
        assert feed.created_at_datetime() == datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert feed.last_fetched_at_datetime() == datetime(2, 1, 1, tzinfo=UTC)

    def test_is_soft_deleted(self, clock: FakeClock) -> None:
        """软删除时间已过才算删除."""
        feed = Feed()
        assert feed.is_soft_deleted() is False

        feed.set_soft_deleted_at("2025-12-31 23:59:59")
        assert feed.is_soft_deleted() is True

        feed.set_soft_deleted_at("2026-01-01 00:00:01")
        assert feed.is_soft_deleted() is False

    def test_is_soft_deleted_follows_clock(self, clock: FakeClock) -> None:
        """时钟推进到软删除时间后记录变为已删除."""
        feed = Feed().set_soft_deleted_at("2026-01-01 00:00:02")
        assert feed.is_soft_deleted() is False

        clock.advance(2)
        assert feed.is_soft_deleted() is True


class TestLinkRecord:
    """测试 Link 记录."""

    def test_new_link_is_fully_dirty(self) -> None:
        """新建的 Link 所有字段都是脏字段."""
        link = Link()
        assert link.dirty_columns() == set(LINK_COLUMNS)

    def test_new_link_defaults(self) -> None:
        """新建 Link 的默认值."""
        link = Link()
        assert link.status == LinkStatus.INACTIVE
        assert link.votes_up == "0"
        assert link.votes_down == "0"
        assert link.views == "0"
        assert link.time == NULL_DATETIME
        assert link.reported_at == NULL_DATETIME
        assert link.checked_at == NULL_DATETIME
        assert link.soft_deleted_at == MAX_DATETIME
        assert link.is_soft_deleted() is False

    def test_counter_helpers(self) -> None:
        """计数字段的整数形式."""
        link = Link().set_votes_up(5).set_votes_down("2").set_views(10)
        assert link.votes_up_int() == 5
        assert link.votes_down_int() == 2
        assert link.views_int() == 10

    def test_counter_helper_treats_empty_as_zero(self) -> None:
        """空计数视为 0."""
        link = Link.from_existing_data({"views": ""})
        assert link.views_int() == 0

    def test_mark_clean_after_mutation(self) -> None:
        """修改后 mark_clean() 清空脏字段."""
        link = Link().set_title("Title").set_feed_id("feed-001")
        link.mark_clean()
        assert link.data_changed() == {}
        assert link.title == "Title"
        assert link.feed_id == "feed-001"
