"""测试配置和 fixtures."""

from collections.abc import Generator
from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

from feedstore.core.store import Store, StoreOptions
from feedstore.models.columns import FeedStatus
from feedstore.models.feed import Feed
from tests.fakes import FakeClock

FEED_TABLE = "feeds_test"
LINK_TABLE = "links_test"


@pytest.fixture
def clock() -> Generator[FakeClock, None, None]:
    """固定当前时间为 2026-01-01 00:00:00 UTC."""
    fake = FakeClock(datetime(2026, 1, 1, tzinfo=UTC))
    with patch("feedstore.utils.datetime_utils.utc_now", new=fake):
        yield fake


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """创建测试用的内存数据库引擎."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine: Engine) -> Store:
    """已建表的 Store."""
    return Store(
        StoreOptions(
            feed_table_name=FEED_TABLE,
            link_table_name=LINK_TABLE,
            engine=engine,
            automigrate_enabled=True,
        )
    )


@pytest.fixture
def sample_feeds(store: Store, clock: FakeClock) -> list[Feed]:
    """按时间先后创建的三个 Feed：active / inactive / active."""
    feeds = [
        Feed().set_name("Feed A").set_status(FeedStatus.ACTIVE),
        Feed().set_name("Feed B").set_status(FeedStatus.INACTIVE),
        Feed().set_name("Feed C").set_status(FeedStatus.ACTIVE),
    ]
    for feed in feeds:
        store.feed_create(feed)
        clock.advance()
    return feeds
