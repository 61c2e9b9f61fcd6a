"""Feed / Link 存储服务."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, TypeVar

from sqlalchemy import Engine, column, delete, func, insert, table, update
from sqlalchemy.schema import CreateTable
from sqlalchemy.sql import ClauseElement

from feedstore.core.feed_query import FeedQuery
from feedstore.core.link_query import LinkQuery
from feedstore.core.query import RecordQuery
from feedstore.exceptions import InvalidInputError
from feedstore.models.columns import COLUMN_ID, COLUMN_UPDATED_AT
from feedstore.models.database import feed_table, link_table
from feedstore.models.feed import Feed
from feedstore.models.link import Link
from feedstore.models.record import Record
from feedstore.utils.datetime_utils import format_datetime, now_string

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)


@dataclass
class StoreOptions:
    """Store 构造参数."""

    feed_table_name: str = ""
    link_table_name: str = ""
    engine: Engine | None = None
    driver_name: str = ""
    automigrate_enabled: bool = False
    debug_enabled: bool = False


def _to_string(value: Any) -> str:
    """把驱动返回的值还原为记录使用的字符串形式."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


class Store:
    """
    Feed / Link 存储.

    每次调用都从调用方提供的 Engine 连接池中取连接并同步执行，
    Store 不创建也不关闭 Engine.
    """

    def __init__(self, options: StoreOptions) -> None:
        if not options.feed_table_name:
            msg = "feed store: feed_table_name is required"
            raise InvalidInputError(msg)

        if not options.link_table_name:
            msg = "feed store: link_table_name is required"
            raise InvalidInputError(msg)

        if options.engine is None:
            msg = "feed store: engine is required"
            raise InvalidInputError(msg)

        self._engine = options.engine
        self._feed_table_name = options.feed_table_name
        self._link_table_name = options.link_table_name
        self._driver_name = options.driver_name or options.engine.dialect.name
        self._debug_enabled = options.debug_enabled

        if options.automigrate_enabled:
            self.auto_migrate()

    # ------------------------------------------------------------------
    # 基本信息
    # ------------------------------------------------------------------

    @property
    def driver_name(self) -> str:
        return self._driver_name

    @property
    def feed_table_name(self) -> str:
        return self._feed_table_name

    @property
    def link_table_name(self) -> str:
        return self._link_table_name

    @property
    def debug_enabled(self) -> bool:
        return self._debug_enabled

    def enable_debug(self, debug: bool) -> None:
        """开启后每条生成的 SQL 都会写入日志."""
        self._debug_enabled = debug

    # ------------------------------------------------------------------
    # 建表
    # ------------------------------------------------------------------

    def sql_feed_table_create(self) -> str:
        return self._compile(self._feed_table_ddl())

    def sql_link_table_create(self) -> str:
        return self._compile(self._link_table_ddl())

    def auto_migrate(self) -> None:
        """创建 Feed 和 Link 表（已存在则跳过）."""
        with self._engine.begin() as conn:
            for ddl in (self._feed_table_ddl(), self._link_table_ddl()):
                self._log_sql(ddl)
                conn.execute(ddl)

        logger.info(
            f"数据表已就绪: {self._feed_table_name}, {self._link_table_name}"
        )

    def _feed_table_ddl(self) -> CreateTable:
        return CreateTable(feed_table(self._feed_table_name), if_not_exists=True)

    def _link_table_ddl(self) -> CreateTable:
        return CreateTable(link_table(self._link_table_name), if_not_exists=True)

    # ------------------------------------------------------------------
    # Feed
    # ------------------------------------------------------------------

    def feed_count(self, query: FeedQuery | None = None) -> int:
        """统计符合条件的 Feed 数量."""
        return self._count(query if query is not None else FeedQuery())

    def feed_create(self, feed: Feed | None) -> None:
        self._create(self._feed_table_name, feed, "feed")

    def feed_delete(self, feed: Feed | None) -> None:
        if feed is None:
            msg = "feed is None"
            raise InvalidInputError(msg)
        self.feed_delete_by_id(feed.id)

    def feed_delete_by_id(self, id: str) -> None:  # noqa: A002
        """物理删除，记录不存在时不报错."""
        self._delete_by_id(self._feed_table_name, id, "feed")

    def feed_find_by_id(self, id: str) -> Feed | None:  # noqa: A002
        """按 ID 查找，未找到返回 None."""
        if not id:
            msg = "feed id is empty"
            raise InvalidInputError(msg)

        feeds = self.feed_list(FeedQuery().set_id(id).set_limit(1))
        return feeds[0] if feeds else None

    def feed_list(self, query: FeedQuery | None = None) -> list[Feed]:
        return self._list(query if query is not None else FeedQuery(), Feed)

    def feed_soft_delete(self, feed: Feed | None) -> None:
        if feed is None:
            msg = "feed is None"
            raise InvalidInputError(msg)

        feed.set_soft_deleted_at(now_string())
        self.feed_update(feed)

    def feed_soft_delete_by_id(self, id: str) -> None:  # noqa: A002
        """先查找再软删除；ID 不存在时抛出 InvalidInputError."""
        self.feed_soft_delete(self.feed_find_by_id(id))

    def feed_update(self, feed: Feed | None) -> None:
        self._update(self._feed_table_name, feed, "feed")

    # ------------------------------------------------------------------
    # Link
    # ------------------------------------------------------------------

    def link_count(self, query: LinkQuery | None = None) -> int:
        """统计符合条件的 Link 数量."""
        return self._count(query if query is not None else LinkQuery())

    def link_create(self, link: Link | None) -> None:
        self._create(self._link_table_name, link, "link")

    def link_delete(self, link: Link | None) -> None:
        if link is None:
            msg = "link is None"
            raise InvalidInputError(msg)
        self.link_delete_by_id(link.id)

    def link_delete_by_id(self, id: str) -> None:  # noqa: A002
        """物理删除，记录不存在时不报错."""
        self._delete_by_id(self._link_table_name, id, "link")

    def link_find_by_id(self, id: str) -> Link | None:  # noqa: A002
        """按 ID 查找，未找到返回 None."""
        if not id:
            msg = "link id is empty"
            raise InvalidInputError(msg)

        links = self.link_list(LinkQuery().set_id(id).set_limit(1))
        return links[0] if links else None

    def link_list(self, query: LinkQuery | None = None) -> list[Link]:
        return self._list(query if query is not None else LinkQuery(), Link)

    def link_soft_delete(self, link: Link | None) -> None:
        if link is None:
            msg = "link is None"
            raise InvalidInputError(msg)

        link.set_soft_deleted_at(now_string())
        self.link_update(link)

    def link_soft_delete_by_id(self, id: str) -> None:  # noqa: A002
        """先查找再软删除；ID 不存在时抛出 InvalidInputError."""
        self.link_soft_delete(self.link_find_by_id(id))

    def link_update(self, link: Link | None) -> None:
        self._update(self._link_table_name, link, "link")

    # ------------------------------------------------------------------
    # 通用实现
    # ------------------------------------------------------------------

    def _count(self, query: RecordQuery) -> int:
        # 复制一份，避免修改调用方的查询对象
        stmt = query.copy().set_count_only(True).to_select(self)

        count_stmt = (
            stmt.with_only_columns(
                func.count().label("count"), maintain_column_froms=True
            )
            .order_by(None)
            .limit(None)
            .offset(None)
        )
        self._log_sql(count_stmt)

        with self._engine.connect() as conn:
            value = conn.execute(count_stmt).scalar()

        return int(value) if value else 0

    def _list(self, query: RecordQuery, record_cls: type[RecordT]) -> list[RecordT]:
        stmt = query.to_select(self)
        self._log_sql(stmt)

        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

        return [
            record_cls.from_existing_data(
                {key: _to_string(value) for key, value in row.items()}
            )
            for row in rows
        ]

    def _create(self, table_name: str, record: Record | None, kind: str) -> None:
        if record is None:
            msg = f"{kind} is None"
            raise InvalidInputError(msg)

        now = now_string()
        record.set_created_at(now)
        record.set_updated_at(now)

        data = record.data()
        tbl = table(table_name, *(column(name) for name in data))
        stmt = insert(tbl).values(data)
        self._log_sql(stmt)

        with self._engine.begin() as conn:
            conn.execute(stmt)

        record.mark_clean()

    def _update(self, table_name: str, record: Record | None, kind: str) -> None:
        if record is None:
            msg = f"{kind} is None"
            raise InvalidInputError(msg)

        record.set_updated_at(now_string())

        changed = record.data_changed()

        # ID 创建后不可修改，始终按已保存的 ID 更新
        record_id = record.get_persisted(COLUMN_ID) or record.id
        if changed.pop(COLUMN_ID, None) is not None and record.id != record_id:
            logger.warning(f"忽略 {kind} ID 的修改: {record_id} -> {record.id}")
            record.set_id(record_id)

        if not set(changed) - {COLUMN_UPDATED_AT}:
            logger.debug(f"{kind} {record_id} 没有字段变化，跳过更新")
            return

        changed[COLUMN_UPDATED_AT] = record.updated_at

        tbl = table(table_name, *(column(name) for name in (COLUMN_ID, *changed)))
        stmt = update(tbl).where(tbl.c[COLUMN_ID] == record_id).values(changed)
        self._log_sql(stmt)

        with self._engine.begin() as conn:
            conn.execute(stmt)

        record.mark_clean()

    def _delete_by_id(self, table_name: str, record_id: str, kind: str) -> None:
        if not record_id:
            msg = f"{kind} id is empty"
            raise InvalidInputError(msg)

        tbl = table(table_name, column(COLUMN_ID))
        stmt = delete(tbl).where(tbl.c[COLUMN_ID] == record_id)
        self._log_sql(stmt)

        with self._engine.begin() as conn:
            conn.execute(stmt)

    def _compile(self, stmt: ClauseElement) -> str:
        return str(stmt.compile(dialect=self._engine.dialect)).strip()

    def _log_sql(self, stmt: ClauseElement) -> None:
        if self._debug_enabled:
            logger.info(self._compile(stmt))
