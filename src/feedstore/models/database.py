"""数据库引擎和表结构定义."""

import logging

from sqlalchemy import (
    Column,
    DateTime,
    Engine,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
)

from feedstore.config import Settings
from feedstore.models.columns import (
    COLUMN_CHECKED_AT,
    COLUMN_CREATED_AT,
    COLUMN_DESCRIPTION,
    COLUMN_FEED_ID,
    COLUMN_FETCH_INTERVAL,
    COLUMN_ID,
    COLUMN_LAST_FETCHED_AT,
    COLUMN_MEMO,
    COLUMN_NAME,
    COLUMN_REPORT,
    COLUMN_REPORTED_AT,
    COLUMN_SOFT_DELETED_AT,
    COLUMN_STATUS,
    COLUMN_TIME,
    COLUMN_TITLE,
    COLUMN_UPDATED_AT,
    COLUMN_URL,
    COLUMN_VIEWS,
    COLUMN_VOTES_DOWN,
    COLUMN_VOTES_UP,
)
from feedstore.utils.datetime_utils import MAX_DATETIME

logger = logging.getLogger(__name__)

ID_LENGTH = 40
STRING_LENGTH = 255


def feed_table(name: str, metadata: MetaData | None = None) -> Table:
    """Feed 表结构（仅用于建表）."""
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column(COLUMN_ID, String(ID_LENGTH), primary_key=True),
        Column(COLUMN_STATUS, String(ID_LENGTH)),
        Column(COLUMN_NAME, String(STRING_LENGTH)),
        Column(COLUMN_DESCRIPTION, Text),
        Column(COLUMN_URL, String(STRING_LENGTH)),
        Column(COLUMN_FETCH_INTERVAL, Integer),
        Column(COLUMN_LAST_FETCHED_AT, DateTime),
        Column(COLUMN_MEMO, Text),
        Column(COLUMN_CREATED_AT, DateTime),
        Column(COLUMN_UPDATED_AT, DateTime),
        Column(COLUMN_SOFT_DELETED_AT, DateTime, server_default=MAX_DATETIME),
    )


def link_table(name: str, metadata: MetaData | None = None) -> Table:
    """Link 表结构（仅用于建表）."""
    return Table(
        name,
        metadata if metadata is not None else MetaData(),
        Column(COLUMN_ID, String(ID_LENGTH), primary_key=True),
        Column(COLUMN_STATUS, String(ID_LENGTH)),
        Column(COLUMN_FEED_ID, String(ID_LENGTH)),
        Column(COLUMN_TITLE, String(STRING_LENGTH)),
        Column(COLUMN_DESCRIPTION, Text),
        Column(COLUMN_URL, String(STRING_LENGTH)),
        Column(COLUMN_TIME, DateTime),
        Column(COLUMN_VOTES_UP, Integer),
        Column(COLUMN_VOTES_DOWN, Integer),
        Column(COLUMN_VIEWS, Integer),
        Column(COLUMN_REPORT, Text),
        Column(COLUMN_REPORTED_AT, DateTime),
        Column(COLUMN_CHECKED_AT, DateTime),
        Column(COLUMN_CREATED_AT, DateTime),
        Column(COLUMN_UPDATED_AT, DateTime),
        Column(COLUMN_SOFT_DELETED_AT, DateTime, server_default=MAX_DATETIME),
    )


def create_engine_from_settings(settings: Settings) -> Engine:
    """根据配置创建数据库引擎（调用方负责 dispose）."""
    dialect = settings.database_url.split("://", 1)[0]
    logger.info(f"创建数据库引擎: {dialect}")
    return create_engine(settings.database_url, echo=settings.database_echo)
