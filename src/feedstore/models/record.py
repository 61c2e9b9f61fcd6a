"""带变更跟踪的记录基类."""

import uuid
from datetime import datetime
from typing import Self

from feedstore.models.columns import (
    COLUMN_CREATED_AT,
    COLUMN_DESCRIPTION,
    COLUMN_ID,
    COLUMN_SOFT_DELETED_AT,
    COLUMN_STATUS,
    COLUMN_UPDATED_AT,
    COLUMN_URL,
)
from feedstore.utils import datetime_utils
from feedstore.utils.datetime_utils import parse_datetime


def new_id() -> str:
    """生成新的记录 ID（32 位十六进制）."""
    return uuid.uuid4().hex


class DataObject:
    """
    字段名 -> 字符串值的记录，跟踪自上次持久化以来改动过的字段.

    内部维护两份快照：``_persisted`` 为加载/保存时的值，``_data`` 为当前值.
    脏字段集合始终是两者的净差异，改回原值后字段不再算作已修改.
    """

    # 子类声明自己识别的字段
    columns: tuple[str, ...] = ()

    def __init__(self) -> None:
        self._data: dict[str, str] = {}
        self._persisted: dict[str, str] = {}
        self._dirty: set[str] = set()

    @classmethod
    def from_existing_data(cls, data: dict[str, str]) -> Self:
        """用已存储的数据构建记录（不视为已修改）."""
        obj = cls.__new__(cls)
        DataObject.__init__(obj)
        for key, value in data.items():
            obj.set(key, value)
        obj.mark_clean()
        return obj

    def get(self, column: str) -> str:
        """获取当前值，未设置时返回空字符串."""
        return self._data.get(column, "")

    def set(self, column: str, value: str) -> Self:
        """设置当前值并更新脏字段集合."""
        self._data[column] = value
        if column in self._persisted and self._persisted[column] == value:
            self._dirty.discard(column)
        else:
            self._dirty.add(column)
        return self

    def get_persisted(self, column: str) -> str:
        """上次持久化时的值，从未持久化过时返回空字符串."""
        return self._persisted.get(column, "")

    def data(self) -> dict[str, str]:
        """当前完整快照."""
        return dict(self._data)

    def data_changed(self) -> dict[str, str]:
        """仅包含已修改字段的快照."""
        return {column: self._data[column] for column in self._dirty}

    def dirty_columns(self) -> "set[str]":
        return set(self._dirty)

    def is_dirty(self) -> bool:
        return bool(self._dirty)

    def mark_clean(self) -> None:
        """持久化成功后调用：当前值成为已保存值，清空脏字段."""
        self._persisted = dict(self._data)
        self._dirty.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.get('id')!r})"


class Record(DataObject):
    """Feed 与 Link 共用的字段访问器（ID、状态、时间戳、软删除）."""

    @property
    def id(self) -> str:
        return self.get(COLUMN_ID)

    def set_id(self, id: str) -> Self:  # noqa: A002
        return self.set(COLUMN_ID, id)

    @property
    def status(self) -> str:
        return self.get(COLUMN_STATUS)

    def set_status(self, status: str) -> Self:
        return self.set(COLUMN_STATUS, status)

    @property
    def description(self) -> str:
        return self.get(COLUMN_DESCRIPTION)

    def set_description(self, description: str) -> Self:
        return self.set(COLUMN_DESCRIPTION, description)

    @property
    def url(self) -> str:
        return self.get(COLUMN_URL)

    def set_url(self, url: str) -> Self:
        return self.set(COLUMN_URL, url)

    @property
    def created_at(self) -> str:
        return self.get(COLUMN_CREATED_AT)

    def created_at_datetime(self) -> datetime | None:
        return parse_datetime(self.created_at)

    def set_created_at(self, created_at: str) -> Self:
        return self.set(COLUMN_CREATED_AT, created_at)

    @property
    def updated_at(self) -> str:
        return self.get(COLUMN_UPDATED_AT)

    def updated_at_datetime(self) -> datetime | None:
        return parse_datetime(self.updated_at)

    def set_updated_at(self, updated_at: str) -> Self:
        return self.set(COLUMN_UPDATED_AT, updated_at)

    @property
    def soft_deleted_at(self) -> str:
        """软删除时间，远未来时间表示未删除."""
        return self.get(COLUMN_SOFT_DELETED_AT)

    def soft_deleted_at_datetime(self) -> datetime | None:
        return parse_datetime(self.soft_deleted_at)

    def set_soft_deleted_at(self, soft_deleted_at: str) -> Self:
        return self.set(COLUMN_SOFT_DELETED_AT, soft_deleted_at)

    def is_soft_deleted(self) -> bool:
        """软删除时间已过即视为已删除."""
        deleted_at = self.soft_deleted_at_datetime()
        if deleted_at is None:
            return False
        return deleted_at <= datetime_utils.utc_now()
