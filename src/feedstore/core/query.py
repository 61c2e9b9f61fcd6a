"""可选过滤条件查询的通用实现."""

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Self

from sqlalchemy import Select, TableClause, column, select, table
from sqlalchemy.sql.elements import ColumnElement

from feedstore.exceptions import QueryValidationError
from feedstore.models.columns import (
    ASC,
    COLUMN_CREATED_AT,
    COLUMN_ID,
    COLUMN_SOFT_DELETED_AT,
    COLUMN_STATUS,
    COLUMN_UPDATED_AT,
)
from feedstore.utils.datetime_utils import now_string

if TYPE_CHECKING:
    from feedstore.core.store import Store

Operator = Literal["eq", "in", "gte", "lte"]


@dataclass(frozen=True)
class FilterSpec:
    """一个过滤条件：参数名、对应字段、比较方式."""

    param: str
    column: str
    operator: Operator

    def check(self, value: Any) -> None:
        """已设置的过滤值不能为空."""
        if self.operator == "in":
            if len(value) < 1:
                msg = f"{self.param} cannot be empty array"
                raise QueryValidationError(msg)
        elif value == "":
            msg = f"{self.param} cannot be empty"
            raise QueryValidationError(msg)

    def apply(self, col: ColumnElement[Any], value: Any) -> ColumnElement[bool]:
        if self.operator == "eq":
            return col == value
        if self.operator == "in":
            return col.in_(value)
        if self.operator == "gte":
            return col >= value
        return col <= value


CREATED_AT_FILTERS = (
    FilterSpec("created_at_gte", COLUMN_CREATED_AT, "gte"),
    FilterSpec("created_at_lte", COLUMN_CREATED_AT, "lte"),
)
IDENTITY_FILTERS = (
    FilterSpec("id", COLUMN_ID, "eq"),
    FilterSpec("id_in", COLUMN_ID, "in"),
)
STATUS_FILTERS = (
    FilterSpec("status", COLUMN_STATUS, "eq"),
    FilterSpec("status_in", COLUMN_STATUS, "in"),
)
UPDATED_AT_FILTERS = (
    FilterSpec("updated_at_gte", COLUMN_UPDATED_AT, "gte"),
    FilterSpec("updated_at_lte", COLUMN_UPDATED_AT, "lte"),
)


class RecordQuery:
    """
    Feed / Link 查询的公共部分.

    每个参数都有三种状态：未设置（编译时忽略）、设置为空值（可能被校验拒绝）、
    设置为有效值（参与过滤）。是否设置只看参数是否出现在 ``_params`` 中，
    因此 ``set_with_soft_deleted(False)`` 与从未设置是可以区分的.

    子类提供表名、可排序字段、默认 limit，以及额外的过滤条件：
    ``reference_filters`` 紧跟状态条件之后，``secondary_filters`` 放在最后.
    """

    columns: tuple[str, ...] = ()
    default_limit: int | None = None
    reference_filters: tuple[FilterSpec, ...] = ()
    secondary_filters: tuple[FilterSpec, ...] = ()

    def __init__(self) -> None:
        self._params: dict[str, Any] = {}

    def table_name(self, store: "Store") -> str:
        raise NotImplementedError

    def filter_specs(self) -> tuple[FilterSpec, ...]:
        """按固定顺序返回所有过滤条件，保证生成的 SQL 稳定."""
        return (
            CREATED_AT_FILTERS
            + IDENTITY_FILTERS
            + STATUS_FILTERS
            + self.reference_filters
            + UPDATED_AT_FILTERS
            + self.secondary_filters
        )

    def copy(self) -> Self:
        duplicate = copy.copy(self)
        duplicate._params = copy.deepcopy(self._params)
        return duplicate

    # ------------------------------------------------------------------
    # 校验与编译
    # ------------------------------------------------------------------

    def validate(self) -> None:
        """校验参数，失败时抛出 QueryValidationError."""
        for spec in self.filter_specs():
            if spec.param in self._params:
                spec.check(self._params[spec.param])

        if self.is_limit_set() and self.get_limit() < 0:
            msg = "limit cannot be negative"
            raise QueryValidationError(msg)

        if self.is_offset_set() and self.get_offset() < 0:
            msg = "offset cannot be negative"
            raise QueryValidationError(msg)

        if self.is_order_by_set() and self.get_order_by() not in self.columns:
            msg = f"order_by must be one of {', '.join(self.columns)}"
            raise QueryValidationError(msg)

    def to_select(self, store: "Store | None") -> Select[Any]:
        """
        编译为 SELECT 语句.

        软删除可见性最后处理：only_soft_deleted 优先于 with_soft_deleted，
        都未开启时只返回 soft_deleted_at 晚于当前时间的记录.
        """
        if store is None:
            msg = "store cannot be None"
            raise QueryValidationError(msg)

        self.validate()

        tbl = self.table(store)
        stmt = select(tbl)

        for spec in self.filter_specs():
            if spec.param in self._params:
                stmt = stmt.where(spec.apply(tbl.c[spec.column], self._params[spec.param]))

        if not self.get_count_only():
            limit = self.get_limit() if self.is_limit_set() else self.default_limit
            if limit is not None:
                stmt = stmt.limit(limit)

            if self.is_offset_set():
                stmt = stmt.offset(self.get_offset())

            if self.is_order_by_set():
                order_column = tbl.c[self.get_order_by()]
                if self.get_order_direction().lower() == ASC:
                    stmt = stmt.order_by(order_column.asc())
                else:
                    stmt = stmt.order_by(order_column.desc())

        soft_deleted_at = tbl.c[COLUMN_SOFT_DELETED_AT]

        if self.get_only_soft_deleted():
            return stmt.where(soft_deleted_at <= now_string())

        if self.get_with_soft_deleted():
            return stmt

        return stmt.where(soft_deleted_at > now_string())

    def table(self, store: "Store") -> TableClause:
        """无类型的轻量表对象，字符串值原样绑定."""
        return table(self.table_name(store), *(column(name) for name in self.columns))

    # ------------------------------------------------------------------
    # 参数读写
    # ------------------------------------------------------------------

    def _is_set(self, param: str) -> bool:
        return param in self._params

    def _get(self, param: str, default: Any) -> Any:
        return self._params.get(param, default)

    def _set(self, param: str, value: Any) -> Self:
        self._params[param] = value
        return self

    def is_count_only_set(self) -> bool:
        return self._is_set("count_only")

    def get_count_only(self) -> bool:
        return self._get("count_only", False)

    def set_count_only(self, count_only: bool) -> Self:
        return self._set("count_only", count_only)

    def is_with_soft_deleted_set(self) -> bool:
        return self._is_set("with_soft_deleted")

    def get_with_soft_deleted(self) -> bool:
        return self._get("with_soft_deleted", False)

    def set_with_soft_deleted(self, with_soft_deleted: bool) -> Self:
        return self._set("with_soft_deleted", with_soft_deleted)

    def is_only_soft_deleted_set(self) -> bool:
        return self._is_set("only_soft_deleted")

    def get_only_soft_deleted(self) -> bool:
        return self._get("only_soft_deleted", False)

    def set_only_soft_deleted(self, only_soft_deleted: bool) -> Self:
        return self._set("only_soft_deleted", only_soft_deleted)

    def is_id_set(self) -> bool:
        return self._is_set("id")

    def get_id(self) -> str:
        return self._get("id", "")

    def set_id(self, id: str) -> Self:  # noqa: A002
        return self._set("id", id)

    def is_id_in_set(self) -> bool:
        return self._is_set("id_in")

    def get_id_in(self) -> list[str]:
        return list(self._get("id_in", []))

    def set_id_in(self, id_in: list[str]) -> Self:
        return self._set("id_in", list(id_in))

    def is_status_set(self) -> bool:
        return self._is_set("status")

    def get_status(self) -> str:
        return self._get("status", "")

    def set_status(self, status: str) -> Self:
        return self._set("status", status)

    def is_status_in_set(self) -> bool:
        return self._is_set("status_in")

    def get_status_in(self) -> list[str]:
        return list(self._get("status_in", []))

    def set_status_in(self, status_in: list[str]) -> Self:
        return self._set("status_in", list(status_in))

    def is_created_at_gte_set(self) -> bool:
        return self._is_set("created_at_gte")

    def get_created_at_gte(self) -> str:
        return self._get("created_at_gte", "")

    def set_created_at_gte(self, created_at_gte: str) -> Self:
        return self._set("created_at_gte", created_at_gte)

    def is_created_at_lte_set(self) -> bool:
        return self._is_set("created_at_lte")

    def get_created_at_lte(self) -> str:
        return self._get("created_at_lte", "")

    def set_created_at_lte(self, created_at_lte: str) -> Self:
        return self._set("created_at_lte", created_at_lte)

    def is_updated_at_gte_set(self) -> bool:
        return self._is_set("updated_at_gte")

    def get_updated_at_gte(self) -> str:
        return self._get("updated_at_gte", "")

    def set_updated_at_gte(self, updated_at_gte: str) -> Self:
        return self._set("updated_at_gte", updated_at_gte)

    def is_updated_at_lte_set(self) -> bool:
        return self._is_set("updated_at_lte")

    def get_updated_at_lte(self) -> str:
        return self._get("updated_at_lte", "")

    def set_updated_at_lte(self, updated_at_lte: str) -> Self:
        return self._set("updated_at_lte", updated_at_lte)

    def is_limit_set(self) -> bool:
        return self._is_set("limit")

    def get_limit(self) -> int:
        return self._get("limit", 0)

    def set_limit(self, limit: int) -> Self:
        return self._set("limit", limit)

    def is_offset_set(self) -> bool:
        return self._is_set("offset")

    def get_offset(self) -> int:
        return self._get("offset", 0)

    def set_offset(self, offset: int) -> Self:
        return self._set("offset", offset)

    def is_order_by_set(self) -> bool:
        return self._is_set("order_by")

    def get_order_by(self) -> str:
        return self._get("order_by", "")

    def set_order_by(self, order_by: str) -> Self:
        return self._set("order_by", order_by)

    def is_order_direction_set(self) -> bool:
        return self._is_set("order_direction")

    def get_order_direction(self) -> str:
        """未设置时为空字符串，编译时按降序处理."""
        return self._get("order_direction", "")

    def set_order_direction(self, order_direction: str) -> Self:
        return self._set("order_direction", order_direction)
