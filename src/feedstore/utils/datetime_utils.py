"""时间字符串工具.

记录中的时间统一保存为 UTC 的 ``YYYY-MM-DD HH:MM:SS`` 字符串，
软删除用远未来时间表示"未删除"，空时间用一个极早的占位值表示.
"""

from datetime import UTC, datetime

# 未删除 / 未设置的占位时间
MAX_DATETIME = "9999-12-31 23:59:59"
NULL_DATETIME = "0002-01-01 00:00:00"


def utc_now() -> datetime:
    """当前 UTC 时间."""
    return datetime.now(UTC)


def now_string() -> str:
    """当前 UTC 时间字符串."""
    return format_datetime(utc_now())


def format_datetime(value: datetime) -> str:
    """格式化为标准时间字符串（带时区的先转 UTC，年份补足四位）."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC).replace(tzinfo=None)
    return value.replace(microsecond=0).isoformat(sep=" ")


def parse_datetime(value: str) -> datetime | None:
    """
    解析时间字符串.

    兼容 ``2024-01-01 10:00:00``、ISO 格式以及带 ``+0000 UTC`` 后缀的驱动输出，
    空字符串或无法解析时返回 None.
    """
    if not value:
        return None

    text = value.strip().replace(" +0000 UTC", "").replace("T", " ")
    if text.endswith("Z"):
        text = text[:-1]

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
