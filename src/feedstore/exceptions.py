"""feedstore 异常定义."""


class FeedStoreError(Exception):
    """feedstore 基础异常."""


class InvalidInputError(FeedStoreError, ValueError):
    """输入参数错误（空 ID、空记录、缺少配置等），在任何 I/O 之前抛出."""


class QueryValidationError(FeedStoreError, ValueError):
    """查询参数校验失败."""
