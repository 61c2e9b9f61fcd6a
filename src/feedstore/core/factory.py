"""Store 工厂."""

from sqlalchemy import Engine

from feedstore.config import Settings, get_settings
from feedstore.core.store import Store, StoreOptions
from feedstore.models.database import create_engine_from_settings


def create_store(settings: Settings | None = None, engine: Engine | None = None) -> Store:
    """
    根据配置创建 Store.

    未传入 engine 时按 ``database_url`` 新建一个，由调用方负责 dispose.
    """
    if settings is None:
        settings = get_settings()

    if engine is None:
        engine = create_engine_from_settings(settings)

    return Store(
        StoreOptions(
            feed_table_name=settings.feed_table_name,
            link_table_name=settings.link_table_name,
            engine=engine,
            automigrate_enabled=settings.automigrate_enabled,
            debug_enabled=settings.debug_enabled,
        )
    )
