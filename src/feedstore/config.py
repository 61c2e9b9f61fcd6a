"""应用配置管理."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """feedstore 配置（环境变量，前缀 FEEDSTORE_）."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 数据库配置
    database_url: str = "sqlite:///./feedstore.db"
    database_echo: bool = False

    # 表名
    feed_table_name: str = "feeds"
    link_table_name: str = "links"

    # 存储行为
    automigrate_enabled: bool = True
    debug_enabled: bool = False


@lru_cache
def get_settings() -> Settings:
    """获取应用配置（带缓存）."""
    return Settings()
