"""Configuration for the Notion integration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotionConfig(BaseSettings):
    """Configuration for the Notion integration.

    All settings are loaded from environment variables with the NOTION_ prefix.

    :param integration_secret: Notion internal integration token.
    :param request_timeout: Timeout in seconds for a single API request.
    :param page_size: Number of results requested per paginated call.
    :param relation_workers: Number of threads used to resolve related page titles.
    """

    model_config = SettingsConfigDict(
        env_prefix="NOTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    integration_secret: str | None = Field(
        default=None,
        description="Notion integration token",
    )
    request_timeout: int = Field(
        default=30,
        ge=1,
        le=300,
        description="Request timeout in seconds",
    )
    page_size: int = Field(
        default=100,
        ge=1,
        le=100,
        description="Results per page for paginated calls",
    )
    relation_workers: int = Field(
        default=1,
        ge=1,
        le=16,
        description="Concurrent lookups when resolving related page titles",
    )


@lru_cache
def get_notion_settings() -> NotionConfig:
    """Get cached Notion settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured NotionConfig instance.
    """
    return NotionConfig()
