"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_notion_sync.utils.constants import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_NOTION_API_URL,
    DEFAULT_NOTION_VERSION,
    DEFAULT_OPERATION_BATCH_SIZE,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False
    OPERATION_BATCH_SIZE: int = DEFAULT_OPERATION_BATCH_SIZE

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_PAT_TOKEN: str | None = None
    GITHUB_REPO_OWNER: str | None = None

    # Repository to Notion project pairing. The keyed form wins over the
    # positional pair of lists.
    GITHUB_REPO_PROJECTS: str | None = None
    GITHUB_REPO_NAMES: str | None = None
    REPO_PROJECT_NAMES: str | None = None

    # GitHub login to Notion user name pairing, same precedence rules.
    GITHUB_NOTION_USERS: str | None = None
    GITHUB_USERNAMES: str | None = None
    NOTION_USERNAMES: str | None = None

    # Notion API settings
    NOTION_API_URL: str = DEFAULT_NOTION_API_URL
    NOTION_VERSION: str = DEFAULT_NOTION_VERSION
    NOTION_KEY: str | None = None
    NOTION_DATABASE_TASKS_ID: str | None = None
    NOTION_DATABASE_PROJECTS_ID: str | None = None
