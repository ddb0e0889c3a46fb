"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SyncConfig:
    """Reconciled configuration for a synchronization run."""

    github_pat_token: str
    github_repo_owner: str
    notion_key: str
    notion_tasks_database_id: str
    notion_projects_database_id: str
    # Ordered mapping of repository name to Notion project name.
    repo_projects: dict[str, str]
    # GitHub login to Notion user name.
    user_mapping: dict[str, str] = field(default_factory=dict)
    github_api_url: str = "https://api.github.com"
    notion_api_url: str = "https://api.notion.com/v1"
    notion_version: str = "2022-06-28"
    operation_batch_size: int = 10
    debug: bool = False

    @property
    def repos(self) -> list[str]:
        """Configured repositories in processing order."""
        return list(self.repo_projects)
