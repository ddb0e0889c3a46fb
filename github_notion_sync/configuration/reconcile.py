"""Reconcile synchronization configuration from CLI arguments and environment variables."""

from typing import Iterable

import structlog

from github_notion_sync.configuration.env import Settings
from github_notion_sync.configuration.exceptions import (
    ConfigurationParseError,
    ProjectMappingError,
    RequiredConfigurationElementError,
)
from github_notion_sync.configuration.models import SyncConfig
from github_notion_sync.synchronize.models import ProjectRecord
from github_notion_sync.utils.helpers import split_comma_separated

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def parse_keyed_mapping(raw: str | None, env_name: str) -> dict[str, str]:
    """Parse a `key=value,key=value` string into an ordered mapping.

    Args:
        raw (str | None): The raw configuration value.
        env_name (str): Name of the environment variable, used in error messages.

    Raises:
        ConfigurationParseError: If an entry lacks a `=`, has an empty side, or repeats a key.

    Returns:
        dict[str, str]: The parsed mapping, in configured order.
    """
    mapping: dict[str, str] = {}
    for entry in split_comma_separated(raw):
        key, separator, value = entry.partition("=")
        key, value = key.strip(), value.strip()
        if not separator or not key or not value:
            raise ConfigurationParseError(env_name, f"entry '{entry}' is not in the form key=value")
        if key in mapping:
            raise ConfigurationParseError(env_name, f"key '{key}' is defined more than once")
        mapping[key] = value
    return mapping


def pair_positional_lists(left: str | None, right: str | None, left_env_name: str, right_env_name: str) -> dict[str, str]:
    """Pair two comma-separated lists by position into a mapping.

    Raises:
        ConfigurationParseError: If the lists differ in length or the left list repeats a value.
    """
    left_items = split_comma_separated(left)
    right_items = split_comma_separated(right)
    if len(left_items) != len(right_items):
        raise ConfigurationParseError(
            left_env_name,
            f"has {len(left_items)} entries but {right_env_name} has {len(right_items)}; the lists are paired by position",
        )
    mapping: dict[str, str] = {}
    for key, value in zip(left_items, right_items):
        if key in mapping:
            raise ConfigurationParseError(left_env_name, f"value '{key}' is listed more than once")
        mapping[key] = value
    return mapping


def resolve_repo_projects(settings: Settings, cli_repo_projects: str | None = None) -> dict[str, str]:
    """Resolve the repository to Notion project name mapping.

    The keyed form (CLI option or GITHUB_REPO_PROJECTS) takes precedence over
    the positional GITHUB_REPO_NAMES/REPO_PROJECT_NAMES pair.
    """
    keyed = cli_repo_projects or settings.GITHUB_REPO_PROJECTS
    if keyed:
        return parse_keyed_mapping(keyed, "GITHUB_REPO_PROJECTS")
    if settings.GITHUB_REPO_NAMES or settings.REPO_PROJECT_NAMES:
        logger.debug("Using positional repository to project pairing")
        return pair_positional_lists(settings.GITHUB_REPO_NAMES, settings.REPO_PROJECT_NAMES, "GITHUB_REPO_NAMES", "REPO_PROJECT_NAMES")
    return {}


def resolve_user_mapping(settings: Settings, cli_user_mapping: str | None = None) -> dict[str, str]:
    """Resolve the GitHub login to Notion user name mapping.

    An unconfigured mapping is empty, which leaves every synced task unassigned.
    """
    keyed = cli_user_mapping or settings.GITHUB_NOTION_USERS
    if keyed:
        return parse_keyed_mapping(keyed, "GITHUB_NOTION_USERS")
    if settings.NOTION_USERNAMES is None:
        return {}
    return pair_positional_lists(settings.GITHUB_USERNAMES, settings.NOTION_USERNAMES, "GITHUB_USERNAMES", "NOTION_USERNAMES")


async def reconcile_sync_configuration(
    settings: Settings,
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_pat_token: str | None = None,
    cli_github_repo_owner: str | None = None,
    cli_repo_projects: str | None = None,
    cli_user_mapping: str | None = None,
    cli_notion_key: str | None = None,
    cli_notion_tasks_database_id: str | None = None,
    cli_notion_projects_database_id: str | None = None,
    cli_operation_batch_size: int | None = None,
) -> SyncConfig:
    """Reconciles CLI arguments with environment settings into a SyncConfig.

    CLI arguments win over environment variables when both are provided.

    Raises:
        RequiredConfigurationElementError: If a required element is missing from both sources.
        ConfigurationParseError: If a mapping or the batch size is malformed.

    Returns:
        SyncConfig: The reconciled configuration.
    """
    required: list[tuple[str | None, str, str, str]] = [
        (cli_github_pat_token or settings.GITHUB_PAT_TOKEN, "GitHub PAT token", "--github-pat-token", "GITHUB_PAT_TOKEN"),
        (cli_github_repo_owner or settings.GITHUB_REPO_OWNER, "GitHub repository owner", "--github-repo-owner", "GITHUB_REPO_OWNER"),
        (cli_notion_key or settings.NOTION_KEY, "Notion API key", "--notion-key", "NOTION_KEY"),
        (
            cli_notion_tasks_database_id or settings.NOTION_DATABASE_TASKS_ID,
            "Notion tasks database ID",
            "--notion-tasks-database-id",
            "NOTION_DATABASE_TASKS_ID",
        ),
        (
            cli_notion_projects_database_id or settings.NOTION_DATABASE_PROJECTS_ID,
            "Notion projects database ID",
            "--notion-projects-database-id",
            "NOTION_DATABASE_PROJECTS_ID",
        ),
    ]
    values: list[str] = []
    for value, name, cli_name, env_name in required:
        if not value:
            raise RequiredConfigurationElementError(name=name, cli_name=cli_name, env_name=env_name)
        values.append(value)
    github_pat_token, github_repo_owner, notion_key, tasks_database_id, projects_database_id = values

    repo_projects = resolve_repo_projects(settings, cli_repo_projects)
    if not repo_projects:
        raise RequiredConfigurationElementError(
            name="GitHub repository to Notion project mapping",
            cli_name="--repo-projects",
            env_name="GITHUB_REPO_PROJECTS",
        )

    batch_size = cli_operation_batch_size if cli_operation_batch_size is not None else settings.OPERATION_BATCH_SIZE
    if batch_size < 1:
        raise ConfigurationParseError("OPERATION_BATCH_SIZE", f"must be at least 1, got {batch_size}")

    return SyncConfig(
        github_pat_token=github_pat_token,
        github_repo_owner=github_repo_owner,
        notion_key=notion_key,
        notion_tasks_database_id=tasks_database_id,
        notion_projects_database_id=projects_database_id,
        repo_projects=repo_projects,
        user_mapping=resolve_user_mapping(settings, cli_user_mapping),
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        notion_api_url=settings.NOTION_API_URL,
        notion_version=settings.NOTION_VERSION,
        operation_batch_size=batch_size,
        debug=cli_debug or settings.DEBUG,
    )


def validate_project_mapping(repo_projects: dict[str, str], projects: Iterable[ProjectRecord]) -> dict[str, str]:
    """Resolve each configured repository to its Notion project page ID.

    Raises:
        ProjectMappingError: If any repository's project name matches no project record.

    Returns:
        dict[str, str]: Repository name to project page ID.
    """
    project_id_by_name: dict[str, str] = {}
    for project in projects:
        # First project with a given name wins, matching lookup by name.
        project_id_by_name.setdefault(project.name, project.id)

    resolved: dict[str, str] = {}
    unresolved: dict[str, str] = {}
    for repo, project_name in repo_projects.items():
        project_id = project_id_by_name.get(project_name)
        if project_id is None:
            unresolved[repo] = project_name
        else:
            resolved[repo] = project_id
    if unresolved:
        logger.error("Configured repositories reference unknown Notion projects", unresolved=unresolved)
        raise ProjectMappingError(unresolved)
    return resolved
