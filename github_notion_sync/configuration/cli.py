"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_notion_sync.configuration.env import Settings
from github_notion_sync.configuration.exceptions import (
    ConfigurationParseError,
    ProjectMappingError,
    RequiredConfigurationElementError,
)
from github_notion_sync.configuration.reconcile import reconcile_sync_configuration
from github_notion_sync.synchronize.driver import run_sync

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


def configure_logging(debug: bool) -> None:
    """Configure structlog to render events to the console."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO),
        cache_logger_on_first_use=True,
    )


@typer_app.command(name="sync")
def sync_cli(
    debug: Annotated[bool, Option(help="Enable debug logging.")] = False,
    github_api_url: Annotated[str | None, Option(help="GitHub API URL.")] = None,
    github_pat_token: Annotated[str | None, Option(help="GitHub Personal Access Token.")] = None,
    github_repo_owner: Annotated[str | None, Option(help="Owner of the synchronized repositories.")] = None,
    repo_projects: Annotated[str | None, Option(help="Repository to Notion project pairs, e.g. 'api=API,web=Website'.")] = None,
    user_mapping: Annotated[str | None, Option(help="GitHub login to Notion user name pairs, e.g. 'octocat=Mona Lisa'.")] = None,
    notion_key: Annotated[str | None, Option(help="Notion integration token.")] = None,
    notion_tasks_database_id: Annotated[str | None, Option(help="ID of the Notion tasks database.")] = None,
    notion_projects_database_id: Annotated[str | None, Option(help="ID of the Notion projects database.")] = None,
    operation_batch_size: Annotated[int | None, Option(help="Number of Notion writes issued concurrently.")] = None,
) -> None:
    """Synchronize GitHub issues into the Notion tasks database.

    Every option falls back to its environment variable (see .env.example).
    """
    settings = Settings()
    configure_logging(debug or settings.DEBUG)
    try:
        config = asyncio.run(
            reconcile_sync_configuration(
                settings,
                cli_debug=debug,
                cli_github_api_url=github_api_url,
                cli_github_pat_token=github_pat_token,
                cli_github_repo_owner=github_repo_owner,
                cli_repo_projects=repo_projects,
                cli_user_mapping=user_mapping,
                cli_notion_key=notion_key,
                cli_notion_tasks_database_id=notion_tasks_database_id,
                cli_notion_projects_database_id=notion_projects_database_id,
                cli_operation_batch_size=operation_batch_size,
            )
        )
    except (RequiredConfigurationElementError, ConfigurationParseError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    try:
        result = asyncio.run(run_sync(config))
    except ProjectMappingError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    for repo_result in result.repo_results:
        typer.echo(
            f"{repo_result.repo}: {repo_result.issue_count} issues, {repo_result.created_count} tasks created, {repo_result.updated_count} tasks updated"
        )


def main() -> None:
    """Console script entry point."""
    typer_app()


if __name__ == "__main__":
    main()
