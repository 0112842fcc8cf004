"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer import Argument, Option

from github_user_search.configuration.exceptions import InvalidConfigurationElementError
from github_user_search.configuration.models import SearchConfig
from github_user_search.configuration.reconcile import reconcile_search_configuration
from github_user_search.github.abc import GitHubUserSearchClientBase
from github_user_search.github.adapter import PyGithubAdapter
from github_user_search.search.controller import SearchController
from github_user_search.session import SearchSession
from github_user_search.storage.query_store import QueryStore
from github_user_search.utils.constants import END_OF_RESULTS_MESSAGE
from github_user_search.utils.formatting import format_user_card, format_user_details, format_user_list
from github_user_search.utils.logs import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Search GitHub users from the terminal.")


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    debug: Annotated[bool | None, Option("--debug/--no-debug", help="Enable debug logging.")] = None,
    github_api_url: Annotated[str | None, Option(help="GitHub API URL.")] = None,
    per_page: Annotated[int | None, Option(help="Number of users requested per page.")] = None,
    default_query: Annotated[str | None, Option(help="Query used when the search query is empty.")] = None,
    query_store_path: Annotated[Path | None, Option(help="File holding the persisted search query.")] = None,
) -> None:
    """Reconcile configuration shared by all commands."""
    try:
        config = asyncio.run(
            reconcile_search_configuration(
                cli_debug=debug,
                cli_github_api_url=github_api_url,
                cli_per_page=per_page,
                cli_default_query=default_query,
                cli_query_store_path=query_store_path,
            )
        )
    except InvalidConfigurationElementError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(2) from exc
    configure_logging(config.debug)
    ctx.obj = config


def build_session(config: SearchConfig, client: GitHubUserSearchClientBase) -> SearchSession:
    """Build a search session from the reconciled configuration."""
    controller = SearchController(client, per_page=config.per_page, default_query=config.default_query)
    return SearchSession(
        controller,
        QueryStore(config.query_store_path),
        debounce_seconds=config.debounce_seconds,
        scroll_threshold=config.scroll_threshold,
    )


async def run_search(config: SearchConfig, query: str | None, pages: int, all_pages: bool) -> int:
    """Run a search and print result pages, scrolling for more until the page limit is reached.

    Returns:
        The process exit code.
    """
    adapter = await PyGithubAdapter.create(github_api_url=config.github_api_url, per_page=config.per_page)
    session = build_session(config, adapter)
    try:
        await session.start(query)
        state = session.state
        if state.error:
            typer.echo(state.error, err=True)
            return 1
        typer.echo(f"Results for '{session.controller.resolve_query(session.query)}':")
        typer.echo(format_user_list(state.items))

        rendered = len(state.items)
        pages_shown = 1
        while state.has_more and (all_pages or pages_shown < pages):
            session.scroll_to_end()
            await session.scroll_trigger.drain()
            state = session.state
            if state.error:
                typer.echo(state.error, err=True)
                return 1
            if len(state.items) == rendered:
                break
            for user in state.items[rendered:]:
                typer.echo(format_user_card(user))
            rendered = len(state.items)
            pages_shown += 1

        if not state.has_more and state.items:
            typer.echo(END_OF_RESULTS_MESSAGE)
        return 0
    finally:
        await session.close()
        adapter.close()


async def run_user(config: SearchConfig, login: str) -> int:
    """Print the detail view for a user.

    Returns:
        The process exit code.
    """
    adapter = await PyGithubAdapter.create(github_api_url=config.github_api_url, per_page=config.per_page)
    session = build_session(config, adapter)
    try:
        user = {"login": login}
        details = await session.select_user(user)
        if details is None:
            typer.echo(format_user_details(user, None), err=True)
            return 1
        typer.echo(format_user_details(user, details))
        return 0
    finally:
        await session.close()
        adapter.close()


@typer_app.command(name="search")
def search_cli(
    ctx: typer.Context,
    query: Annotated[str | None, Argument(help="Search query. Defaults to the persisted query.")] = None,
    pages: Annotated[int, Option(min=1, help="Number of result pages to show.")] = 1,
    all_pages: Annotated[bool, Option("--all", help="Keep loading pages until GitHub reports no more results.")] = False,
) -> None:
    """Search GitHub users and print the results."""
    config: SearchConfig = ctx.obj
    exit_code = asyncio.run(run_search(config, query=query, pages=pages, all_pages=all_pages))
    if exit_code:
        raise typer.Exit(exit_code)


@typer_app.command(name="user")
def user_cli(
    ctx: typer.Context,
    login: Annotated[str, Argument(help="GitHub login of the user.")],
) -> None:
    """Show the profile of a single GitHub user."""
    config: SearchConfig = ctx.obj
    exit_code = asyncio.run(run_user(config, login))
    if exit_code:
        raise typer.Exit(exit_code)


@typer_app.command(name="query")
def query_cli(
    ctx: typer.Context,
    clear: Annotated[bool, Option("--clear", help="Forget the persisted query.")] = False,
) -> None:
    """Show or clear the persisted search query."""
    config: SearchConfig = ctx.obj
    store = QueryStore(config.query_store_path)
    if clear:
        store.clear()
        typer.echo(f"Cleared persisted query in {config.query_store_path}")
        return
    typer.echo(store.load())


if __name__ == "__main__":
    typer_app()
