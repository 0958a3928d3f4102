"""CLI command that prints open issues loudly."""

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..errors import LolError
from ..github_client.client import GitHubClient
from ..github_client.models import IssueSummary, Repository
from ..prompts import resolve_loudness
from .context import fail, get_app_context, print_plain
from .options import LOUD_OPTION, REPO_OPTION

console = Console()

YELL_LIMIT = 25


def shout(title: str, loudness: int) -> str:
    """Uppercase ``title`` and append ``loudness`` exclamation marks."""
    return title.upper() + "!" * loudness


def run_yell(
    client: GitHubClient,
    repo: Repository,
    loudness: int,
    out: Console | None = None,
) -> list[IssueSummary]:
    """Fetch the first open issues of ``repo`` and print them loudly.

    Issues are printed twice: a plain ``<number> <title>`` listing, then the
    shouted titles. On a terminal those go in a table; piped output gets
    one tab-separated row per issue.
    """
    out = out or console

    issues = client.query_open_issues(repo, first=YELL_LIMIT)
    for issue in issues:
        print_plain(out, f"{issue.number} {issue.title}")

    # Piped output gets one row per line, uncropped
    if not out.is_terminal:
        for issue in issues:
            print_plain(out, f"#{issue.number}\t{shout(issue.title, loudness)}")
        return issues

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Issue #", style="cyan", no_wrap=True)
    table.add_column("Title", overflow="fold")
    for issue in issues:
        table.add_row(Text(f"#{issue.number}"), Text(shout(issue.title, loudness)))

    out.print(table)
    return issues


def yell(
    ctx: typer.Context,
    loud: int | None = LOUD_OPTION,
    repo: str | None = REPO_OPTION,
) -> None:
    """Print a list of issues loudly."""
    app_ctx = get_app_context(ctx)
    try:
        repository = app_ctx.resolve_repository(repo)
        loudness = resolve_loudness(loud, console=console)
        client = GitHubClient(host=repository.host)
        run_yell(client, repository, loudness)
    except LolError as e:
        fail(e)
