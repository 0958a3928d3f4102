"""CLI command that comments on a random open issue and closes it."""

import logging
import random
import time

import typer
from rich.console import Console

from ..errors import LolError, NoIssuesError
from ..github_client.client import GitHubClient
from ..github_client.models import CommentRequest, IssueSummary, Repository
from ..prompts import resolve_message
from .context import fail, get_app_context, print_plain
from .options import MESSAGE_ARGUMENT, REPO_OPTION, SEED_OPTION

logger = logging.getLogger(__name__)
console = Console()


def run_spam(
    client: GitHubClient,
    repo: Repository,
    message: str,
    rng: random.Random | None = None,
    out: Console | None = None,
) -> IssueSummary:
    """Post ``message`` on a random open issue of ``repo`` and close it.

    The comment is not rolled back if closing the issue fails.

    Args:
        client: GitHub client
        repo: Repository to spam
        message: Comment body
        rng: Random source; seeded from the wall clock when omitted
        out: Console for the confirmation line

    Returns:
        The issue that was picked

    Raises:
        NoIssuesError: If the repository has no open issues
        APIError: If any API call fails
    """
    out = out or console

    issues = client.list_open_issues(repo)
    if not issues:
        raise NoIssuesError(f"no issues to choose from in {repo.full_name}")

    if rng is None:
        rng = random.Random(time.time_ns())
    choice = rng.choice(issues)
    logger.debug("Picked #%d out of %d open issues", choice.number, len(issues))

    client.add_issue_comment(
        repo, CommentRequest(issue_number=choice.number, body=message)
    )
    client.close_issue(repo, choice.number)

    print_plain(out, f"Closed #{choice.number} with '{message}'")
    return choice


def spam(
    ctx: typer.Context,
    message: str | None = MESSAGE_ARGUMENT,
    repo: str | None = REPO_OPTION,
    seed: int | None = SEED_OPTION,
) -> None:
    """Comment on a random issue or pr in a repository."""
    app_ctx = get_app_context(ctx)
    try:
        repository = app_ctx.resolve_repository(repo)
        body = resolve_message(message, console=console)
        client = GitHubClient(host=repository.host)
        rng = random.Random(seed) if seed is not None else None
        run_spam(client, repository, body, rng=rng)
    except LolError as e:
        fail(e)
