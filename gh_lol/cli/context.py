"""Per-invocation state shared between the root callback and subcommands."""

import typer
from pydantic import BaseModel, ConfigDict
from rich.console import Console

from ..config import Settings
from ..errors import LolError
from ..github_client.models import Repository
from ..github_client.repository import resolve_repository

err_console = Console(stderr=True)


class AppContext(BaseModel):
    """Settings and the global ``--repo`` override, stored on ``ctx.obj``."""

    model_config = ConfigDict(frozen=True)

    settings: Settings
    repo_override: str | None = None

    def resolve_repository(self, override: str | None = None) -> Repository:
        """Resolve the repository, preferring a subcommand-level ``--repo``."""
        return resolve_repository(override or self.repo_override)


def get_app_context(ctx: typer.Context) -> AppContext:
    """Return the AppContext set up by the root callback."""
    if not isinstance(ctx.obj, AppContext):
        raise RuntimeError("gh-lol commands must be invoked through the root app")
    return ctx.obj


def fail(error: LolError) -> None:
    """Print ``error`` as ``X <message>`` on stderr and exit with status 1."""
    print_plain(err_console, f"X {error}")
    raise typer.Exit(1)


def print_plain(out: Console, text: str) -> None:
    """Print ``text`` verbatim: no markup, highlighting, emoji codes or wrapping."""
    out.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
