"""Main CLI entry point."""

import logging
import os

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from ..config import SUPPORTIVE_MESSAGE, load_settings
from .context import AppContext
from .options import DEBUG_OPTION, REPO_OPTION
from .spam import spam
from .yell import yell

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-lol",
    help="gh lol: spam and yell at GitHub issues",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def debug_enabled(debug: bool) -> bool:
    """Return True if ``--debug`` was passed or GH_DEBUG is set."""
    if debug:
        return True
    value = os.getenv("GH_DEBUG", "")
    return value.lower() not in ("", "0", "false", "no")


def configure_logging(debug: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    repo: str | None = REPO_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """gh lol: spam and yell at GitHub issues."""
    configure_logging(debug_enabled(debug))

    settings = load_settings()
    if settings.supportive:
        console.print(SUPPORTIVE_MESSAGE)

    ctx.obj = AppContext(settings=settings, repo_override=repo)


app.command(name="spam", context_settings={"help_option_names": ["-h", "--help"]})(
    spam
)
app.command(name="yell", context_settings={"help_option_names": ["-h", "--help"]})(
    yell
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_lol import __version__

    console.print(f"gh-lol v{__version__}")


if __name__ == "__main__":
    app()
