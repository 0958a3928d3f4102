"""Shared CLI option definitions.

Keeping them in one place keeps the shorthand flags consistent between the
root command and the subcommands.
"""

import typer

REPO_OPTION = typer.Option(
    None, "--repo", "-R", help="Repository to use in OWNER/REPO format"
)

DEBUG_OPTION = typer.Option(
    False, "--debug", help="Log API calls to stderr (also enabled by GH_DEBUG)"
)

LOUD_OPTION = typer.Option(None, "--loud", "-l", help="How loud to be")

SEED_OPTION = typer.Option(
    None, "--seed", hidden=True, help="Seed for picking the issue to spam"
)

MESSAGE_ARGUMENT = typer.Argument(
    None, help="Comment to post (prompted for when omitted)"
)
