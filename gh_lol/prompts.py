"""Resolve command inputs from flags or, on a terminal, interactive prompts."""

import os
import sys

from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from .errors import InteractiveRequiredError, ValidationError

FORCE_TTY_ENV = "GH_FORCE_TTY"


def is_terminal_output() -> bool:
    """Return True when stdout is attached to an interactive terminal.

    ``GH_FORCE_TTY`` forces terminal behaviour, as it does for gh itself.
    """
    forced = os.getenv(FORCE_TTY_ENV)
    if forced and forced.lower() not in ("0", "false", "no"):
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def resolve_input(
    value: str | None,
    label: str,
    flag: str,
    default: str | None = None,
    console: Console | None = None,
) -> str:
    """Return ``value`` if supplied, otherwise prompt for it.

    Args:
        value: Value given on the command line, or None if absent
        label: Prompt text shown to the user
        flag: Name of the flag or argument, used in the error message
        default: Default offered by the prompt
        console: Console to prompt on

    Raises:
        InteractiveRequiredError: If the value is absent and stdout is not
            a terminal.
    """
    if value is not None:
        return value
    if not is_terminal_output():
        raise InteractiveRequiredError(f"{flag} required when not running interactively")
    if default is None:
        return Prompt.ask(label, console=console)
    return Prompt.ask(label, default=default, console=console)


def validate_loudness(loudness: int) -> int:
    """Reject loudness levels below 1."""
    if loudness < 1:
        raise ValidationError(f"expected a loudness of at least 1, got '{loudness}'")
    return loudness


def resolve_loudness(value: int | None, console: Console | None = None) -> int:
    """Return a validated loudness from ``--loud`` or a prompt."""
    if value is None:
        if not is_terminal_output():
            raise InteractiveRequiredError(
                "--loud required when not running interactively"
            )
        value = IntPrompt.ask("How loud?", default=1, console=console)
    return validate_loudness(value)


def resolve_message(value: str | None, console: Console | None = None) -> str:
    """Return the comment body from the positional argument or a prompt."""
    return resolve_input(value, "Comment", "message", console=console)
