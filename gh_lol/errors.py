"""Error types raised by gh-lol.

Every failure a user can hit derives from :class:`LolError`; the CLI layer
catches it, prints ``X <message>`` to stderr and exits non-zero.
"""


class LolError(Exception):
    """Base class for all gh-lol errors."""


class ParseError(LolError):
    """A repository override could not be parsed as OWNER/REPO."""


class ContextResolutionError(LolError):
    """No repository could be inferred from the working directory."""


class InteractiveRequiredError(LolError):
    """A required value was not supplied and stdout is not a terminal."""


class ValidationError(LolError):
    """A supplied value is out of range."""


class NoIssuesError(LolError):
    """The repository has no open issues to pick from."""


class AuthenticationError(LolError):
    """No GitHub token is available."""


class APIError(LolError):
    """A REST or GraphQL call failed."""
