"""Pydantic models for the GitHub data gh-lol works with.

These models map onto the small subset of GitHub's REST and GraphQL
responses the extension needs.
API Reference: https://docs.github.com/en/rest/issues
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOST = "github.com"


class Repository(BaseModel):
    """A GitHub repository identifier.

    Resolved once per invocation, either from a ``--repo`` override or from
    the git remotes of the working directory.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(DEFAULT_HOST, description="GitHub hostname (string)")
    owner: str = Field(..., min_length=1, description="Repository owner (string)")
    name: str = Field(..., min_length=1, description="Repository name (string)")

    @property
    def full_name(self) -> str:
        """Return the repository in OWNER/NAME form."""
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class IssueSummary(BaseModel):
    """Number and title of an open issue or pull request.

    Maps to the ``number``/``title`` fields of both the REST Issue object and
    the GraphQL ``Issue`` node.
    """

    number: int = Field(..., description="Issue number within the repository")
    title: str = Field("", description="Issue title (string)")


class CommentRequest(BaseModel):
    """A comment about to be posted to an issue."""

    issue_number: int = Field(..., description="Issue to comment on")
    body: str = Field(..., description="Markdown body of the comment")
