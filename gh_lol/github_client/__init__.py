"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import CommentRequest, IssueSummary, Repository
from .repository import current_repository, parse_repository, resolve_repository

__all__ = [
    "GitHubClient",
    "CommentRequest",
    "IssueSummary",
    "Repository",
    "current_repository",
    "parse_repository",
    "resolve_repository",
]
