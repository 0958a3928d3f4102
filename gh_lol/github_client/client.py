"""GitHub API client: REST through PyGitHub, GraphQL through httpx."""

import logging
import os
import subprocess
from typing import Any

import httpx
import requests
from github import Auth, Github
from github.GithubException import GithubException
from github.Repository import Repository as GithubRepository

from ..errors import APIError, AuthenticationError
from .models import DEFAULT_HOST, CommentRequest, IssueSummary, Repository

logger = logging.getLogger(__name__)

PER_PAGE = 100

OPEN_ISSUES_QUERY = """
query Issues($owner: String!, $name: String!, $first: Int!) {
  repository(owner: $owner, name: $name) {
    issues(first: $first, states: [OPEN]) {
      nodes {
        title
        number
      }
    }
  }
}
"""


def rest_base_url(host: str) -> str:
    """Return the REST API root for a GitHub host."""
    if host == DEFAULT_HOST:
        return "https://api.github.com"
    return f"https://{host}/api/v3"


def graphql_url(host: str) -> str:
    """Return the GraphQL endpoint for a GitHub host."""
    if host == DEFAULT_HOST:
        return "https://api.github.com/graphql"
    return f"https://{host}/api/graphql"


def token_from_gh(host: str) -> str | None:
    """Ask the gh CLI for its stored token, if gh is installed and logged in."""
    try:
        result = subprocess.run(
            ["gh", "auth", "token", "--hostname", host],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("gh is not installed; no stored token available")
        return None
    if result.returncode != 0:
        logger.debug("gh auth token failed: %s", result.stderr.strip())
        return None
    return result.stdout.strip() or None


class GitHubClient:
    """GitHub API client bound to a single host."""

    def __init__(
        self,
        token: str | None = None,
        host: str = DEFAULT_HOST,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub token. If None, reads GH_TOKEN or GITHUB_TOKEN, then
                falls back to the token stored by ``gh auth login``.
            host: GitHub hostname; anything but github.com is treated as
                GitHub Enterprise Server.
            transport: Optional httpx transport for GraphQL requests.
        """
        self.host = host
        self.token = (
            token
            or os.getenv("GH_TOKEN")
            or os.getenv("GITHUB_TOKEN")
            or token_from_gh(host)
        )
        if not self.token:
            raise AuthenticationError(
                f"GitHub token is required for {host}. "
                "Run 'gh auth login' or set GH_TOKEN."
            )

        self.github = Github(
            auth=Auth.Token(self.token),
            base_url=rest_base_url(host),
            per_page=PER_PAGE,
            # lazy: no request until an endpoint below the repository is hit
            lazy=True,
            # failures surface at once as APIError
            retry=None,
        )
        self._transport = transport

    def _get_repository(self, repo: Repository) -> GithubRepository:
        return self.github.get_repo(repo.full_name)

    def list_open_issues(self, repo: Repository) -> list[IssueSummary]:
        """Return the first page of open issues and pull requests.

        Args:
            repo: Repository to read from

        Returns:
            Up to 100 IssueSummary objects

        Raises:
            APIError: If the request fails
        """
        logger.debug("GET repos/%s/issues?per_page=%d", repo.full_name, PER_PAGE)
        try:
            issues = self._get_repository(repo).get_issues(state="open").get_page(0)
            return [
                IssueSummary(number=issue.number, title=issue.title or "")
                for issue in issues
            ]
        except (GithubException, requests.RequestException) as e:
            raise APIError(f"failed to get API: {e}") from e

    def add_issue_comment(self, repo: Repository, request: CommentRequest) -> None:
        """Post a comment to an issue or pull request.

        Raises:
            APIError: If the request fails
        """
        logger.debug(
            "POST repos/%s/issues/%d/comments", repo.full_name, request.issue_number
        )
        try:
            github_issue = self._get_repository(repo).get_issue(request.issue_number)
            github_issue.create_comment(request.body)
        except (GithubException, requests.RequestException) as e:
            raise APIError(f"failed to post API: {e}") from e

    def close_issue(self, repo: Repository, issue_number: int) -> None:
        """Set an issue's state to closed.

        Raises:
            APIError: If the request fails
        """
        logger.debug("PATCH repos/%s/issues/%d", repo.full_name, issue_number)
        try:
            github_issue = self._get_repository(repo).get_issue(issue_number)
            github_issue.edit(state="closed")
        except (GithubException, requests.RequestException) as e:
            raise APIError(f"failed to patch API: {e}") from e

    def graphql(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Run a GraphQL query and return its ``data`` object.

        Raises:
            APIError: On transport errors, non-2xx responses or a GraphQL
                ``errors`` payload.
        """
        headers = {
            "Authorization": f"bearer {self.token}",
            "Accept": "application/vnd.github+json",
        }
        try:
            with httpx.Client(headers=headers, transport=self._transport) as client:
                response = client.post(
                    graphql_url(self.host),
                    json={"query": query, "variables": variables},
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise APIError(
                f"failed to call API: HTTP {e.response.status_code} "
                f"{e.response.reason_phrase}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise APIError(f"failed to call API: {e}") from e

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(error.get("message", str(error)) for error in errors)
            raise APIError(f"failed to call API: {messages}")
        return payload.get("data") or {}

    def query_open_issues(self, repo: Repository, first: int = 25) -> list[IssueSummary]:
        """Return the first ``first`` open issues through GraphQL.

        Raises:
            APIError: If the query fails or the repository is not found
        """
        logger.debug("GraphQL Issues(first: %d) for %s", first, repo.full_name)
        data = self.graphql(
            OPEN_ISSUES_QUERY,
            {"owner": repo.owner, "name": repo.name, "first": first},
        )
        repository = data.get("repository")
        if repository is None:
            raise APIError(
                f"failed to call API: repository {repo.full_name} not found"
            )
        nodes = repository.get("issues", {}).get("nodes") or []
        return [IssueSummary(number=node["number"], title=node["title"]) for node in nodes]
