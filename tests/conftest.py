"""Test configuration and fixtures."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

from gh_lol.github_client.client import GitHubClient
from gh_lol.github_client.models import IssueSummary, Repository

AMBIENT_ENV_VARS = [
    "GH_REPO",
    "GH_HOST",
    "GH_TOKEN",
    "GITHUB_TOKEN",
    "GH_FORCE_TTY",
    "GH_DEBUG",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from the developer's gh environment."""
    for name in AMBIENT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Set explicitly so settings never shell out to `gh config get`
    monkeypatch.setenv("GH_LOL_SUPPORTIVE", "disabled")


@pytest.fixture
def repo() -> Repository:
    """The octo/cat repository on github.com."""
    return Repository(owner="octo", name="cat")


@pytest.fixture
def issues() -> list[IssueSummary]:
    """Two open issues."""
    return [
        IssueSummary(number=5, title="Hello"),
        IssueSummary(number=9, title="Broken build"),
    ]


@pytest.fixture
def mock_client(issues: list[IssueSummary]) -> MagicMock:
    """GitHubClient double returning the ``issues`` fixture."""
    client = MagicMock(spec=GitHubClient)
    client.list_open_issues.return_value = issues
    client.query_open_issues.return_value = issues
    return client


@pytest.fixture
def mock_github() -> Generator[MagicMock, None, None]:
    """Mock PyGitHub's Github class as used by the client."""
    with patch("gh_lol.github_client.client.Github") as mock_github_class:
        mock_github = MagicMock()
        mock_github_class.return_value = mock_github
        yield mock_github
