"""Tests for repository resolution."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from gh_lol.errors import ContextResolutionError, ParseError
from gh_lol.github_client.models import Repository
from gh_lol.github_client.repository import (
    current_repository,
    parse_repository,
    resolve_repository,
)


def git_remote_output(
    stdout: str, returncode: int = 0, stderr: str = ""
) -> subprocess.CompletedProcess[str]:
    """Build the result of `git remote -v`."""
    return subprocess.CompletedProcess(
        args=["git", "remote", "-v"], returncode=returncode, stdout=stdout, stderr=stderr
    )


class TestParseRepository:
    """Test parse_repository."""

    @pytest.mark.parametrize(
        "value,owner,name",
        [
            ("octo/cat", "octo", "cat"),
            ("cli/cli", "cli", "cli"),
            ("some-org/some.repo", "some-org", "some.repo"),
            ("  octo/cat  ", "octo", "cat"),
        ],
    )
    def test_owner_name(self, value: str, owner: str, name: str) -> None:
        """OWNER/NAME parses to exactly that pair."""
        repo = parse_repository(value)
        assert (repo.owner, repo.name) == (owner, name)
        assert repo.host == "github.com"

    def test_host_owner_name(self) -> None:
        """HOST/OWNER/NAME keeps the host."""
        repo = parse_repository("GHE.example.com/octo/cat")
        assert repo == Repository(host="ghe.example.com", owner="octo", name="cat")

    @pytest.mark.parametrize(
        "value",
        [
            "https://github.com/octo/cat",
            "https://github.com/octo/cat.git",
            "https://www.github.com/octo/cat/",
            "git@github.com:octo/cat.git",
            "ssh://git@github.com/octo/cat.git",
            "ssh://git@ssh.github.com:443/octo/cat.git",
        ],
    )
    def test_urls(self, value: str) -> None:
        """Clone URLs in every common shape resolve to octo/cat."""
        assert parse_repository(value) == Repository(owner="octo", name="cat")

    def test_gh_host_is_default_host(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """GH_HOST changes the host of OWNER/NAME values."""
        monkeypatch.setenv("GH_HOST", "ghe.example.com")
        assert parse_repository("octo/cat").host == "ghe.example.com"

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "   ",
            "octocat",
            "/cat",
            "octo/",
            "octo//cat",
            "a/b/c/d",
            "octo/.git",
            "https://github.com/octo",
            "https:///octo/cat",
        ],
    )
    def test_malformed(self, value: str) -> None:
        """Malformed overrides raise ParseError."""
        with pytest.raises(ParseError, match="OWNER/REPO"):
            parse_repository(value)


class TestCurrentRepository:
    """Test ambient repository inference."""

    def test_gh_repo_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """GH_REPO wins over git remotes."""
        monkeypatch.setenv("GH_REPO", "octo/cat")
        with patch("gh_lol.github_client.repository.subprocess.run") as mock_run:
            assert current_repository() == Repository(owner="octo", name="cat")
            mock_run.assert_not_called()

    @patch("gh_lol.github_client.repository.subprocess.run")
    def test_origin_remote(self, mock_run: Mock) -> None:
        """The origin remote is used when it is the only one."""
        mock_run.return_value = git_remote_output(
            "origin\tgit@github.com:octo/cat.git (fetch)\n"
            "origin\tgit@github.com:octo/cat.git (push)\n"
        )

        assert current_repository() == Repository(owner="octo", name="cat")
        assert mock_run.call_args.args[0] == ["git", "remote", "-v"]

    @patch("gh_lol.github_client.repository.subprocess.run")
    def test_upstream_preferred(self, mock_run: Mock) -> None:
        """upstream is preferred over origin."""
        mock_run.return_value = git_remote_output(
            "origin\thttps://github.com/me/cat.git (fetch)\n"
            "upstream\thttps://github.com/octo/cat.git (fetch)\n"
        )

        assert current_repository().full_name == "octo/cat"

    @patch("gh_lol.github_client.repository.subprocess.run")
    def test_skips_other_hosts(self, mock_run: Mock) -> None:
        """Remotes on hosts other than the GitHub host are ignored."""
        mock_run.return_value = git_remote_output(
            "origin\tgit@gitlab.com:octo/cat.git (fetch)\n"
            "mirror\thttps://github.com/octo/mirror.git (fetch)\n"
        )

        assert current_repository().full_name == "octo/mirror"

    @patch("gh_lol.github_client.repository.subprocess.run")
    def test_no_matching_remote(self, mock_run: Mock) -> None:
        """No usable remote raises ContextResolutionError."""
        mock_run.return_value = git_remote_output(
            "origin\tgit@gitlab.com:octo/cat.git (fetch)\n"
        )

        with pytest.raises(ContextResolutionError, match="no git remotes"):
            current_repository()

    @patch("gh_lol.github_client.repository.subprocess.run")
    def test_not_a_git_repository(self, mock_run: Mock) -> None:
        """A failing git command raises ContextResolutionError."""
        mock_run.return_value = git_remote_output(
            "", returncode=128, stderr="fatal: not a git repository"
        )

        with pytest.raises(ContextResolutionError, match="not a git repository"):
            current_repository()

    @patch("gh_lol.github_client.repository.subprocess.run")
    def test_git_not_installed(self, mock_run: Mock) -> None:
        """A missing git binary raises ContextResolutionError."""
        mock_run.side_effect = FileNotFoundError("git")

        with pytest.raises(ContextResolutionError, match="git is not installed"):
            current_repository()


class TestResolveRepository:
    """Test resolve_repository."""

    @patch("gh_lol.github_client.repository.current_repository")
    def test_override_skips_ambient(self, mock_current: Mock) -> None:
        """A non-empty override is parsed and the ambient lookup is skipped."""
        assert resolve_repository("octo/cat") == Repository(owner="octo", name="cat")
        mock_current.assert_not_called()

    @pytest.mark.parametrize("override", [None, ""])
    @patch("gh_lol.github_client.repository.current_repository")
    def test_falls_back_to_ambient(
        self, mock_current: Mock, override: str | None
    ) -> None:
        """No override means the ambient repository is used."""
        mock_current.return_value = Repository(owner="octo", name="cat")

        assert resolve_repository(override).full_name == "octo/cat"
        mock_current.assert_called_once_with(None)
