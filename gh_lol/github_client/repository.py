"""Resolve which repository a command operates against.

A repository comes either from an explicit ``--repo`` override or from the
ambient context: ``$GH_REPO`` first, then the git remotes of the working
directory.
"""

import logging
import os
import re
import subprocess
from pathlib import Path
from urllib.parse import urlparse

from pydantic import ValidationError as PydanticValidationError

from ..errors import ContextResolutionError, ParseError
from .models import DEFAULT_HOST, Repository

logger = logging.getLogger(__name__)

# git@github.com:owner/name.git
SCP_LIKE_PATTERN = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")

# Remotes are tried in this order before any others
REMOTE_PRIORITY = ["upstream", "github", "origin"]


def default_host() -> str:
    """Return the host used when a repository string does not name one."""
    return normalize_host(os.getenv("GH_HOST") or DEFAULT_HOST)


def normalize_host(host: str) -> str:
    """Lowercase a hostname and fold github.com aliases."""
    host = host.lower()
    if host in ("www.github.com", "ssh.github.com"):
        return DEFAULT_HOST
    return host


def _build(host: str, owner: str, name: str, original: str) -> Repository:
    if name.endswith(".git"):
        name = name[: -len(".git")]
    try:
        return Repository(host=normalize_host(host), owner=owner, name=name)
    except PydanticValidationError:
        raise ParseError(
            f'expected the "[HOST/]OWNER/REPO" format, got "{original}"'
        ) from None


def _from_path(host: str, path: str, original: str) -> Repository:
    parts = path.strip("/").split("/")
    if len(parts) != 2 or not all(parts):
        raise ParseError(f'expected the "[HOST/]OWNER/REPO" format, got "{original}"')
    return _build(host, parts[0], parts[1], original)


def parse_repository(value: str) -> Repository:
    """Parse a repository identifier.

    Accepts ``OWNER/REPO``, ``HOST/OWNER/REPO`` and clone URLs in https, ssh
    or scp-like form.

    Raises:
        ParseError: If the value does not match any supported shape.
    """
    value = value.strip()
    if not value:
        raise ParseError('expected the "[HOST/]OWNER/REPO" format, got ""')

    if "://" in value:
        url = urlparse(value)
        if not url.hostname:
            raise ParseError(
                f'expected the "[HOST/]OWNER/REPO" format, got "{value}"'
            )
        return _from_path(url.hostname, url.path, value)

    match = SCP_LIKE_PATTERN.match(value)
    if match:
        return _from_path(match.group("host"), match.group("path"), value)

    parts = value.split("/")
    if not all(parts):
        raise ParseError(f'expected the "[HOST/]OWNER/REPO" format, got "{value}"')
    if len(parts) == 2:
        return _build(default_host(), parts[0], parts[1], value)
    if len(parts) == 3:
        return _build(parts[0], parts[1], parts[2], value)
    raise ParseError(f'expected the "[HOST/]OWNER/REPO" format, got "{value}"')


def _read_remotes(cwd: Path | None) -> dict[str, str]:
    """Return fetch URLs of the git remotes in ``cwd`` keyed by remote name."""
    try:
        result = subprocess.run(
            ["git", "remote", "-v"],
            capture_output=True,
            text=True,
            cwd=cwd,
            check=False,
        )
    except FileNotFoundError:
        raise ContextResolutionError(
            "could not determine current repository: git is not installed"
        ) from None

    if result.returncode != 0:
        detail = result.stderr.strip() or "not a git repository"
        raise ContextResolutionError(
            f"could not determine current repository: {detail}"
        )

    remotes: dict[str, str] = {}
    for line in result.stdout.splitlines():
        fields = line.split()
        if len(fields) < 2:
            continue
        if len(fields) >= 3 and fields[2] != "(fetch)":
            continue
        remotes.setdefault(fields[0], fields[1])
    return remotes


def _ordered(remotes: dict[str, str]) -> list[tuple[str, str]]:
    preferred = [(name, remotes[name]) for name in REMOTE_PRIORITY if name in remotes]
    rest = [(name, url) for name, url in remotes.items() if name not in REMOTE_PRIORITY]
    return preferred + rest


def current_repository(cwd: Path | None = None) -> Repository:
    """Infer the repository from the environment.

    Raises:
        ContextResolutionError: If neither ``$GH_REPO`` nor any git remote
            points at a repository on the configured host.
        ParseError: If ``$GH_REPO`` is set but malformed.
    """
    env_repo = os.getenv("GH_REPO")
    if env_repo:
        logger.debug("Using repository from GH_REPO: %s", env_repo)
        return parse_repository(env_repo)

    host = default_host()
    for remote_name, url in _ordered(_read_remotes(cwd)):
        try:
            repo = parse_repository(url)
        except ParseError:
            logger.debug("Skipping remote %s with unrecognised URL %s", remote_name, url)
            continue
        if repo.host != host:
            logger.debug("Skipping remote %s on host %s", remote_name, repo.host)
            continue
        logger.debug("Using repository %s from remote %s", repo.full_name, remote_name)
        return repo

    raise ContextResolutionError(
        "could not determine current repository: "
        f"no git remotes point to a repository on {host}"
    )


def resolve_repository(override: str | None, cwd: Path | None = None) -> Repository:
    """Return the override repository if given, else the ambient one."""
    if override:
        return parse_repository(override)
    return current_repository(cwd)
