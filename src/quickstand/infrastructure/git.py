"""Git path validation and repository-name derivation.

Both helpers are best-effort. A missing git binary, a non-zero exit, output
that is not UTF-8 or an unreadable path degrades to ``False`` or to the
basename, recorded only at debug level. Neither function ever raises.
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

# Last path segment of a remote URL, minus an optional ``.git`` suffix.
# Splitting on ``:`` as well covers scp-style remotes (``git@host:repo.git``).
_REMOTE_NAME_RE = re.compile(r"[/:]([^/:]+?)(?:\.git)?/?$")


def _run_git(path: Path, *args: str) -> subprocess.CompletedProcess[str]:
    """Run ``git -C <path> <args>``. Raises on failure.

    Output is decoded as strict UTF-8, so undecodable bytes raise
    :class:`UnicodeDecodeError` instead of yielding a mangled name.
    """
    return subprocess.run(
        ["git", "-C", str(path), *args],
        capture_output=True,
        encoding="utf-8",
        errors="strict",
        check=True,
    )


_GIT_FAILURES = (OSError, subprocess.CalledProcessError, UnicodeDecodeError)


def is_git_repository(path: str | Path) -> bool:
    """True if *path* is a directory inside a git working tree.

    A ``.git`` directory is accepted directly. Otherwise git is asked, which
    covers linked worktrees and submodules where ``.git`` is a file.
    """
    repo = Path(path)
    try:
        if not repo.is_dir():
            return False
        if (repo / ".git").is_dir():
            return True
    except OSError as exc:
        logger.debug("stat failed for %s: %s", repo, exc)
        return False

    try:
        result = _run_git(repo, "rev-parse", "--is-inside-work-tree")
    except _GIT_FAILURES as exc:
        logger.debug("git rev-parse failed for %s: %s", repo, exc)
        return False
    return result.stdout.strip() == "true"


def get_repository_name(path: str | Path) -> str:
    """Derive a display name from ``remote.origin.url``, else the directory name."""
    repo = Path(path)
    try:
        result = _run_git(repo, "config", "--get", "remote.origin.url")
    except _GIT_FAILURES as exc:
        logger.debug("git config remote.origin.url failed for %s: %s", repo, exc)
    else:
        name = parse_remote_name(result.stdout.strip())
        if name:
            return name
    return repo.name


def parse_remote_name(url: str) -> str | None:
    """Extract the repository name from a remote URL.

    Examples:
        >>> parse_remote_name("https://github.com/acme/widgets.git")
        'widgets'
        >>> parse_remote_name("git@github.com:acme/widgets")
        'widgets'
        >>> parse_remote_name("") is None
        True
    """
    if not url:
        return None
    match = _REMOTE_NAME_RE.search(url)
    return match.group(1) if match else None
