"""
Repository URL resolution.

Resolves the repository and issue tracker URLs of the current project from
package.json first and from the git remote second, and extracts the GitHub
owner from the result.

URL cleanup is purely textual: ``git+https://github.com/a/b.git`` becomes
``https://github.com/a/b``. SSH remotes (``git@github.com:a/b.git``) are not
rewritten and are therefore not recognized as GitHub repositories.
"""

import logging
import subprocess
from pathlib import Path
from typing import Any, Optional

from readmegen.manifest import get_value

logger = logging.getLogger(__name__)

GITHUB_URL = "https://github.com/"

# Seconds to wait for `git config`
GIT_TIMEOUT = 5

# Marks a repository URL that has not been looked up yet
_UNRESOLVED = object()


def clean_repos_url(repos_url: str) -> str:
    """
    Clean a repository URL by removing newlines, 'git+' and '.git'.

    Only the first occurrence of 'git+' and of '.git' is removed.

    Args:
        repos_url: Raw URL from package.json or git

    Returns:
        The cleaned URL
    """
    return (
        repos_url
        .replace("\n", "")
        .replace("git+", "", 1)
        .replace(".git", "", 1)
    )


def get_repos_url_from_package_json(
    package_json: Optional[dict[str, Any]],
) -> Optional[str]:
    """Return the cleaned ``repository.url`` of package.json, if any."""
    repos_url = get_value(package_json, "repository.url")
    if not isinstance(repos_url, str):
        return None
    return clean_repos_url(repos_url)


def get_repos_url_from_git(cwd: Optional[Path] = None) -> Optional[str]:
    """
    Get the cleaned remote origin URL from git.

    Args:
        cwd: Directory to run git in (default: current directory)

    Returns:
        Remote URL, or None if git is missing, the directory is not a
        repository, or no origin is configured
    """
    try:
        result = subprocess.run(
            ["git", "config", "--get", "remote.origin.url"],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as e:
        logger.debug("git remote lookup failed: %s", e)
        return None

    if result.returncode != 0:
        logger.debug("No git remote origin (exit code %d)", result.returncode)
        return None

    url = clean_repos_url(result.stdout.strip())
    return url or None


def get_repos_url(
    package_json: Optional[dict[str, Any]] = None,
    cwd: Optional[Path] = None,
) -> Optional[str]:
    """
    Get the repository URL from package.json, falling back to git.

    Args:
        package_json: Parsed package.json, or None
        cwd: Directory to run git in

    Returns:
        The canonical repository URL, or None
    """
    return (
        get_repos_url_from_package_json(package_json)
        or get_repos_url_from_git(cwd)
    )


def get_repos_issues_url(
    package_json: Optional[dict[str, Any]] = None,
    cwd: Optional[Path] = None,
    repos_url: Any = _UNRESOLVED,
) -> Optional[str]:
    """
    Get the issue tracker URL.

    ``bugs.url`` from package.json is returned as-is. Otherwise the
    repository URL (package.json first, then git) is suffixed with
    ``/issues``.

    Args:
        package_json: Parsed package.json, or None
        cwd: Directory to run git in
        repos_url: Repository URL already resolved by get_repos_url(), so
            git is not asked twice

    Returns:
        The issues URL, or None
    """
    issues_url = get_value(package_json, "bugs.url")
    if issues_url is not None:
        return issues_url

    if repos_url is _UNRESOLVED:
        repos_url = get_repos_url(package_json, cwd)
    if repos_url is None:
        return None
    return f"{repos_url}/issues"


def is_github_repository(repository_url: str) -> bool:
    """Check if the URL points to a repository on github.com."""
    return GITHUB_URL in repository_url


def get_github_username_from_repository_url(repository_url: str) -> str:
    """
    Get the GitHub username from a repository URL.

    The caller must check is_github_repository() first.

    Example:
        >>> get_github_username_from_repository_url("https://github.com/alice/project")
        'alice'
    """
    return repository_url.replace(GITHUB_URL, "", 1).split("/")[0]
