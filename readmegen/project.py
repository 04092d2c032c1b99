"""
Project information aggregation.

Combines package.json fields and resolved URLs into a ProjectInfo record.
"""

import logging
from pathlib import Path
from typing import Optional

from readmegen.manifest import get_package_json, get_project_name, get_value
from readmegen.repository import (
    get_github_username_from_repository_url,
    get_repos_issues_url,
    get_repos_url,
    is_github_repository,
)
from readmegen.schema import ProjectInfo

logger = logging.getLogger(__name__)


def get_project_infos(cwd: Optional[Path] = None) -> ProjectInfo:
    """
    Get project information from git and package.json.

    Never raises for missing data: anything that cannot be resolved is None
    in the returned record.

    Args:
        cwd: Project directory (default: current directory)

    Returns:
        The collected ProjectInfo
    """
    root = Path(cwd or Path.cwd())
    package_json = get_package_json(root)

    repository_url = get_repos_url(package_json, root)
    github_username = None
    if repository_url is not None and is_github_repository(repository_url):
        github_username = get_github_username_from_repository_url(repository_url)

    info = ProjectInfo(
        name=get_project_name(root),
        description=get_value(package_json, "description"),
        version=get_value(package_json, "version"),
        author=get_value(package_json, "author"),
        repository_url=repository_url,
        contributing_url=get_repos_issues_url(package_json, root, repos_url=repository_url),
        github_username=github_username,
        engines=get_value(package_json, "engines"),
    )
    logger.debug("Collected project info: %s", info)
    return info
