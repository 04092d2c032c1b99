"""
readmegen Project Schema

This module defines the flat record that carries project information from
the resolvers to the renderer.

Design Principles:
    1. Every field is independently optional (None means "not found")
    2. Manifest values such as ``author`` and ``engines`` are passed through
       untouched, so templates see exactly what package.json declares
    3. Built once per invocation, never mutated afterwards
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Optional, Union


@dataclass(frozen=True)
class ProjectInfo:
    """
    Project information collected from package.json and git.

    Attributes:
        name: Project name (package.json name or directory name)
        description: package.json ``description``
        version: package.json ``version``
        author: package.json ``author``, either a string or an object
        repository_url: Canonical repository URL (no ``git+``, no ``.git``)
        contributing_url: Issue tracker URL
        github_username: Owner of the repository, for GitHub URLs only
        engines: package.json ``engines`` mapping

    Example:
        >>> info = ProjectInfo(name="app", author={"name": "Bob"})
        >>> info.author_name
        'Bob'
    """
    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    author: Union[str, dict[str, Any], None] = None
    repository_url: Optional[str] = None
    contributing_url: Optional[str] = None
    github_username: Optional[str] = None
    engines: Optional[dict[str, Any]] = None

    @property
    def author_name(self) -> Optional[str]:
        """Display name of the author, whichever form package.json used."""
        if isinstance(self.author, str):
            return self.author or None
        if isinstance(self.author, dict):
            name = self.author.get("name")
            return name if isinstance(name, str) and name else None
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary of all fields."""
        return asdict(self)

    def missing_fields(self) -> list[str]:
        """
        Returns names of fields that could not be resolved.

        Useful for telling the user what the README will be missing.
        """
        return [f.name for f in fields(self) if getattr(self, f.name) is None]
