"""
package.json reading and project name detection.

Every failure here is an expected absence: a project without a manifest,
or with a broken one, simply yields None.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"


def get_package_json(cwd: Optional[Path] = None) -> Optional[dict[str, Any]]:
    """
    Load and parse package.json from the working directory.

    Args:
        cwd: Directory holding package.json (default: current directory)

    Returns:
        The parsed JSON object, or None if the file is missing, unreadable,
        not valid JSON, or not a JSON object
    """
    path = Path(cwd or Path.cwd()) / PACKAGE_JSON
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("No %s in %s", PACKAGE_JSON, path.parent)
        return None
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("Could not load %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.debug("Ignoring %s: top-level value is not an object", path)
        return None
    return data


def get_value(data: Optional[dict[str, Any]], dotted_path: str) -> Any:
    """
    Look up a dotted key path such as ``repository.url``.

    Missing keys and non-object intermediates yield None.
    """
    current: Any = data
    for key in dotted_path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def get_project_name(cwd: Optional[Path] = None) -> Optional[str]:
    """
    Detect the project name.

    Uses the ``name`` field of package.json when it is a non-empty string,
    otherwise the name of the working directory.

    Args:
        cwd: Project directory (default: current directory)

    Returns:
        The project name, or None if neither source gives one
    """
    root = Path(cwd or Path.cwd()).resolve()
    name = get_value(get_package_json(root), "name")
    if isinstance(name, str) and name:
        return name
    return root.name or None
