"""
readmegen Template Renderer

This module reads README templates, renders ProjectInfo into them with
Jinja2 and writes the result to README.md.

Unlike the resolvers, read and write failures here are raised to the
caller: a missing template or an unwritable directory is a usage problem,
not an expected absence.

Template Context:
    Every ProjectInfo field is available by name (``name``, ``version``,
    ``description``, ``author``, ``repository_url``, ``contributing_url``,
    ``github_username``, ``engines``), plus ``author_name`` and ``options``.
    Unknown names render as empty strings.

Filters:
    shields - escape text for a shields.io static badge path
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union
from urllib.parse import quote

from jinja2 import Environment

from readmegen.schema import ProjectInfo

TEMPLATE_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "default.md"
DEFAULT_NO_HTML_TEMPLATE = "default-no-html.md"

README_FILENAME = "README.md"


@dataclass
class RenderOptions:
    """
    Configuration options for README rendering.

    Attributes:
        use_html: Pick the built-in template with HTML badges
        include_generation_notice: Let templates add a "generated by" footer
    """
    use_html: bool = True
    include_generation_notice: bool = True


def shields_escape(text: Any) -> str:
    """
    Escape text for use in a shields.io badge path.

    Dashes and underscores are doubled, spaces become underscores and the
    result is URL-quoted.

    Example:
        >>> shields_escape(">=10 - LTS")
        '%3E%3D10_--_LTS'
    """
    escaped = (
        str(text)
        .replace("-", "--")
        .replace("_", "__")
        .replace(" ", "_")
    )
    return quote(escaped, safe="")


def _create_environment() -> Environment:
    env = Environment(keep_trailing_newline=True, autoescape=False)
    env.filters["shields"] = shields_escape
    return env


def get_default_template_path(use_html: bool = True) -> Path:
    """Return the path of the built-in template."""
    name = DEFAULT_TEMPLATE if use_html else DEFAULT_NO_HTML_TEMPLATE
    return TEMPLATE_DIR / name


def get_template(template_path: Union[str, Path]) -> str:
    """
    Get template content from the given path.

    Args:
        template_path: Path to a UTF-8 template file

    Returns:
        The template text

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(template_path, "r", encoding="utf-8") as f:
        return f.read()


def render_readme(
    template: str,
    info: ProjectInfo,
    options: Optional[RenderOptions] = None,
) -> str:
    """
    Render project information into template text.

    Args:
        template: Jinja2 template source
        info: The project information to substitute
        options: Optional rendering options

    Returns:
        The rendered README content

    Raises:
        jinja2.TemplateError: If the template is malformed
    """
    context = info.to_dict()
    context["author_name"] = info.author_name
    context["options"] = options or RenderOptions()
    return _create_environment().from_string(template).render(context)


def create_readme(readme_content: str, cwd: Optional[Path] = None) -> Path:
    """
    Write README.md in the given directory, replacing any existing file.

    Args:
        readme_content: Content to write verbatim
        cwd: Output directory (default: current directory)

    Returns:
        The path of the written file

    Raises:
        OSError: If the file cannot be written
    """
    output_path = Path(cwd or Path.cwd()) / README_FILENAME
    # newline="" keeps line endings exactly as given
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(readme_content)
    return output_path
