"""
Flask-based Web API for readmegen.

Serves README previews for the project in the server's working directory.
Nothing is written to disk.

Endpoints:
    GET  /api/health       - Health check endpoint
    GET  /api/project-info - Detected project information
    POST /api/render       - Render a README preview
"""

import dataclasses
from pathlib import Path
from typing import Any

from flask import Flask, Response, jsonify, request
from jinja2 import TemplateError

from readmegen import __version__
from readmegen.project import get_project_infos
from readmegen.renderer import (
    RenderOptions,
    get_default_template_path,
    get_template,
    render_readme,
)
from readmegen.schema import ProjectInfo

app = Flask(__name__)

OVERRIDABLE_FIELDS = {f.name for f in dataclasses.fields(ProjectInfo)}


def apply_overrides(info: ProjectInfo, overrides: dict[str, Any]) -> ProjectInfo:
    """
    Replace fields of a ProjectInfo with user-supplied values.

    Raises:
        ValueError: If an override names an unknown field
    """
    unknown = set(overrides) - OVERRIDABLE_FIELDS
    if unknown:
        raise ValueError(f"Unknown fields: {', '.join(sorted(unknown))}")
    return dataclasses.replace(info, **overrides)


@app.route("/api/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({"status": "healthy", "version": __version__})


@app.route("/api/project-info", methods=["GET"])
def project_info() -> Response:
    """Return the project information detected in the working directory."""
    return jsonify(get_project_infos(Path.cwd()).to_dict())


@app.route("/api/render", methods=["POST"])
def render() -> tuple[Response, int]:
    """
    Render a README preview.

    JSON body (all optional):
        - template: Jinja2 template source (default: built-in template)
        - no_html: bool, use the built-in template without HTML (default: false)
        - include_generation_notice: bool (default: true)
        - overrides: object mapping ProjectInfo fields to values

    Returns:
        JSON response with:
            - readme: The rendered README content
            - project: The project information used for rendering
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    no_html = data.get("no_html", False)
    include_generation_notice = data.get("include_generation_notice", True)
    if not isinstance(no_html, bool) or not isinstance(include_generation_notice, bool):
        return jsonify({"error": "'no_html' and 'include_generation_notice' must be booleans"}), 400

    options = RenderOptions(
        use_html=not no_html,
        include_generation_notice=include_generation_notice,
    )

    overrides = data.get("overrides") or {}
    if not isinstance(overrides, dict):
        return jsonify({"error": "'overrides' must be an object"}), 400

    template = data.get("template")
    if template is not None and not isinstance(template, str):
        return jsonify({"error": "'template' must be a string"}), 400

    try:
        info = apply_overrides(get_project_infos(Path.cwd()), overrides)
        if template is None:
            template = get_template(get_default_template_path(options.use_html))
        readme_content = render_readme(template, info, options)
    except (ValueError, TemplateError) as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({
        "success": True,
        "readme": readme_content,
        "project": info.to_dict(),
    }), 200


@app.errorhandler(500)
def internal_server_error(error):
    """Handle internal server errors."""
    return jsonify({"error": "Internal server error"}), 500


def create_app() -> Flask:
    """
    Application factory for creating the Flask app.

    Returns:
        Configured Flask application instance.
    """
    return app


def main() -> None:
    """Run the development server."""
    print("Starting readmegen API server...")
    print()
    print("API Endpoints:")
    print("  GET  /api/health       - Health check")
    print("  GET  /api/project-info - Detected project information")
    print("  POST /api/render       - Render a README preview")
    print()
    app.run(host="127.0.0.1", port=5001, debug=True)


if __name__ == "__main__":
    main()
