"""
readmegen Command-Line Interface

This module provides the CLI entry point for readmegen. It orchestrates the
full pipeline: project info -> questions -> template -> rendering -> output.

Usage:
    readmegen
    readmegen --yes
    readmegen --path templates/custom.md
    readmegen --no-html --dry-run
"""

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional

from jinja2 import TemplateError

from readmegen import __version__
from readmegen.project import get_project_infos
from readmegen.renderer import (
    RenderOptions,
    create_readme,
    get_default_template_path,
    get_template,
    render_readme,
)
from readmegen.schema import ProjectInfo

TEMPLATE_ENV_VAR = "READMEGEN_TEMPLATE"

# (field, question) pairs asked in interactive mode
QUESTIONS = [
    ("name", "Project name"),
    ("version", "Project version"),
    ("description", "Project description"),
    ("author", "Author name"),
    ("repository_url", "Project homepage"),
    ("contributing_url", "Issues page"),
    ("github_username", "GitHub username"),
]


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="readmegen",
        description=(
            "readmegen: generate a README.md for the project in the current "
            "directory from package.json and git metadata."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  readmegen                     # Answer questions, write README.md\n"
            "  readmegen -y                  # Use detected values without asking\n"
            "  readmegen -p my-template.md   # Render a custom Jinja2 template\n"
            "  readmegen --dry-run           # Print instead of writing\n"
            "\n"
            f"The {TEMPLATE_ENV_VAR} environment variable sets a default template path.\n"
        ),
    )

    parser.add_argument(
        "-p", "--path",
        type=str,
        default=None,
        help="Path to a custom README template",
    )

    parser.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Use detected values without asking questions",
    )

    parser.add_argument(
        "--no-html",
        action="store_true",
        help="Use the built-in template without HTML tags",
    )

    parser.add_argument(
        "--no-notice",
        action="store_true",
        help="Omit the generation notice at the end",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated README to stdout instead of writing to file",
    )

    # Verbosity
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed progress information",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def log(message: str, quiet: bool = False) -> None:
    """Print a progress message to stderr unless quiet."""
    if not quiet:
        print(f"[readmegen] {message}", file=sys.stderr)


def log_verbose(message: str, verbose: bool, quiet: bool) -> None:
    """Print a message only in verbose mode."""
    if verbose and not quiet:
        print(f"  {message}", file=sys.stderr)


def resolve_template_path(path: Optional[str], use_html: bool) -> Path:
    """
    Pick the template to render.

    An explicit path wins, then the READMEGEN_TEMPLATE environment variable,
    then the built-in template.
    """
    chosen = path or os.environ.get(TEMPLATE_ENV_VAR)
    if chosen:
        return Path(chosen)
    return get_default_template_path(use_html)


def ask_questions(
    info: ProjectInfo,
    input_fn: Optional[Callable[[str], str]] = None,
) -> ProjectInfo:
    """
    Ask the user to confirm or override each detected value.

    An empty answer keeps the detected value.

    Args:
        info: Detected project information, used as defaults
        input_fn: Function reading one answer (default: input)

    Returns:
        A new ProjectInfo with the answers applied
    """
    input_fn = input_fn or input
    answers = {}
    for field_name, question in QUESTIONS:
        if field_name == "author":
            default = info.author_name
        else:
            default = getattr(info, field_name)

        prompt = f"{question} ({default}): " if default else f"{question}: "
        answer = input_fn(prompt).strip()
        if answer and answer != default:
            answers[field_name] = answer

    return dataclasses.replace(info, **answers)


def run_pipeline(
    cwd: Path,
    template_path: Path,
    options: RenderOptions,
    interactive: bool = True,
    dry_run: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> int:
    """
    Run the full readmegen pipeline.

    Args:
        cwd: Project directory
        template_path: Template to render
        options: Rendering options
        interactive: If True, ask questions before rendering
        dry_run: If True, print to stdout instead of writing
        verbose: If True, show detailed progress
        quiet: If True, suppress non-error output

    Returns:
        Exit code (0 = success, non-zero = error)
    """
    # Step 1: Project information
    log("Collecting project information...", quiet=quiet)
    info = get_project_infos(cwd)

    for field_name, value in info.to_dict().items():
        if value is not None:
            log_verbose(f"{field_name}: {value}", verbose, quiet)

    missing = info.missing_fields()
    if missing:
        log(f"Not found: {', '.join(missing)}", quiet=quiet)

    # Step 2: Questions
    if interactive:
        try:
            info = ask_questions(info)
        except (KeyboardInterrupt, EOFError):
            print("\nAborted.", file=sys.stderr)
            return 130

    # Step 3: Template
    log_verbose(f"Template: {template_path}", verbose, quiet)
    try:
        template = get_template(template_path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading template {template_path}: {e}", file=sys.stderr)
        return 1

    # Step 4: Render
    log("Rendering README...", quiet=quiet)
    try:
        readme_content = render_readme(template, info, options)
    except TemplateError as e:
        print(f"Error during rendering: {e}", file=sys.stderr)
        return 1

    # Step 5: Output
    if dry_run:
        print(readme_content)
        log("(Dry run - no file written)", quiet=quiet)
        return 0

    try:
        output_path = create_readme(readme_content, cwd)
    except OSError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        return 1

    log(f"README written to: {output_path}", quiet=quiet)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 = success, non-zero = error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="  %(name)s: %(message)s",
        )

    render_options = RenderOptions(
        use_html=not args.no_html,
        include_generation_notice=not args.no_notice,
    )

    return run_pipeline(
        cwd=Path.cwd(),
        template_path=resolve_template_path(args.path, render_options.use_html),
        options=render_options,
        interactive=not args.yes,
        dry_run=args.dry_run,
        verbose=args.verbose,
        quiet=args.quiet,
    )


if __name__ == "__main__":
    sys.exit(main())
