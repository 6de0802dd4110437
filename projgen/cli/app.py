"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.errors import ProjectGenError
from ..core.models import TemplateSpec
from ..generator import generate_project
from ..settings import get_settings
from .parsers import parse_domain, parse_templates_dir

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gen",
    help="Scaffold C, C++, Rust and Java projects from template directories.",
    add_completion=False,
)


@app.command()
def generate(
    language: Annotated[
        str,
        typer.Argument(help="Project language: c, cpp, rust or java.", metavar="LANGUAGE"),
    ],
    name: Annotated[
        str,
        typer.Argument(help="Project name; the directory created in the current directory.", metavar="NAME"),
    ],
    kind: Annotated[
        Optional[str],
        typer.Argument(help="Project kind: bin (default) or lib.", metavar="[KIND]"),
    ] = None,
    domain: Annotated[
        Optional[str],
        typer.Option(
            "--domain",
            help="Package domain for Java projects (e.g. com.example).",
            metavar="DOMAIN",
        ),
    ] = None,
    templates_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--templates-dir",
            help="Templates root (default: $GEN_TEMPLATES_DIR, ~/.config/gen/templates, or bundled).",
            metavar="DIR",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Generate a new project from a language template."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting gen")

    templates_root = get_settings().resolve_templates_root(parse_templates_dir(templates_dir))
    logger.debug(f"Templates root: {templates_root}")

    try:
        spec = TemplateSpec.parse(language, kind)
        result = generate_project(
            spec,
            name,
            templates_root,
            domain=parse_domain(domain),
        )
    except ProjectGenError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    logger.debug(f"Completed: {len(result.files)} file(s) written to {result.destination}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
