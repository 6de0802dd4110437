"""Project generation: context building and the end-to-end run."""

from __future__ import annotations

import logging
from pathlib import Path

from .core.errors import InvalidProjectName, MissingRequiredValue
from .core.models import GenerationResult, Language, SubstitutionContext, TemplateSpec
from .rendering.engine import materialize
from .rendering.locator import TemplateLocator

logger = logging.getLogger(__name__)

# Languages whose templates cannot be rendered without a domain.
DOMAIN_REQUIRED = frozenset({Language.JAVA})


def validate_project_name(name: str) -> str:
    """Check that *name* can be used as a single directory name.

    Raises:
        InvalidProjectName: If the name is empty, a relative path marker, or
            contains a path separator
    """
    if not name or not name.strip():
        raise InvalidProjectName("Project name must not be empty")
    if name in {".", ".."} or "/" in name or "\\" in name:
        raise InvalidProjectName(f"Project name must be a single directory name, got {name!r}")
    return name


def build_context(
    spec: TemplateSpec,
    name: str,
    domain: str | None = None,
    locator: TemplateLocator | None = None,
) -> SubstitutionContext:
    """Build the placeholder bindings for a run.

    Args:
        spec: Template being generated
        name: Project name, bound to ``name``
        domain: Package domain, bound to ``domain`` when given
        locator: Used to look up a default domain when none is given

    Returns:
        Substitution context for the run

    Raises:
        MissingRequiredValue: If the language needs a domain and none is
            available
    """
    values = {"name": validate_project_name(name)}

    if not domain and locator is not None and spec.language in DOMAIN_REQUIRED:
        domain = locator.default_domain(spec.language)
        if domain:
            logger.info(f"No domain specified, using default domain {domain}")

    if domain:
        values["domain"] = domain
    elif spec.language in DOMAIN_REQUIRED:
        raise MissingRequiredValue(
            "domain", f"{spec.language.value} projects need --domain (e.g. com.example)"
        )

    return SubstitutionContext(values=values)


def generate_project(
    spec: TemplateSpec,
    name: str,
    templates_root: Path,
    *,
    domain: str | None = None,
    output_dir: Path | None = None,
) -> GenerationResult:
    """Generate a new project directory named *name*.

    Args:
        spec: Language and project kind
        name: Project name; also the destination directory name
        templates_root: Root of the template tree
        domain: Optional package domain
        output_dir: Parent of the project directory (default: cwd)

    Returns:
        Description of the generated project
    """
    locator = TemplateLocator(templates_root)
    template_dir = locator.resolve(spec)
    context = build_context(spec, name, domain=domain, locator=locator)

    parent = output_dir if output_dir is not None else Path.cwd()
    destination = parent / name

    logger.debug(f"Generating {spec.language.value}/{spec.kind.value} project at {destination}")
    return materialize(template_dir, destination, context)
