"""Project materialization engine."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from ..core.errors import DestinationExists, FilesystemError
from ..core.models import GenerationResult, SubstitutionContext, TemplateEntry
from .io import atomic_write_bytes, read_template, remove_tree
from .substitution import find_tokens, substitute, substitute_path
from .walker import walk_template

logger = logging.getLogger(__name__)


def render_content(data: bytes, context: SubstitutionContext) -> bytes:
    """Substitute placeholders in file content.

    Content that is not valid UTF-8 is returned unchanged.

    Args:
        data: Raw template file content
        context: Placeholder bindings

    Returns:
        Rendered content
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return data
    return substitute(text, context).encode("utf-8")


def _target_path(
    entry: TemplateEntry, context: SubstitutionContext, destination: Path
) -> tuple[PurePosixPath, Path]:
    rel = substitute_path(entry.relative_path, context)
    # Each template segment must render to exactly one output segment.
    if (
        rel.is_absolute()
        or ".." in rel.parts
        or len(rel.parts) != len(entry.relative_path.parts)
    ):
        raise FilesystemError(
            f"Template entry {entry.relative_path} renders to invalid path {str(rel)!r}",
            destination / rel,
        )
    return rel, destination / rel


def _create_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True)
    except FileExistsError as exc:
        raise FilesystemError(f"Path collision: {path} already exists", path) from exc
    except OSError as exc:
        raise FilesystemError(f"Error creating directory {path}: {exc}", path) from exc


def _copy_file(source: Path, target: Path, context: SubstitutionContext) -> None:
    if target.exists():
        raise FilesystemError(f"Path collision: {target} already exists", target)

    try:
        data, mode = read_template(source)
    except OSError as exc:
        raise FilesystemError(f"Error reading template file {source}: {exc}", source) from exc

    rendered = render_content(data, context)
    unresolved = sorted(find_tokens(rendered.decode("utf-8", errors="ignore")))
    if unresolved:
        logger.debug(f"Leaving unknown placeholders {unresolved} in {target}")

    try:
        atomic_write_bytes(target, rendered, mode=mode)
    except OSError as exc:
        raise FilesystemError(f"Error writing file {target}: {exc}", target) from exc


def materialize(
    template_dir: Path, destination: Path, context: SubstitutionContext
) -> GenerationResult:
    """Copy a template tree into a new project directory.

    Every directory and file under *template_dir* is recreated below
    *destination* at the same relative path, with ``{{ identifier }}``
    placeholders substituted in names and file contents. File permission
    bits are preserved.

    If anything fails after *destination* has been created (including an
    interrupt), the destination is removed before the error propagates.

    Args:
        template_dir: Template directory to copy
        destination: Project directory to create; must not exist
        context: Placeholder bindings

    Returns:
        Description of everything created

    Raises:
        DestinationExists: If *destination* already exists
        FilesystemError: If reading or writing any entry fails
    """
    template_dir = Path(template_dir)
    destination = Path(destination)

    if destination.exists():
        raise DestinationExists(destination)

    try:
        destination.mkdir()
    except FileExistsError as exc:
        raise DestinationExists(destination) from exc
    except OSError as exc:
        raise FilesystemError(f"Error creating directory {destination}: {exc}", destination) from exc
    logger.info(f"Created dir  {destination}")

    result = GenerationResult(destination=destination)
    try:
        _copy_tree(template_dir, destination, context, result)
    except BaseException:
        _rollback(destination)
        raise

    logger.info(
        f"Generated {destination} ({len(result.directories)} dir(s), {len(result.files)} file(s))"
    )
    return result


def _copy_tree(
    template_dir: Path,
    destination: Path,
    context: SubstitutionContext,
    result: GenerationResult,
) -> None:
    seen: dict[PurePosixPath, PurePosixPath] = {}

    try:
        entries = walk_template(template_dir)
        for entry in entries:
            rel, target = _target_path(entry, context, destination)
            if rel in seen:
                raise FilesystemError(
                    f"Path collision: {entry.relative_path} and {seen[rel]} both render to {rel}",
                    target,
                )
            seen[rel] = entry.relative_path

            if entry.is_dir:
                _create_directory(target)
                result.directories.append(target)
                logger.info(f"Created dir  {target}")
            else:
                _copy_file(template_dir / entry.relative_path, target, context)
                result.files.append(target)
                logger.info(f"Created file {target}")
    except OSError as exc:
        raise FilesystemError(f"Error reading template tree {template_dir}: {exc}", template_dir) from exc


def _rollback(destination: Path) -> None:
    logger.warning(f"Generation failed; removing {destination}")
    try:
        remove_tree(destination)
    except OSError as exc:
        logger.error(f"Could not remove partially generated {destination}: {exc}")
