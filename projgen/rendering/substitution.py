"""Placeholder token substitution."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from ..core.models import SubstitutionContext

TOKEN_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def substitute(text: str, context: SubstitutionContext) -> str:
    """Replace ``{{ identifier }}`` tokens bound in *context*.

    Whitespace inside the braces is ignored. Tokens whose identifier is not
    in the context are left exactly as written.

    Args:
        text: Template text
        context: Placeholder bindings

    Returns:
        Text with every known token replaced
    """

    def _replace(match: re.Match[str]) -> str:
        value = context.get(match.group(1))
        return match.group(0) if value is None else value

    return TOKEN_PATTERN.sub(_replace, text)


def substitute_path(relative_path: PurePosixPath, context: SubstitutionContext) -> PurePosixPath:
    """Apply :func:`substitute` to each segment of a relative path."""
    return PurePosixPath(*(substitute(part, context) for part in relative_path.parts))


def find_tokens(text: str) -> set[str]:
    """Return the identifiers of every placeholder token in *text*."""
    return {match.group(1) for match in TOKEN_PATTERN.finditer(text)}
