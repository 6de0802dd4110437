"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path

import typer


def parse_templates_dir(value: Path | None) -> Path | None:
    """Validate an explicit templates root."""
    if value is None:
        return None
    path = value.expanduser()
    if not path.is_dir():
        raise typer.BadParameter(f"Not a directory: {str(value)!r}")
    return path


def parse_domain(value: str | None) -> str | None:
    """Normalize a --domain value; blank means not given."""
    if value is None:
        return None
    domain = value.strip()
    if not domain:
        return None
    if (
        any(ch.isspace() for ch in domain)
        or "/" in domain
        or "\\" in domain
        or domain.startswith(".")
        or domain.endswith(".")
    ):
        raise typer.BadParameter(f"Invalid domain: {value!r}")
    return domain
