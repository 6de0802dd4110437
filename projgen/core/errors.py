"""Error taxonomy for project generation."""

from __future__ import annotations

from pathlib import Path


class ProjectGenError(Exception):
    """Base class for every failure surfaced by projgen."""


class UnsupportedLanguage(ProjectGenError, ValueError):
    """Raised when the language token is not one of the known languages."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unsupported language: {token!r}")
        self.token = token


class UnsupportedProjectKind(ProjectGenError, ValueError):
    """Raised when the project kind token is not recognized."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unsupported project kind: {token!r}")
        self.token = token


class TemplateNotFound(ProjectGenError):
    """Raised when the resolved template directory does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Template directory {path} does not exist")
        self.path = path


class DestinationExists(ProjectGenError):
    """Raised instead of overwriting an existing project directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Directory {path} already exists! Refusing to overwrite")
        self.path = path


class MissingRequiredValue(ProjectGenError):
    """Raised when a placeholder value required by the template is absent."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Missing required value {key!r}: {reason}")
        self.key = key


class InvalidProjectName(ProjectGenError, ValueError):
    """Raised when the project name cannot be used as a directory name."""


class FilesystemError(ProjectGenError):
    """Raised when reading or writing the project tree fails.

    The underlying ``OSError`` (if any) is chained as ``__cause__``.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
