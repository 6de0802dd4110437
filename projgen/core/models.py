"""Domain models for template selection, substitution context and output."""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import UnsupportedLanguage, UnsupportedProjectKind


class Language(str, Enum):
    """Supported languages; values are the template directory names."""

    C = "c"
    CPP = "cpp"
    RUST = "rust"
    JAVA = "java"


class ProjectKind(str, Enum):
    """Project kinds; values are the template subdirectory names."""

    BINARY = "bin"
    LIBRARY = "lib"


_LANGUAGE_ALIASES: dict[str, Language] = {
    "c": Language.C,
    "cpp": Language.CPP,
    "c++": Language.CPP,
    "cc": Language.CPP,
    "rust": Language.RUST,
    "rs": Language.RUST,
    "java": Language.JAVA,
}

_KIND_ALIASES: dict[str, ProjectKind] = {
    "bin": ProjectKind.BINARY,
    "binary": ProjectKind.BINARY,
    "exe": ProjectKind.BINARY,
    "executable": ProjectKind.BINARY,
    "lib": ProjectKind.LIBRARY,
    "library": ProjectKind.LIBRARY,
}


def parse_language(token: str) -> Language:
    """Map a language token to a :class:`Language` (case-sensitive).

    Raises:
        UnsupportedLanguage: If the token is not a known language or alias
    """
    try:
        return _LANGUAGE_ALIASES[token]
    except KeyError:
        raise UnsupportedLanguage(token) from None


def parse_kind(token: str | None) -> ProjectKind:
    """Map a kind token to a :class:`ProjectKind`, defaulting to binary.

    Raises:
        UnsupportedProjectKind: If the token is not a known kind or alias
    """
    if token is None:
        return ProjectKind.BINARY
    try:
        return _KIND_ALIASES[token]
    except KeyError:
        raise UnsupportedProjectKind(token) from None


class TemplateSpec(BaseModel):
    """Identifies which template tree to copy."""

    model_config = ConfigDict(frozen=True)

    language: Language = Field(..., description="Target language")
    kind: ProjectKind = Field(default=ProjectKind.BINARY, description="Project kind")

    @classmethod
    def parse(cls, language: str, kind: str | None = None) -> TemplateSpec:
        return cls(language=parse_language(language), kind=parse_kind(kind))


class SubstitutionContext(BaseModel):
    """Placeholder bindings for a single generation run."""

    model_config = ConfigDict(frozen=True)

    values: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True, description="Placeholder values"
    )

    @field_validator("values", mode="after")
    @classmethod
    def freeze_values(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def get(self, key: str) -> str | None:
        return self.values.get(key)


class EntryKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


class TemplateEntry(BaseModel):
    """A single entry of a template tree, relative to the template root."""

    model_config = ConfigDict(frozen=True)

    relative_path: PurePosixPath = Field(..., description="Path relative to the template root")
    kind: EntryKind = Field(..., description="Directory or file")

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


class GenerationResult(BaseModel):
    """What a successful generation run created on disk."""

    destination: Path = Field(..., description="Project root directory")
    directories: list[Path] = Field(default_factory=list, description="Created directories")
    files: list[Path] = Field(default_factory=list, description="Created files")
