from .errors import (
    DestinationExists,
    FilesystemError,
    InvalidProjectName,
    MissingRequiredValue,
    ProjectGenError,
    TemplateNotFound,
    UnsupportedLanguage,
    UnsupportedProjectKind,
)
from .models import (
    EntryKind,
    GenerationResult,
    Language,
    ProjectKind,
    SubstitutionContext,
    TemplateEntry,
    TemplateSpec,
    parse_kind,
    parse_language,
)

__all__ = [
    "DestinationExists",
    "EntryKind",
    "FilesystemError",
    "GenerationResult",
    "InvalidProjectName",
    "Language",
    "MissingRequiredValue",
    "ProjectGenError",
    "ProjectKind",
    "SubstitutionContext",
    "TemplateEntry",
    "TemplateNotFound",
    "TemplateSpec",
    "UnsupportedLanguage",
    "UnsupportedProjectKind",
    "parse_kind",
    "parse_language",
]
