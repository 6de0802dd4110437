"""Template directory resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import FilesystemError, TemplateNotFound
from ..core.models import Language, TemplateSpec

logger = logging.getLogger(__name__)

DOMAIN_FILE_NAME = "domain"


class TemplateLocator:
    """Maps a :class:`TemplateSpec` to ``<templates_root>/<language>/<kind>``.

    The templates root is fixed at construction; the locator never reads the
    environment or touches the filesystem beyond existence checks.
    """

    def __init__(self, templates_root: Path) -> None:
        self.templates_root = Path(templates_root)

    def path_for(self, spec: TemplateSpec) -> Path:
        """Return the template path for *spec* without checking that it exists."""
        return self.templates_root / spec.language.value / spec.kind.value

    def resolve(self, spec: TemplateSpec) -> Path:
        """Resolve the template directory for *spec*.

        Args:
            spec: Language and project kind to look up

        Returns:
            Path to the template directory

        Raises:
            TemplateNotFound: If the directory is missing
        """
        template_dir = self.path_for(spec)
        if not template_dir.is_dir():
            raise TemplateNotFound(template_dir)

        logger.debug(f"Resolved template {spec.language.value}/{spec.kind.value} → {template_dir}")
        return template_dir

    def default_domain(self, language: Language) -> str | None:
        """Read the default domain stored next to a language's templates.

        Returns:
            The stripped contents of ``<templates_root>/<language>/domain``,
            or ``None`` when the file is absent or empty
        """
        domain_file = self.templates_root / language.value / DOMAIN_FILE_NAME
        if not domain_file.is_file():
            return None
        try:
            domain = domain_file.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise FilesystemError(f"Could not read domain file {domain_file}: {exc}", domain_file) from exc
        return domain or None
