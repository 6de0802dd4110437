from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import Language, ProjectKind

logger = logging.getLogger(__name__)

BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "templates"
USER_TEMPLATES_DIR = Path.home() / ".config" / "gen" / "templates"


def has_template_layout(root: Path) -> bool:
    """True when *root* holds at least one ``<language>/<kind>`` directory."""
    return any(
        (root / language.value / kind.value).is_dir()
        for language in Language
        for kind in ProjectKind
    )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GEN_", case_sensitive=False)

    templates_dir: Path | None = None

    @field_validator("templates_dir", mode="after")
    @classmethod
    def expand_templates_dir(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    def resolve_templates_root(self, override: Path | None = None) -> Path:
        """Pick the templates root: explicit override, environment, user dir, bundled."""
        if override is not None:
            return override
        if self.templates_dir is not None:
            return self.templates_dir
        if USER_TEMPLATES_DIR.is_dir():
            if has_template_layout(USER_TEMPLATES_DIR):
                return USER_TEMPLATES_DIR
            logger.debug(
                f"Ignoring {USER_TEMPLATES_DIR}: no <language>/<kind> template directories"
            )
        return BUNDLED_TEMPLATES_DIR


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
