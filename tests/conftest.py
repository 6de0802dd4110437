"""Shared pytest fixtures for the projgen test suite.

Provides reusable fixtures for:
- The bundled template root
- Throwaway template roots built from a ``{relative path: content}`` mapping
- Isolation from the user's settings and template directory
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from projgen import settings as settings_module
from projgen.settings import BUNDLED_TEMPLATES_DIR, get_settings


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Ignore GEN_* variables and ~/.config/gen for every test."""
    monkeypatch.delenv("GEN_TEMPLATES_DIR", raising=False)
    monkeypatch.setattr(settings_module, "USER_TEMPLATES_DIR", tmp_path / "no-user-templates")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

TreeFactory = Callable[[Path, dict[str, str | bytes]], Path]


def _write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create *files* below *root*; keys ending in ``/`` become empty dirs."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        path = root / rel
        if rel.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree() -> TreeFactory:
    """Factory that writes a file tree and returns its root."""
    return _write_tree


@pytest.fixture
def bundled_templates() -> Path:
    """The template root shipped inside the package."""
    return BUNDLED_TEMPLATES_DIR


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A small template root with every language and kind populated."""
    root = tmp_path / "templates"
    files: dict[str, str | bytes] = {}
    for language in ("c", "cpp", "rust", "java"):
        for kind in ("bin", "lib"):
            files[f"{language}/{kind}/Makefile"] = "NAME={{ name }}\n"
            files[f"{language}/{kind}/src/{{{{ name }}}}.txt"] = (
                f"{language}/{kind} project {{{{ name }}}}\n"
            )
    files["java/bin/manifest.txt"] = "Main-Class: {{ domain }}.{{ name }}.Main\n"
    return _write_tree(root, files)


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory that generated projects are written into."""
    out = tmp_path / "out"
    out.mkdir()
    return out
