"""Tests for template directory resolution (projgen.rendering.locator)."""

from __future__ import annotations

from pathlib import Path

import pytest

from projgen.core.errors import TemplateNotFound
from projgen.core.models import Language, ProjectKind, TemplateSpec
from projgen.rendering.locator import TemplateLocator

pytestmark = pytest.mark.unit

ALL_PAIRS = [(language, kind) for language in Language for kind in ProjectKind]


class TestResolve:
    @pytest.mark.parametrize("language, kind", ALL_PAIRS)
    def test_bundled_templates_resolve(self, bundled_templates: Path, language, kind):
        locator = TemplateLocator(bundled_templates)
        path = locator.resolve(TemplateSpec(language=language, kind=kind))
        assert path.is_dir()
        assert path.parts[-2:] == (language.value, kind.value)

    @pytest.mark.parametrize(
        "language, kind, expected",
        [
            ("c++", None, ("cpp", "bin")),
            ("rs", "library", ("rust", "lib")),
            ("java", "executable", ("java", "bin")),
        ],
    )
    def test_aliases_resolve_to_normalized_dirs(
        self, templates_root: Path, language, kind, expected
    ):
        path = TemplateLocator(templates_root).resolve(TemplateSpec.parse(language, kind))
        assert path == templates_root.joinpath(*expected)

    def test_missing_template_dir(self, tmp_path: Path):
        locator = TemplateLocator(tmp_path / "nowhere")
        with pytest.raises(TemplateNotFound) as exc_info:
            locator.resolve(TemplateSpec.parse("c"))
        assert exc_info.value.path == tmp_path / "nowhere" / "c" / "bin"

    def test_file_in_place_of_dir(self, make_tree, tmp_path: Path):
        root = make_tree(tmp_path / "t", {"rust/lib": "not a directory"})
        with pytest.raises(TemplateNotFound):
            TemplateLocator(root).resolve(TemplateSpec.parse("rust", "lib"))

    def test_path_for_does_not_touch_disk(self, tmp_path: Path):
        locator = TemplateLocator(tmp_path / "missing")
        spec = TemplateSpec.parse("java", "lib")
        assert locator.path_for(spec) == tmp_path / "missing" / "java" / "lib"


class TestDefaultDomain:
    def test_reads_and_strips_domain_file(self, make_tree, tmp_path: Path):
        root = make_tree(tmp_path / "t", {"java/domain": "  com.example\n"})
        assert TemplateLocator(root).default_domain(Language.JAVA) == "com.example"

    def test_missing_domain_file(self, templates_root: Path):
        assert TemplateLocator(templates_root).default_domain(Language.JAVA) is None

    def test_blank_domain_file(self, make_tree, tmp_path: Path):
        root = make_tree(tmp_path / "t", {"java/domain": "\n"})
        assert TemplateLocator(root).default_domain(Language.JAVA) is None
