from .engine import materialize, render_content
from .locator import TemplateLocator
from .substitution import substitute, substitute_path
from .walker import walk_template

__all__ = [
    "TemplateLocator",
    "materialize",
    "render_content",
    "substitute",
    "substitute_path",
    "walk_template",
]
