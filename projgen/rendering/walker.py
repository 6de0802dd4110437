"""Template tree traversal.

Traversal is kept apart from any reads or writes: :func:`walk_template` only
needs ``iterdir()``, ``is_dir()`` and ``name`` from the nodes it visits, so it
accepts ``pathlib.Path`` objects as well as in-memory trees.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterator, Protocol

from ..core.models import EntryKind, TemplateEntry


class TreeNode(Protocol):
    @property
    def name(self) -> str: ...

    def is_dir(self) -> bool: ...

    def iterdir(self) -> Iterator[TreeNode]: ...


def walk_template(root: TreeNode) -> Iterator[TemplateEntry]:
    """Yield every entry under *root* in pre-order.

    Each directory is yielded before anything beneath it, and siblings are
    visited in name order so output is deterministic. The root itself is
    not yielded.
    """
    yield from _walk(root, PurePosixPath())


def _walk(node: TreeNode, prefix: PurePosixPath) -> Iterator[TemplateEntry]:
    for child in sorted(node.iterdir(), key=lambda n: n.name):
        rel = prefix / child.name
        if child.is_dir():
            yield TemplateEntry(relative_path=rel, kind=EntryKind.DIRECTORY)
            yield from _walk(child, rel)
        else:
            yield TemplateEntry(relative_path=rel, kind=EntryKind.FILE)
