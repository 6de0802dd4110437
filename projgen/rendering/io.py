"""File I/O operations for project generation."""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from pathlib import Path


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def read_template(path: Path) -> tuple[bytes, int]:
    """Read a template file's raw content and permission bits.

    Args:
        path: Template file path

    Returns:
        Tuple of (content, permission bits)
    """
    data = path.read_bytes()
    mode = stat.S_IMODE(path.stat().st_mode)
    return data, mode


def atomic_write_bytes(path: Path, data: bytes, mode: int = 0o644) -> None:
    """Write bytes to a file atomically using a temporary file.

    The final file is created with permission bits *mode*.

    Args:
        path: Destination file path
        data: Content to write
        mode: File permissions (octal)
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as tmp:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


def remove_tree(path: Path) -> None:
    """Delete a directory tree created by a failed run."""
    shutil.rmtree(path)
