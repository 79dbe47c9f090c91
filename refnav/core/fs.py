"""Filesystem primitives: markdown listing and atomic file replacement."""
from __future__ import annotations

import contextlib
import os
import tempfile
from pathlib import Path
from typing import List

from .errors import ResolutionError, WriteError


def list_markdown_files(directory: Path) -> List[str]:
    """Return names of regular ``*.md`` files directly in ``directory``, sorted."""
    try:
        with os.scandir(directory) as it:
            names = [e.name for e in it if e.is_file() and e.name.endswith(".md")]
    except FileNotFoundError as e:
        raise ResolutionError(f"Reference docs directory {directory} does not exist") from e
    return sorted(names)


def safe_write_file(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` atomically.

    Content goes to a temp file in the target's directory first, then
    ``os.replace`` swaps it in. The temp file never outlives a failure.
    """
    path = Path(path)
    try:
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as e:
        raise WriteError(f"Failed to write {path}: {e}") from e
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        if path.exists():
            os.chmod(tmp_path, path.stat().st_mode & 0o777)
        os.replace(tmp_path, path)
    except Exception as e:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise WriteError(f"Failed to write {path}: {e}") from e


__all__ = ["list_markdown_files", "safe_write_file"]
