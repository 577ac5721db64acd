"""Markdown file discovery."""

from __future__ import annotations

import glob
import os
from pathlib import Path
from typing import Iterable, List, Set


def _expand(pattern: str) -> Set[str]:
    return {os.path.abspath(p) for p in glob.glob(pattern, recursive=True)}


def discover_markdown_files(root: Path, exclusions: Iterable[str] = ()) -> List[str]:
    """Return absolute paths of every ``*.md`` file under *root*.

    Files matched by any of the *exclusions* glob patterns are left out.
    Hidden files and directories are skipped, as with any default glob.
    The result is sorted so runs over the same tree are comparable.
    """
    root = os.path.abspath(root)
    pattern = os.path.join(glob.escape(root), "**", "*.md")
    found = {p for p in _expand(pattern) if os.path.isfile(p)}
    excluded: Set[str] = set()
    for pattern in exclusions:
        excluded |= _expand(pattern)
    return sorted(found - excluded)
