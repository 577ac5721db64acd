"""Turn git's ignore rules into glob patterns that skip markdown files."""

from __future__ import annotations

import glob
import os
import subprocess
from pathlib import Path
from typing import Callable, List, Set

from linkreport.errors import IgnoreLookupError

MARKDOWN_SUFFIX = ".md"

# ``git check-ignore`` exits 1 when none of the given paths are ignored.
_NOTHING_IGNORED = 1

ListIgnored = Callable[[Path], List[str]]


def _top_level_entries(root: Path) -> List[str]:
    """Return the names a shell would expand ``*`` to inside *root*."""
    return sorted(p.name for p in root.iterdir() if not p.name.startswith("."))


def list_ignored_paths(root: Path) -> List[str]:
    """Ask git which top-level entries of *root* are ignored.

    Issues a single ``git check-ignore`` over every top-level entry and
    returns git's output lines unfiltered.

    Raises:
        IgnoreLookupError: If git is missing or exits with an error
            (e.g. *root* is not inside a repository).
    """
    root = Path(root)
    entries = _top_level_entries(root)
    if not entries:
        return []

    try:
        proc = subprocess.run(
            ["git", "check-ignore", "--", *entries],
            cwd=root,
            text=True,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise IgnoreLookupError(f"could not run git: {exc}") from exc

    if proc.returncode == _NOTHING_IGNORED:
        return []
    if proc.returncode != 0:
        raise IgnoreLookupError(
            f"git check-ignore failed with exit code {proc.returncode}: "
            f"{proc.stderr.strip()}"
        )
    return proc.stdout.splitlines()


def resolve_exclusions(
    root: Path,
    list_ignored: ListIgnored = list_ignored_paths,
) -> Set[str]:
    """Return glob patterns for the markdown files git ignores under *root*.

    Ignored directories become ``<root>/<dir>/**/*.md``; ignored markdown
    files are matched exactly.  Anything else git ignores is irrelevant to
    the scan and dropped.  Without ``.git/config`` in *root* no lookup is
    made and the result is empty.
    """
    root = Path(root).absolute()
    if not (root / ".git" / "config").exists():
        return set()

    patterns: Set[str] = set()
    for line in list_ignored(root):
        entry = line.strip()
        if not entry:
            continue
        if entry.endswith(MARKDOWN_SUFFIX):
            patterns.add(glob.escape(os.path.join(root, entry)))
        elif (root / entry).is_dir():
            directory = glob.escape(os.path.join(root, entry))
            patterns.add(os.path.join(directory, "**", f"*{MARKDOWN_SUFFIX}"))
    return patterns
