"""Date-token patterns and the on-disk entry layout of a journal.

Journal documents are markdown files named ``YYYY-MM-DD.md``. Entries are
conventionally stored as ``<journal>/YYYY/MM/YYYY-MM-DD.md``, but the index
finds them at any depth.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from chronicles.core.types import PathLike

# Unanchored: the first date-shaped substring anywhere in a query
DATE_TOKEN_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

EXACT_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

# Anchored to the filename: "2019-11-14.md" and nothing else
FILENAME_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})\.md$")

# Legacy full-path search. The dot is deliberately unescaped and the match
# may start in any path segment, including directory names.
LEGACY_PATH_RE = re.compile(r"(\d{4}-\d{2}-\d{2}).md")


def extract_date_token(text: str | None) -> str | None:
    """Return the first ``YYYY-MM-DD`` substring of *text*, or None."""
    if not text:
        return None
    match = DATE_TOKEN_RE.search(text)
    return match.group(0) if match else None


def is_exact_date(text: str | None) -> bool:
    """Whether *text* is exactly a ``YYYY-MM-DD`` token."""
    return bool(text) and EXACT_DATE_RE.match(text) is not None


def match_document(path: str, filename: str, mode: str = "filename") -> str | None:
    """Return the date key for a candidate document, or None if it isn't one.

    Args:
        path: Full path of the file as produced by the walk.
        filename: Basename of the file.
        mode: ``"filename"`` matches the basename only; ``"path"`` searches
            the whole path string (legacy behaviour).
    """
    if mode == "path":
        match = LEGACY_PATH_RE.search(path)
    else:
        match = FILENAME_RE.match(filename)
    return match.group(1) if match else None


def is_pruned(path: str, root: str, segment: str, mode: str = "filename") -> bool:
    """Whether *path* lies in a subtree that must be skipped.

    In ``"filename"`` mode a path is pruned when one of its components below
    *root* equals *segment*. In ``"path"`` mode any occurrence of *segment*
    in the full path string prunes it.
    """
    if not segment:
        return False
    if mode == "path":
        return segment in path
    rel = os.path.relpath(path, root)
    return segment in Path(rel).parts


def path_for_entry(journal_path: PathLike, date: str) -> Path:
    """Conventional location of the entry for *date*: ``YYYY/MM/YYYY-MM-DD.md``."""
    return Path(journal_path) / date[0:4] / date[5:7] / f"{date}.md"
