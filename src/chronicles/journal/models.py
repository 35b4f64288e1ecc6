"""Core data models for the journal index.

A DocumentReference points at a discovered file without its content; a
RenderedDocument is produced on demand for a single lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DocumentReference:
    """A dated document discovered during a directory walk.

    Attributes:
        path: Filesystem location of the document, unique per reference.
        date_key: The ``YYYY-MM-DD`` token taken from the filename.
    """

    path: str
    date_key: str


@dataclass(frozen=True)
class RenderedMarkdown:
    """Output of the markdown renderer: HTML plus the untouched source."""

    html: str
    raw: str


@dataclass(frozen=True)
class RenderedDocument:
    """The result of a date lookup.

    Attributes:
        html: Rendered HTML.
        raw: Original markdown source.
        date: The date token resolved for this result.
    """

    html: str
    raw: str
    date: str

    def to_dict(self) -> dict[str, Any]:
        return {"html": self.html, "raw": self.raw, "date": self.date}


@dataclass
class SearchResult:
    """Summary view of a journal index.

    Attributes:
        count: Number of indexed documents.
        journal: The root path that was indexed.
        results: Date tokens, newest first.
        complete: False when part of the journal could not be read, so an
            empty result is not mistaken for an empty journal.
        errors: The unreadable paths behind an incomplete result.
    """

    count: int
    journal: str
    results: list[str] = field(default_factory=list)
    complete: bool = True
    errors: list[WalkIssue] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "journal": self.journal,
            "results": list(self.results),
            "complete": self.complete,
            "errors": [issue.to_dict() for issue in self.errors],
        }


@dataclass(frozen=True)
class WalkIssue:
    """A filesystem error met while walking, and the path it concerned."""

    path: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "message": self.message}


@dataclass
class WalkReport:
    """What a single populate walk saw.

    A report with errors marks a partial index: some subtrees could not be
    read, which is not the same as those subtrees holding no documents.
    """

    root: str
    directories: int = 0
    documents: int = 0
    pruned: int = 0
    duplicates: list[str] = field(default_factory=list)
    errors: list[WalkIssue] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        """True when every directory under the root was read."""
        return not self.errors
