"""Journal indexing and rendering.

Walks a directory of ``YYYY-MM-DD.md`` files, keeps an in-memory date index,
and renders entries to HTML on demand.
"""

from .config import IndexConfig
from .index import DocumentIndex
from .models import DocumentReference, RenderedDocument, SearchResult, WalkIssue, WalkReport
from .registry import IndexRegistry
from .render import MarkdownRenderer

__all__ = [
    "DocumentIndex",
    "DocumentReference",
    "IndexConfig",
    "IndexRegistry",
    "MarkdownRenderer",
    "RenderedDocument",
    "SearchResult",
    "WalkIssue",
    "WalkReport",
    "search",
    "find_by_date",
]


def search(journal_root, config: IndexConfig | None = None) -> SearchResult:
    """One-shot search of a journal: build an index and list its dates."""
    return DocumentIndex(journal_root, config=config).search()


def find_by_date(journal_root, query: str, config: IndexConfig | None = None) -> RenderedDocument | None:
    """One-shot lookup of the document for the date in *query*."""
    return DocumentIndex(journal_root, config=config).find_by_date(query)
