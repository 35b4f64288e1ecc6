"""Document index: discover dated markdown files and answer date queries.

The index walks its journal root once, on first use, and keeps an immutable
snapshot of what it found (newest first). Lookups render the matching file
on demand. Nothing is re-walked until ``refresh()`` is called.

Example::

    index = DocumentIndex("~/notes/chronicles")
    index.search().results        # ["2020-02-15", "2020-01-02", ...]
    doc = index.find_by_date("2020-02-15")
    doc.html if doc else "not found"
"""

from __future__ import annotations

import os
import threading
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from chronicles.core.exceptions import InvalidQueryError, RenderError, WalkError
from chronicles.core.types import PathLike

from .config import IndexConfig
from .models import (
    DocumentReference,
    RenderedDocument,
    RenderedMarkdown,
    SearchResult,
    WalkIssue,
    WalkReport,
)
from .paths import extract_date_token, is_exact_date, is_pruned, match_document, path_for_entry
from .render import MarkdownRenderer


@dataclass(frozen=True)
class _Snapshot:
    entries: tuple[DocumentReference, ...]
    by_date: dict[str, str]
    report: WalkReport


class DocumentIndex:
    """Lazily-populated, read-mostly index of one journal directory.

    Two states: unpopulated (fresh, or after ``refresh()``) and populated.
    The first ``search()`` / ``find_by_date()`` walks the tree; concurrent
    first callers wait on a lock so the walk happens exactly once.
    """

    def __init__(
        self,
        root_path: PathLike,
        config: IndexConfig | None = None,
        renderer: MarkdownRenderer | None = None,
    ):
        """
        Args:
            root_path: The journal's root directory. Not touched until first query.
            config: Walk/match/render settings.
            renderer: Markdown renderer; a default one is built if omitted.
        """
        self.root_path = str(root_path)
        self.config = config if config is not None else IndexConfig()
        self.renderer = renderer if renderer is not None else MarkdownRenderer()
        self._snapshot: _Snapshot | None = None
        self._lock = threading.Lock()
        self._render_cache: OrderedDict[tuple[str, int, int], RenderedMarkdown] = OrderedDict()
        self._render_lock = threading.Lock()

    def __repr__(self) -> str:
        state = "populated" if self.is_populated else "unpopulated"
        return f"DocumentIndex(root='{self.root_path}', {state})"

    # ── State ────────────────────────────────────────────────────────

    @property
    def is_populated(self) -> bool:
        return self._snapshot is not None

    @property
    def report(self) -> WalkReport | None:
        """Report of the last walk, or None while unpopulated."""
        snapshot = self._snapshot
        return snapshot.report if snapshot else None

    def entries(self) -> tuple[DocumentReference, ...]:
        """All document references, newest first. Populates if needed."""
        return self._populate().entries

    def refresh(self) -> None:
        """Drop the cached snapshot so the next query walks the tree again."""
        with self._lock:
            self._snapshot = None
        with self._render_lock:
            self._render_cache.clear()
        logger.debug(f"Index for {self.root_path} invalidated")

    # ── Populate ─────────────────────────────────────────────────────

    def _populate(self) -> _Snapshot:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot

        with self._lock:
            if self._snapshot is None:
                self._snapshot = self._build_snapshot()
            return self._snapshot

    def _build_snapshot(self) -> _Snapshot:
        refs, report = self._walk()

        # Stable sort: equal keys keep walk order
        refs.sort(key=lambda ref: ref.date_key, reverse=True)

        by_date: dict[str, str] = {}
        for ref in refs:
            if ref.date_key in by_date:
                report.duplicates.append(ref.date_key)
                logger.debug(f"Duplicate date {ref.date_key}: {ref.path} replaces {by_date[ref.date_key]}")
            by_date[ref.date_key] = ref.path

        if report.errors:
            logger.warning(
                f"Indexed {report.documents} documents in {self.root_path} "
                f"with {len(report.errors)} unreadable path(s); index is partial"
            )
        else:
            logger.info(f"Indexed {report.documents} documents in {self.root_path}")

        return _Snapshot(entries=tuple(refs), by_date=by_date, report=report)

    def _walk(self) -> tuple[list[DocumentReference], WalkReport]:
        """Walk the root, pruning skipped subtrees and collecting dated files."""
        report = WalkReport(root=self.root_path)
        refs: list[DocumentReference] = []
        segment = self.config.skip_segment
        mode = self.config.match_mode

        def on_error(err: OSError) -> None:
            path = str(err.filename or self.root_path)
            if self.config.on_walk_error == "raise":
                raise WalkError(f"Failed to walk {path}: {err.strerror or err}", path=path) from err
            logger.warning(f"Skipping unreadable path {path}: {err}")
            report.errors.append(WalkIssue(path=path, message=str(err)))

        for dirpath, dirnames, filenames in os.walk(self.root_path, onerror=on_error):
            report.directories += 1

            kept = []
            for name in sorted(dirnames):
                if is_pruned(os.path.join(dirpath, name), self.root_path, segment, mode):
                    report.pruned += 1
                    continue
                kept.append(name)
            dirnames[:] = kept

            for name in sorted(filenames):
                path = os.path.join(dirpath, name)
                if mode == "path" and is_pruned(path, self.root_path, segment, mode):
                    continue
                date_key = match_document(path, name, mode)
                if date_key is None:
                    continue
                refs.append(DocumentReference(path=path, date_key=date_key))
                report.documents += 1

        return refs, report

    # ── Queries ──────────────────────────────────────────────────────

    def search(self) -> SearchResult:
        """Return every indexed date, newest first.

        A result with ``complete=False`` comes from a partial walk; its
        ``errors`` name the paths that could not be read.
        """
        snapshot = self._populate()
        return SearchResult(
            count=len(snapshot.entries),
            journal=self.root_path,
            results=[ref.date_key for ref in snapshot.entries],
            complete=snapshot.report.complete,
            errors=list(snapshot.report.errors),
        )

    def find_by_date(self, query: str) -> RenderedDocument | None:
        """Render the document for the first date found in *query*.

        Returns None when *query* holds no ``YYYY-MM-DD`` token (the index is
        not touched) or when no document has that date (nothing is read).

        Raises:
            WalkError: If populating fails and walk errors are fatal.
            RenderError: If the matched file can't be read or rendered.
        """
        date_key = extract_date_token(query)
        if date_key is None:
            logger.debug(f"No date in query {query!r}")
            return None

        path = self._populate().by_date.get(date_key)
        if path is None:
            return None

        rendered = self._render(path)
        return RenderedDocument(html=rendered.html, raw=rendered.raw, date=date_key)

    def _render(self, path: str) -> RenderedMarkdown:
        size = self.config.render_cache_size
        if size <= 0:
            return self.renderer.render_file(path)

        try:
            stat = os.stat(path)
        except OSError as e:
            raise RenderError(f"Cannot read document {path}: {e}") from e

        key = (path, stat.st_mtime_ns, stat.st_size)
        with self._render_lock:
            cached = self._render_cache.get(key)
            if cached is not None:
                self._render_cache.move_to_end(key)
                return cached

        rendered = self.renderer.render_file(path)

        with self._render_lock:
            self._render_cache[key] = rendered
            self._render_cache.move_to_end(key)
            while len(self._render_cache) > size:
                self._render_cache.popitem(last=False)
        return rendered

    # ── Save ─────────────────────────────────────────────────────────

    def save(self, date: str, content: str) -> Path:
        """Validate a save request and report where it would be written.

        Writing is not supported yet; nothing touches the disk and the index
        is left as is.

        Returns:
            The conventional path for the entry.

        Raises:
            InvalidQueryError: If *date* isn't ``YYYY-MM-DD`` or *content* is blank.
        """
        if not is_exact_date(date):
            raise InvalidQueryError("date must match format YYYY-MM-DD")
        if not content or not content.strip():
            raise InvalidQueryError("content is required to save a document")

        target = path_for_entry(self.root_path, date)
        logger.info(f"Would save {len(content)} chars for {date} in journal {self.root_path} -> {target}")
        return target
