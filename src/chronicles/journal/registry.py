"""Long-lived, thread-safe sharing of journal indexes.

Building an index walks the whole journal, so the HTTP layer keeps one
DocumentIndex per journal root for the life of the process instead of
building one per request. ``invalidate()`` is the refresh policy: the next
query against an invalidated journal walks it again.
"""

from __future__ import annotations

import os
import threading

from loguru import logger

from chronicles.core.types import PathLike

from .config import IndexConfig
from .index import DocumentIndex
from .render import MarkdownRenderer


def _key(root_path: PathLike) -> str:
    return os.path.normpath(str(root_path))


class IndexRegistry:
    """Hands out DocumentIndex instances keyed by journal root.

    With ``share_indexes=False`` every ``get()`` returns a fresh index,
    which re-walks the journal on each request.
    """

    def __init__(self, config: IndexConfig | None = None, renderer: MarkdownRenderer | None = None):
        self.config = config if config is not None else IndexConfig()
        self.renderer = renderer if renderer is not None else MarkdownRenderer()
        self._indexes: dict[str, DocumentIndex] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._indexes)

    def __contains__(self, root_path: PathLike) -> bool:
        return _key(root_path) in self._indexes

    def get(self, root_path: PathLike) -> DocumentIndex:
        """Return the index for *root_path*, creating it on first request."""
        if not self.config.share_indexes:
            return DocumentIndex(root_path, config=self.config, renderer=self.renderer)

        key = _key(root_path)
        with self._lock:
            index = self._indexes.get(key)
            if index is None:
                index = DocumentIndex(root_path, config=self.config, renderer=self.renderer)
                self._indexes[key] = index
                logger.debug(f"Registered index for {key}")
            return index

    def invalidate(self, root_path: PathLike | None = None) -> int:
        """Refresh one journal's index, or all of them when *root_path* is None.

        Returns:
            Number of indexes invalidated.
        """
        with self._lock:
            if root_path is None:
                targets = list(self._indexes.values())
            else:
                index = self._indexes.get(_key(root_path))
                targets = [index] if index else []

        for index in targets:
            index.refresh()
        return len(targets)
