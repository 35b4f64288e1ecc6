"""Markdown -> HTML rendering for journal documents.

Uses Python-Markdown with tables and fenced code, plus pymdown-extensions
for strikethrough, bare-URL links, and task lists. Each render builds its
own ``Markdown`` instance, so one renderer can be shared across threads.
"""

from __future__ import annotations

from pathlib import Path

import markdown
from loguru import logger

from chronicles.core.exceptions import RenderError
from chronicles.core.types import PathLike, TreeTransform

from .models import RenderedMarkdown
from .transforms import TreeTransformExtension, passthrough

BASE_EXTENSIONS = (
    "tables",
    "fenced_code",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
)

# GFM has no subscript; a single tilde stays literal
EXTENSION_CONFIGS = {
    "pymdownx.tilde": {"subscript": False},
}


class MarkdownRenderer:
    """Render markdown source to HTML, keeping the raw text alongside.

    Example::

        renderer = MarkdownRenderer()
        out = renderer.render(b"# Title\\n\\nHello **world**")
        out.html  # '<h1>Title</h1>\\n<p>Hello <strong>world</strong></p>'
    """

    def __init__(self, transforms: list[TreeTransform] | None = None):
        """
        Args:
            transforms: Tree transforms applied after parsing, in order.
                Defaults to a single no-op passthrough.
        """
        self._transforms: list[TreeTransform] = list(transforms) if transforms is not None else [passthrough]

    @property
    def transforms(self) -> tuple[TreeTransform, ...]:
        return tuple(self._transforms)

    def add_transform(self, transform: TreeTransform) -> None:
        """Append a tree transform; it applies to every later render."""
        self._transforms.append(transform)

    def _build(self) -> markdown.Markdown:
        return markdown.Markdown(
            extensions=[*BASE_EXTENSIONS, TreeTransformExtension(transforms=self._transforms)],
            extension_configs=EXTENSION_CONFIGS,
            output_format="html",
        )

    def render(self, source: bytes | str) -> RenderedMarkdown:
        """Render *source* to HTML.

        Raises:
            RenderError: If the bytes aren't UTF-8 or the parser fails.
        """
        if isinstance(source, bytes):
            try:
                raw = source.decode("utf-8")
            except UnicodeDecodeError as e:
                raise RenderError(f"Document is not valid UTF-8: {e}") from e
        else:
            raw = source

        try:
            html = self._build().convert(raw)
        except Exception as e:
            raise RenderError(f"Failed to render markdown: {e}") from e

        return RenderedMarkdown(html=html, raw=raw)

    def render_file(self, path: PathLike) -> RenderedMarkdown:
        """Read *path* from disk and render it.

        Raises:
            RenderError: If the file can't be read or rendered.
        """
        try:
            content = Path(path).read_bytes()
        except OSError as e:
            raise RenderError(f"Cannot read document {path}: {e}") from e

        logger.debug(f"Rendering {path} ({len(content)} bytes)")
        return self.render(content)
