"""Post-parse tree transforms for rendered documents.

A tree transform is a callable that receives the parsed ElementTree root
after inline processing and before serialization, and may mutate it in
place. ``TreeTransformExtension`` runs a list of them, in order, as one
Python-Markdown treeprocessor.
"""

from __future__ import annotations

import xml.etree.ElementTree as etree
from collections.abc import Iterable

from markdown import Extension, Markdown
from markdown.treeprocessors import Treeprocessor

from chronicles.core.types import TreeTransform


def passthrough(root: etree.Element) -> None:
    """Default tree transform: leaves the document untouched."""


class TreeTransformProcessor(Treeprocessor):
    """Run registered tree transforms in order."""

    def __init__(self, md: Markdown, transforms: Iterable[TreeTransform]):
        super().__init__(md)
        self.transforms = list(transforms)

    def run(self, root):
        for transform in self.transforms:
            transform(root)
        return None


class TreeTransformExtension(Extension):
    """Register the tree-transform hook."""

    def __init__(self, transforms: Iterable[TreeTransform] = (), **kwargs):
        self.transforms = tuple(transforms)
        super().__init__(**kwargs)

    def extendMarkdown(self, md):  # noqa: N802
        # Below the inline processor (20) and prettify (10)
        md.treeprocessors.register(TreeTransformProcessor(md, self.transforms), "tree_transforms", 5)
