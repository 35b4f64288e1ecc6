"""Shared type aliases used across chronicles."""

import xml.etree.ElementTree as etree
from collections.abc import Callable
from pathlib import Path

# Journal roots and document paths
PathLike = str | Path

# Post-parse hook: receives the rendered document tree and may mutate it
TreeTransform = Callable[[etree.Element], None]
