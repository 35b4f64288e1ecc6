"""HTTP surface for the journal index."""

from .app import create_app

__all__ = ["create_app"]
