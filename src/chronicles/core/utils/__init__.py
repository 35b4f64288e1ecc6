"""Small shared helpers."""

from .logging import configure_from, setup_logging

__all__ = ["configure_from", "setup_logging"]
