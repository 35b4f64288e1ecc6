"""
Chronicles exception hierarchy.

All chronicles exceptions inherit from ChroniclesError, so the HTTP layer and
the CLI can catch library-level errors while still telling input errors,
missing documents, and filesystem/render failures apart.
"""

from __future__ import annotations


class ChroniclesError(Exception):
    """Base exception class for all chronicles errors."""


class ConfigurationError(ChroniclesError):
    """Raised for configuration errors (unknown modes, invalid values)."""


class InvalidQueryError(ChroniclesError):
    """Raised when a journal identifier or date query is missing or malformed."""


class DocumentNotFoundError(ChroniclesError):
    """Raised when no document exists for a requested date."""


class WalkError(ChroniclesError):
    """Raised when walking a journal directory fails and errors are fatal."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class RenderError(ChroniclesError):
    """Raised when a single document cannot be read, decoded, or rendered."""
