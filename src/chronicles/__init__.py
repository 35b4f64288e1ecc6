"""Chronicles: a dated-markdown journal index and rendering backend."""

__version__ = "0.1.0"
