"""Pydantic models for config validation.

``Config.validated()`` turns the merged ``Config.config_data`` dict into a
typed ``ChroniclesConfig``. Dict-based ``Config.get`` access keeps working
unchanged.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from chronicles.journal.config import IndexConfig


class ServerConfig(BaseModel):
    """HTTP server settings."""

    host: str = "127.0.0.1"
    port: int = Field(8001, ge=1, le=65535)
    debug: bool = False


class LoggingConfig(BaseModel):
    """Log level and optional log file."""

    level: str = "INFO"
    file: str | None = ""


class ChroniclesConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so deployments can carry extra sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    server: ServerConfig = ServerConfig()
    journal: IndexConfig = IndexConfig()
    logging: LoggingConfig = LoggingConfig()
