"""Configuration model for journal indexing and lookup.

Build it directly, or from the ``journal`` section of the application Config
via ``IndexConfig.from_config``. Values arriving as env-var strings are
coerced by pydantic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator

if TYPE_CHECKING:
    from chronicles.core.config import Config

MatchMode = Literal["filename", "path"]
WalkErrorPolicy = Literal["skip", "raise"]


class IndexConfig(BaseModel):
    """Settings for walking, matching, and rendering a journal.

    Attributes:
        skip_segment: Directory name whose subtrees are never indexed.
        match_mode: ``"filename"`` (anchored to the basename) or ``"path"``
            (legacy unanchored search over the full path).
        on_walk_error: ``"skip"`` records the failing subtree and carries on;
            ``"raise"`` aborts the whole walk with WalkError.
        render_cache_size: Max rendered documents kept per index, keyed by
            path and modification time. 0 disables caching.
        share_indexes: Whether a registry hands out one long-lived index per
            journal or builds a fresh one for every request.
    """

    model_config = ConfigDict(frozen=True)

    skip_segment: str = "attachments"
    match_mode: MatchMode = "filename"
    on_walk_error: WalkErrorPolicy = "skip"
    render_cache_size: NonNegativeInt = 0
    share_indexes: bool = True

    @field_validator("match_mode", "on_walk_error", mode="before")
    @classmethod
    def _lowercase(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("skip_segment", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @classmethod
    def from_config(cls, config: Config) -> IndexConfig:
        """Validated ``journal.*`` section of *config*.

        Raises:
            ConfigurationError: If any configuration value is invalid.
        """
        return config.validated().journal
