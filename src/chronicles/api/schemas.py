"""Request/response models for the journal HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class WalkIssueResponse(BaseModel):
    path: str
    message: str


class SearchResponse(BaseModel):
    count: int = Field(..., description="Number of documents in the journal")
    journal: str = Field(..., description="Journal root that was searched")
    results: list[str] = Field(default_factory=list, description="Date tokens, newest first")
    complete: bool = Field(True, description="False when part of the journal could not be read")
    errors: list[WalkIssueResponse] = Field(default_factory=list, description="Unreadable paths")


class DocumentResponse(BaseModel):
    html: str
    raw: str = Field(..., description="Markdown source, unchanged")
    date: str = Field(..., description="Date token the query resolved to")


class SaveRequest(BaseModel):
    journal: str = Field(..., description="Journal root the entry belongs to")
    date: str = Field(..., description="Entry date, YYYY-MM-DD")
    content: str = Field(..., description="Markdown content of the entry")


class SaveResponse(BaseModel):
    journal: str
    date: str
    path: str = Field(..., description="Where the entry would be written")
    saved: bool = Field(False, description="Always false until saving is supported")


class ErrorResponse(BaseModel):
    message: str
