"""Tests for chronicles.journal.models."""

import dataclasses

import pytest

from chronicles.journal.models import (
    DocumentReference,
    RenderedDocument,
    SearchResult,
    WalkIssue,
    WalkReport,
)


class TestDocumentReference:
    def test_is_immutable(self):
        ref = DocumentReference(path="/j/2020-01-01.md", date_key="2020-01-01")
        with pytest.raises(dataclasses.FrozenInstanceError):
            ref.date_key = "2021-01-01"

    def test_equality(self):
        a = DocumentReference(path="/j/2020-01-01.md", date_key="2020-01-01")
        b = DocumentReference(path="/j/2020-01-01.md", date_key="2020-01-01")
        assert a == b


class TestSerialisation:
    def test_rendered_document_to_dict(self):
        doc = RenderedDocument(html="<p>x</p>", raw="x", date="2020-01-01")
        assert doc.to_dict() == {"html": "<p>x</p>", "raw": "x", "date": "2020-01-01"}

    def test_search_result_to_dict(self):
        result = SearchResult(count=2, journal="/j", results=["2020-01-02", "2020-01-01"])
        assert result.to_dict() == {
            "count": 2,
            "journal": "/j",
            "results": ["2020-01-02", "2020-01-01"],
            "complete": True,
            "errors": [],
        }

    def test_partial_search_result_to_dict(self):
        issue = WalkIssue(path="/j/private", message="Permission denied")
        result = SearchResult(count=0, journal="/j", complete=False, errors=[issue])
        data = result.to_dict()
        assert data["complete"] is False
        assert data["errors"] == [{"path": "/j/private", "message": "Permission denied"}]

    def test_search_result_defaults_empty(self):
        assert SearchResult(count=0, journal="/j").results == []


class TestWalkReport:
    def test_complete_without_errors(self):
        assert WalkReport(root="/j").complete

    def test_incomplete_with_errors(self):
        report = WalkReport(root="/j", errors=[WalkIssue(path="/j/x", message="denied")])
        assert not report.complete
