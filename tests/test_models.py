"""
tests/test_models.py - Unit tests for Models dataclasses and exceptions.

These are lightweight construction and default-value tests that do not
require any external dependencies.
"""
import dataclasses

import pytest

from Models import (
    ARRAY_TEXT_FIELD,
    DiscoveryFailure,
    ExtractionFailure,
    FetchFailure,
    FormDescriptor,
    ScraperError,
    SubmissionResult,
)


# ---------------------------------------------------------------------------
# FormDescriptor
# ---------------------------------------------------------------------------


class TestFormDescriptor:
    def test_defaults(self):
        form = FormDescriptor(action="https://example.com/create")
        assert form.method == "POST"
        assert form.hidden_fields == {}
        assert form.text_field_names == (ARRAY_TEXT_FIELD,)
        assert form.file_field_names == ()

    def test_hidden_fields_are_read_only(self):
        form = FormDescriptor(action="https://example.com", hidden_fields={"token": "abc"})
        with pytest.raises(TypeError):
            form.hidden_fields["token"] = "tampered"
        assert form.hidden_fields == {"token": "abc"}

    def test_hidden_fields_copied_from_source(self):
        source = {"token": "abc"}
        form = FormDescriptor(action="https://example.com", hidden_fields=source)
        source["token"] = "changed"
        assert form.hidden_fields["token"] == "abc"

    def test_is_hashable(self):
        f1 = FormDescriptor(action="https://example.com", hidden_fields={"token": "abc"})
        f2 = FormDescriptor(action="https://example.com", hidden_fields={"token": "abc"})
        assert f1 == f2
        assert hash(f1) == hash(f2)

    def test_is_frozen(self):
        form = FormDescriptor(action="https://example.com")
        with pytest.raises(dataclasses.FrozenInstanceError):
            form.action = "https://other.example"

    def test_placeholder_is_array_style(self):
        assert FormDescriptor(action="https://example.com").is_array_style

    def test_single_named_array_field_is_array_style(self):
        form = FormDescriptor(action="https://example.com", text_field_names=("words[]",))
        assert form.is_array_style

    def test_singular_field_is_not_array_style(self):
        form = FormDescriptor(action="https://example.com", text_field_names=("text_1",))
        assert not form.is_array_style

    def test_repeated_array_fields_are_not_array_style(self):
        form = FormDescriptor(
            action="https://example.com", text_field_names=("text[]", "text[]")
        )
        assert not form.is_array_style


# ---------------------------------------------------------------------------
# SubmissionResult
# ---------------------------------------------------------------------------


class TestSubmissionResult:
    def test_construction(self):
        r = SubmissionResult(status_code=200, body="<html/>", final_url="https://example.com/r")
        assert r.status_code == 200
        assert r.body == "<html/>"
        assert r.final_url == "https://example.com/r"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_all_derive_from_scraper_error(self):
        for exc in (
            DiscoveryFailure("https://example.com"),
            FetchFailure("https://example.com", 500),
            ExtractionFailure("https://example.com", ""),
        ):
            assert isinstance(exc, ScraperError)

    def test_discovery_failure_mentions_page(self):
        exc = DiscoveryFailure("https://example.com/effect")
        assert exc.page_url == "https://example.com/effect"
        assert "https://example.com/effect" in str(exc)

    def test_fetch_failure_carries_status(self):
        exc = FetchFailure("https://example.com", 503, "Service Unavailable", body="busy")
        assert exc.status_code == 503
        assert exc.reason == "Service Unavailable"
        assert exc.body == "busy"
        assert "503 Service Unavailable" in str(exc)

    def test_fetch_failure_without_reason(self):
        exc = FetchFailure("https://example.com", 404)
        assert str(exc).endswith("404")

    def test_extraction_failure_keeps_raw_response(self):
        exc = ExtractionFailure("https://example.com/r", "<p>nothing</p>")
        assert exc.final_url == "https://example.com/r"
        assert exc.body == "<p>nothing</p>"
