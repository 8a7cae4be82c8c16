"""Tests for the caller-side policies around the engine."""

import pytest

from resume_extractor.core.exceptions import InsufficientTextError
from resume_extractor.core.text_parser import (
    ensure_sufficient_text,
    name_from_filename,
    parse_text_to_response,
)

NAMELESS_RESUME = "experienced developer building web platforms for many clients\nSKILLS\nPython, Docker"


def test_name_from_filename():
    assert name_from_filename("jane_smith-resume.pdf") == "Jane Smith"
    assert name_from_filename("John.Doe.CV.2024.docx") == "John Doe"
    assert name_from_filename("resume.pdf") == ""
    assert name_from_filename("CV_2024.docx") == ""
    assert name_from_filename("") == ""
    assert name_from_filename(None) == ""


def test_short_text_is_rejected():
    with pytest.raises(InsufficientTextError) as exc_info:
        ensure_sufficient_text("   too short   ")

    assert exc_info.value.length == len("too short")
    assert exc_info.value.minimum == 50
    assert isinstance(exc_info.value, ValueError)


def test_minimum_is_configurable():
    assert ensure_sufficient_text("  twelve chars  ", minimum=5) == "twelve chars"


def test_filename_fallback_when_name_not_found():
    resp = parse_text_to_response(NAMELESS_RESUME, file_name="john-doe-cv.txt")

    assert resp.success is True
    assert resp.data.contact.name == "John Doe"
    assert any("derived 'John Doe' from filename" in w for w in resp.warnings)
    assert any("No email or phone" in w for w in resp.warnings)


def test_sentinel_kept_when_filename_is_useless():
    resp = parse_text_to_response(NAMELESS_RESUME, file_name="resume.txt")

    assert resp.data.contact.name == "Professional"
    assert "Name not found in text." in resp.warnings


def test_metadata_and_clean_warnings():
    text = "Jane Smith\njane@example.com\nSKILLS\nPython, Docker, Kubernetes and more"
    resp = parse_text_to_response(text, file_name="Jane.txt", file_type="text/plain")

    assert resp.data.contact.name == "Jane Smith"
    assert resp.warnings == []
    assert resp.metadata == {"fileType": "text/plain", "fileName": "Jane.txt", "textLength": len(text)}


def test_response_serializes_camel_case():
    text = "Jane Smith\njane@example.com\nEXPERIENCE\nSoftware Engineer\nAcme\n2020 - 2022"
    dumped = parse_text_to_response(text).model_dump(by_alias=True)

    assert set(dumped) == {"success", "data", "metadata", "warnings"}
    assert dumped["data"]["experience"][0]["startDate"] == "2020"
