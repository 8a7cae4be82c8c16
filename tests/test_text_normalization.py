"""Tests for text normalization and the shared line helpers."""

from resume_extractor.core.text_normalization import (
    is_bullet,
    normalize,
    normalize_text,
    strip_bullet,
    title_case_words,
)


def test_crlf_and_tabs_become_canonical():
    raw = "Jane Smith\r\nSoftware\tEngineer\rAcme   Corp"
    assert normalize_text(raw) == "Jane Smith\nSoftware Engineer\nAcme Corp"


def test_typographic_bullets_and_dashes_are_ascii():
    raw = "• Built APIs\n▪ Led team\n2020 – 2023\n“Quoted” ‘text’"
    assert normalize_text(raw) == '* Built APIs\n* Led team\n2020 - 2023\n"Quoted" \'text\''


def test_blank_line_runs_collapse():
    raw = "\n\n  Jane Smith  \n\n\n\nEXPERIENCE\n\n"
    assert normalize_text(raw) == "Jane Smith\n\nEXPERIENCE"


def test_non_printable_bytes_are_dropped():
    assert normalize_text("Jane\x00 Smith\x07") == "Jane Smith"


def test_nbsp_becomes_space():
    assert normalize_text("Jane\u00a0Smith") == "Jane Smith"


def test_accents_fold_to_base_letters():
    assert normalize_text("Jos\u00e9 M\u00fcller\nR\u00e9sum\u00e9") == "Jose Muller\nResume"
    assert normalize_text("Jose\u0301") == "Jose"


def test_normalize_is_idempotent():
    raw = "  •  Built   APIs\r\n\r\n\r\n— Led\tteam  \n \nRésumé"
    once = normalize(raw)
    assert normalize(once.text) == once


def test_lines_skip_blank_lines():
    doc = normalize("Jane Smith\n\n\nEXPERIENCE\nEngineer")
    assert doc.lines == ("Jane Smith", "EXPERIENCE", "Engineer")
    assert len(doc) == len(doc.text)


def test_empty_input():
    doc = normalize("")
    assert doc.text == ""
    assert doc.lines == ()


class TestBulletHelpers:
    """Bullet markers after normalization: *, -, and numbered items."""

    def test_star_and_dash(self):
        assert is_bullet("* Built APIs")
        assert is_bullet("- Led a team")

    def test_numbered_item(self):
        assert is_bullet("1. Shipped v2")
        assert strip_bullet("2) Shipped v2") == "Shipped v2"

    def test_negative_number_is_not_a_bullet(self):
        assert not is_bullet("-5% churn")

    def test_date_range_is_not_a_bullet(self):
        assert not is_bullet("2020 - 2023")

    def test_marker_without_text(self):
        assert not is_bullet("*")
        assert not is_bullet("Software Engineer")

    def test_strip_bullet(self):
        assert strip_bullet("*   Built APIs ") == "Built APIs"
        assert strip_bullet("Plain line") == "Plain line"


def test_title_case_words():
    assert title_case_words("JANE  smith") == "Jane Smith"
