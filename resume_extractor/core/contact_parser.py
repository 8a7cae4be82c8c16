"""
Contact extraction: identifiers anywhere in the document plus a name strategy chain.

Patterns are scanned over the full text, independent of section boundaries.
Nothing here raises; a pattern that does not match simply leaves its field empty.
"""

import logging
import re
from typing import Callable, List, Optional, Sequence

from resume_extractor.core.schemas import ContactInfo
from resume_extractor.core.section_parser import heading_kind
from resume_extractor.core.text_normalization import NormalizedText, title_case_words

logger = logging.getLogger(__name__)

SENTINEL_NAME = "Professional"

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
# Handles: (555) 123-4567, 555-123-4567, 555.123.4567, +1 555 123 4567, +44 (020) 123 4567
PHONE_RE = re.compile(
    r"(?<![\w+])"
    r"(?:\+?\d{1,3}[-.\s]?)?"  # Optional country code
    r"\(?\d{3}\)?"  # Area code
    r"[-.\s]?\d{3}"  # Exchange
    r"[-.\s]?\d{4}"  # Line number
    r"(?!\d)"
)
LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/([A-Za-z0-9_.-]+)", re.IGNORECASE)
GITHUB_RE = re.compile(r"(?:https?://)?(?:www\.)?github\.com/([A-Za-z0-9_.-]+)", re.IGNORECASE)
WEBSITE_RE = re.compile(r"(?:https?://|www\.)[^\s,;|<>()\"']+", re.IGNORECASE)

# Label lines: "Name: Jane Smith", "Candidate: Jane Smith", "Resume of Jane Smith"
NAME_LABEL_RE = re.compile(
    r"^\s*(?:(?:full\s+name|name|candidate|applicant)\s*:|(?:resume|cv)\s+of\b:?)\s*(?P<rest>.+)$",
    re.IGNORECASE,
)
NAME_FORBIDDEN_RE = re.compile(r"[!@#$%^&*()_+={}\[\]|\\:;\"'<>?,./]")

NAME_SCAN_LINES = 5
TITLE_CASE_SCAN_LINES = 10


def looks_like_name(text: str) -> bool:
    """
    Name-shape check: 2-4 words, each starting uppercase, no digits,
    no punctuation other than hyphens.
    """
    words = text.split()
    if not 2 <= len(words) <= 4:
        return False
    if not all(w[0].isupper() for w in words):
        return False
    if any(c.isdigit() for c in text):
        return False
    return not NAME_FORBIDDEN_RE.search(text)


def contains_contact_info(text: str) -> bool:
    low = text.lower()
    if EMAIL_RE.search(text) or PHONE_RE.search(text):
        return True
    return any(marker in low for marker in ("linkedin", "github", "http", "www."))


def _display_name(name: str) -> str:
    """All-caps names become Title Case; mixed case (McDonald) is kept as written."""
    t = " ".join(name.split())
    if t.isupper():
        return title_case_words(t)
    return t


def _is_title_case_word(word: str) -> bool:
    return len(word) > 1 and word[0].isupper() and word[1:] == word[1:].lower() and word.isalpha()


# ===== NAME STRATEGIES =====
# Each takes (lines, email) and returns a name or None.

def _name_from_label(lines: Sequence[str], email: str) -> Optional[str]:
    for line in lines:
        m = NAME_LABEL_RE.match(line)
        if not m:
            continue
        rest = m.group("rest").strip()
        if looks_like_name(rest) and not contains_contact_info(rest):
            return _display_name(rest)
    return None


def _name_from_top_lines(lines: Sequence[str], email: str) -> Optional[str]:
    for line in lines[:NAME_SCAN_LINES]:
        if looks_like_name(line) and not contains_contact_info(line) and heading_kind(line) is None:
            return _display_name(line)
    return None


def _name_from_title_case_line(lines: Sequence[str], email: str) -> Optional[str]:
    for line in lines[:TITLE_CASE_SCAN_LINES]:
        words = line.split()
        if not 2 <= len(words) <= 4:
            continue
        if all(_is_title_case_word(w) for w in words) and not contains_contact_info(line) \
                and heading_kind(line) is None:
            return line.strip()
    return None


def _name_from_email(lines: Sequence[str], email: str) -> Optional[str]:
    if not email:
        return None
    local = email.split("@", 1)[0]
    candidate = re.sub(r"\d+", "", local)
    candidate = re.sub(r"[._]", " ", candidate).strip()
    if len(candidate) <= 2:
        return None
    return title_case_words(candidate)


NAME_STRATEGIES: List[Callable[[Sequence[str], str], Optional[str]]] = [
    _name_from_label,
    _name_from_top_lines,
    _name_from_title_case_line,
    _name_from_email,
]


def extract_name(lines: Sequence[str], email: str = "") -> str:
    """Run the name strategy chain; first success wins, sentinel otherwise."""
    for strategy in NAME_STRATEGIES:
        name = strategy(lines, email)
        if name:
            logger.debug("Name resolved by %s", strategy.__name__)
            return name
    logger.debug("No name strategy matched, using sentinel")
    return SENTINEL_NAME


# ===== PROFILE URLS =====

def _profile_url(rx: re.Pattern, text: str, canonical_prefix: str) -> str:
    m = rx.search(text)
    if not m:
        return ""
    matched = m.group(0).rstrip("/.")
    if matched.lower().startswith("http"):
        return matched
    return f"{canonical_prefix}{m.group(1).rstrip('/.')}"


def extract_website(lines: Sequence[str]) -> str:
    """First personal URL (not LinkedIn/GitHub) among the given lines."""
    for line in lines:
        for m in WEBSITE_RE.finditer(line):
            url = m.group(0).rstrip(".,")
            low = url.lower()
            if "linkedin.com" in low or "github.com" in low:
                continue
            return url if low.startswith("http") else f"https://{url}"
    return ""


def extract_contact(doc: NormalizedText, header_lines: Optional[Sequence[str]] = None) -> ContactInfo:
    """
    Build ContactInfo from the full normalized text.

    ``header_lines`` limits where a personal website is looked for (front matter and
    "Contact" sections); defaults to the first 10 lines of the document.
    """
    text = doc.text
    email_m = EMAIL_RE.search(text)
    phone_m = PHONE_RE.search(text)
    email = email_m.group(0) if email_m else ""

    if header_lines is None:
        header_lines = doc.lines[:TITLE_CASE_SCAN_LINES]

    return ContactInfo(
        name=extract_name(doc.lines, email),
        email=email,
        phone=phone_m.group(0).strip() if phone_m else "",
        linkedin=_profile_url(LINKEDIN_RE, text, "https://linkedin.com/in/"),
        github=_profile_url(GITHUB_RE, text, "https://github.com/"),
        website=extract_website(header_lines),
    )
