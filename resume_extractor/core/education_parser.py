"""
Education parsing module: rebuild degree records from the lines of an EDUCATION section.

Deterministic, rule-based. A degree keyword line opens a record; the lines after
it fill sub-fields in a fixed order (date, GPA, honors, institution, location).
An institution line seen before its degree line is held and attached to the
next record, so both "Degree / School" and "School / Degree" layouts work.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from resume_extractor.core.dates import YEAR_RE, looks_like_dates, remove_dates
from resume_extractor.core.experience_parser import LOCATION_RE
from resume_extractor.core.schemas import EducationEntry
from resume_extractor.core.text_normalization import is_bullet, strip_bullet

logger = logging.getLogger(__name__)

# ===== DEGREE KEYWORDS (Strong Signal) =====

DEGREE_WORD_RE = re.compile(
    r"\b(?:bachelor|master|ph\.?\s?d|doctorate|doctoral|doctor of|diploma|certificate|degree|"
    r"associate of|associate's|mba|m\.b\.a|b\.?sc|m\.?sc|b\.?tech|m\.?tech|b\.?eng|m\.?eng)",
    re.IGNORECASE,
)
# Dotted abbreviations (B.S., M.A.) anywhere; bare ones (BS, MA) only before "in"/"of"
# so "Boston, MA" is not read as a degree
DEGREE_ABBR_RE = re.compile(r"\b[BM]\.\s?[SAE]\.|\b(?:BS|BA|MS|MA|BE|ME)\b(?=\s+(?:in|of)\b)")

# ===== INSTITUTION KEYWORDS =====

INSTITUTION_KEYWORDS = (
    "university", "college", "institute", "school", "academy", "polytechnic",
)
INSTITUTION_RE = re.compile(r"\b(?:" + "|".join(INSTITUTION_KEYWORDS) + r")\b", re.IGNORECASE)

HONORS_RE = re.compile(
    r"\b(?:honou?rs?|dean'?s list|cum laude|magna cum laude|summa cum laude|scholarship|"
    r"valedictorian|distinction)\b",
    re.IGNORECASE,
)
GPA_RE = re.compile(r"\bgpa\b", re.IGNORECASE)
GPA_VALUE_RE = re.compile(r"\d\.\d+")
FIELD_RE = re.compile(r"\bin\s+([A-Za-z][A-Za-z &/]+?)\s*(?:,|\||\(|-\s|$)")

INSTITUTION_MIN_LEN = 10
INSTITUTION_MAX_LEN = 100


@dataclass
class _EducationDraft:
    degree: str
    institution: str = ""
    field_of_study: str = ""
    location: str = ""
    graduation_date: str = ""
    gpa: str = ""
    honors: List[str] = field(default_factory=list)

    def finalize(self) -> EducationEntry:
        return EducationEntry(
            degree=self.degree,
            institution=self.institution,
            field=self.field_of_study,
            location=self.location,
            graduation_date=self.graduation_date,
            gpa=self.gpa,
            honors=list(self.honors),
        )


def has_degree_keyword(text: str) -> bool:
    """Strong signal that a line opens an education record."""
    return bool(DEGREE_WORD_RE.search(text) or DEGREE_ABBR_RE.search(text))


def is_institution_keyword(text: str) -> bool:
    return bool(INSTITUTION_RE.search(text))


def graduation_year(text: str) -> str:
    """Last 4-digit year on the line ("2015 - 2019" -> "2019")."""
    years = YEAR_RE.findall(text)
    return years[-1] if years else ""


def extract_field_of_study(text: str) -> str:
    """
    "Bachelor of Science in Computer Science" -> "Computer Science"
    "B.S. in Economics, 2019"                 -> "Economics"
    """
    m = FIELD_RE.search(text)
    if not m:
        return ""
    return m.group(1).strip()


def extract_gpa(text: str) -> str:
    m = GPA_VALUE_RE.search(text)
    return m.group(0) if m else ""


def _start_record(line: str, pending_institution: str) -> _EducationDraft:
    text = line.strip()
    grad = ""
    if YEAR_RE.search(text):
        grad = graduation_year(text)
        text = remove_dates(text)

    draft = _EducationDraft(degree=text, graduation_date=grad)

    # "Bachelor of Science, State University" / "B.S. | MIT"
    for sep in (" | ", ", ", " - "):
        if sep in text:
            left, right = text.split(sep, 1)
            if is_institution_keyword(right) and not is_institution_keyword(left):
                draft.degree, draft.institution = left.strip(), right.strip()
                break

    draft.field_of_study = extract_field_of_study(draft.degree)
    if GPA_RE.search(line):
        draft.gpa = extract_gpa(line)
    if not draft.institution and pending_institution:
        draft.institution = pending_institution
    return draft


def parse_education(lines: Sequence[str]) -> List[EducationEntry]:
    """Run the education state machine over one section's lines."""
    completed: List[EducationEntry] = []
    current: Optional[_EducationDraft] = None
    pending_institution = ""

    for raw in lines:
        t = raw.strip()
        if not t:
            continue

        bullet = is_bullet(t)
        text = strip_bullet(t) if bullet else t

        if not bullet and has_degree_keyword(text):
            if current is not None:
                completed.append(current.finalize())
            current = _start_record(text, pending_institution)
            pending_institution = ""
            continue

        if current is None:
            # Institution printed above its degree line
            if not bullet and is_institution_keyword(text):
                pending_institution = text
            continue

        if looks_like_dates(text):
            current.graduation_date = graduation_year(text) or current.graduation_date
            continue

        if GPA_RE.search(text):
            current.gpa = extract_gpa(text) or current.gpa
            continue

        if HONORS_RE.search(text):
            current.honors.append(text)
            continue

        if bullet:
            continue

        if is_institution_keyword(text):
            if current.institution:
                # Belongs to the next record ("School B" then "M.S. ...")
                pending_institution = text
            else:
                current.institution = text
            continue

        if not current.location and LOCATION_RE.match(text):
            current.location = text
            continue

        if not current.institution and INSTITUTION_MIN_LEN < len(text) < INSTITUTION_MAX_LEN:
            current.institution = text

    if current is not None:
        completed.append(current.finalize())

    logger.debug("Parsed %d education entries", len(completed))
    return completed
