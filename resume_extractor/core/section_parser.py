"""
Section segmentation for normalized resume text.

A heading is a short line (< 50 chars) containing a section keyword. Headings are
found in one left-to-right scan and each section runs from the line after its
heading up to the next heading (or end of document). Lines before the first
heading (name, contact block) belong to no section.
"""

import logging
import re
from typing import Dict, List, Optional, Sequence, Tuple

from resume_extractor.core.schemas import Section, SectionKind
from resume_extractor.core.text_normalization import NormalizedText, is_bullet

logger = logging.getLogger(__name__)

HEADING_MAX_LEN = 50

# ===== HEADING KEYWORDS =====
# Dict order is the tie-break priority when a line matches more than one kind.

SECTION_KEYWORDS: Dict[SectionKind, Tuple[str, ...]] = {
    SectionKind.EXPERIENCE: (
        "experience", "experiences", "employment", "work history", "career history",
    ),
    SectionKind.EDUCATION: (
        "education", "academic background", "degree", "degrees", "university",
    ),
    SectionKind.SKILLS: (
        "skills", "technologies", "competencies", "tech stack",
    ),
    SectionKind.PROJECTS: (
        "projects", "portfolio",
    ),
    SectionKind.SUMMARY: (
        "summary", "objective", "about", "profile",
    ),
    SectionKind.CERTIFICATIONS: (
        "certifications", "certification", "certificates", "achievements", "awards",
        "licenses",
    ),
    SectionKind.UNKNOWN: (
        "contact", "references", "interests", "hobbies", "languages spoken",
    ),
}

_KEYWORD_RES: List[Tuple[SectionKind, re.Pattern]] = [
    (kind, re.compile(r"\b(?:" + "|".join(re.escape(k) for k in words) + r")\b", re.IGNORECASE))
    for kind, words in SECTION_KEYWORDS.items()
]

# "Technologies: React, Node" is a field line, not a heading
KEY_VALUE_RE = re.compile(r":\s*\S")


def heading_kind(line: str) -> Optional[SectionKind]:
    """
    Classify a line as a section heading.

    Returns the SectionKind for heading candidates, None otherwise. Bullet lines
    and ``key: value`` lines are never headings.
    """
    t = line.strip()
    if not t or len(t) >= HEADING_MAX_LEN:
        return None
    if is_bullet(t) or KEY_VALUE_RE.search(t):
        return None
    for kind, rx in _KEYWORD_RES:
        if rx.search(t):
            return kind
    return None


def split_sections(doc: NormalizedText) -> List[Section]:
    """
    Partition the document's non-empty lines into ordered, non-overlapping sections.

    A heading of the same kind as the currently open section is kept as content
    (e.g. "State University" inside EDUCATION), so one logical section is not
    split by its own records.
    """
    lines = doc.lines
    headings: List[Tuple[int, SectionKind]] = []
    open_kind: Optional[SectionKind] = None

    for idx, line in enumerate(lines):
        kind = heading_kind(line)
        if kind is None or kind == open_kind:
            continue
        headings.append((idx, kind))
        open_kind = kind

    sections: List[Section] = []
    for i, (idx, kind) in enumerate(headings):
        end = headings[i + 1][0] if i + 1 < len(headings) else len(lines)
        sections.append(
            Section(
                kind=kind,
                heading_text=lines[idx],
                lines=list(lines[idx + 1:end]),
                start_line=idx + 1,
                end_line=end,
            )
        )

    logger.debug("Found %d sections: %s", len(sections), [s.kind.value for s in sections])
    return sections


def find_section(sections: Sequence[Section], kind: SectionKind) -> Optional[Section]:
    """Return the first section of the given kind, if any."""
    for section in sections:
        if section.kind == kind:
            return section
    return None


def front_matter(doc: NormalizedText, sections: Sequence[Section]) -> List[str]:
    """Lines before the first heading (the whole document when there are no headings)."""
    if not sections:
        return list(doc.lines)
    # start_line is the first content line; the heading sits right above it
    return list(doc.lines[:sections[0].start_line - 1])


CONTACT_HEADING_RE = re.compile(r"\bcontact\b", re.IGNORECASE)


def contact_block(doc: NormalizedText, sections: Sequence[Section]) -> List[str]:
    """Front matter plus the lines of any "Contact" sections, in document order."""
    lines = front_matter(doc, sections)
    for section in sections:
        if section.kind == SectionKind.UNKNOWN and CONTACT_HEADING_RE.search(section.heading_text):
            lines.extend(section.lines)
    return lines
