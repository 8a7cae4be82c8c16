"""
Resume parsing entry point.

Pipeline: normalize -> split sections -> run every extractor over its own
read-only slice -> assemble one ParsedResume. The extractors share nothing but
the NormalizedText and the Section list, so their order does not matter.

parse_resume() never raises for a str input and keeps no state between calls:
the same text always gives the same result.
"""

import logging
from typing import List, Sequence

from resume_extractor.core.contact_parser import extract_contact
from resume_extractor.core.education_parser import parse_education
from resume_extractor.core.experience_parser import parse_experience
from resume_extractor.core.project_parser import parse_projects
from resume_extractor.core.schemas import ParsedResume, Section, SectionKind
from resume_extractor.core.section_parser import contact_block, find_section, split_sections
from resume_extractor.core.skills_parser import parse_skills
from resume_extractor.core.text_normalization import NormalizedText, normalize, strip_bullet

logger = logging.getLogger(__name__)

SUMMARY_FALLBACK_MIN_LEN = 100
SUMMARY_FALLBACK_MIN_WORDS = 15
HEADER_SCAN_LINES = 10


def _section_lines(sections: Sequence[Section], kind: SectionKind) -> List[str]:
    section = find_section(sections, kind)
    return list(section.lines) if section else []


def extract_summary(doc: NormalizedText, sections: Sequence[Section]) -> str:
    """
    Summary section text joined with single spaces.
    Without one: the first paragraph-like line (> 100 chars, > 15 words).
    """
    section = find_section(sections, SectionKind.SUMMARY)
    if section is not None:
        return " ".join(ln.strip() for ln in section.lines if ln.strip())

    for line in doc.lines:
        if len(line) > SUMMARY_FALLBACK_MIN_LEN and len(line.split()) > SUMMARY_FALLBACK_MIN_WORDS:
            return line
    return ""


def extract_certifications(lines: Sequence[str]) -> List[str]:
    out: List[str] = []
    for line in lines:
        t = strip_bullet(line)
        if t and t not in out:
            out.append(t)
    return out


def parse_normalized(doc: NormalizedText) -> ParsedResume:
    """Run the extractors over already-normalized text and assemble the result."""
    sections = split_sections(doc)

    header = contact_block(doc, sections)
    if not sections:
        header = header[:HEADER_SCAN_LINES]

    resume = ParsedResume(
        contact=extract_contact(doc, header),
        summary=extract_summary(doc, sections),
        experience=parse_experience(_section_lines(sections, SectionKind.EXPERIENCE)),
        education=parse_education(_section_lines(sections, SectionKind.EDUCATION)),
        skills=parse_skills(_section_lines(sections, SectionKind.SKILLS)),
        projects=parse_projects(_section_lines(sections, SectionKind.PROJECTS)),
        certifications=extract_certifications(_section_lines(sections, SectionKind.CERTIFICATIONS)),
    )

    logger.debug(
        "Parsed resume: %d sections, %d jobs, %d degrees, %d skill groups, %d projects",
        len(sections), len(resume.experience), len(resume.education),
        len(resume.skills), len(resume.projects),
    )
    return resume


def parse_resume(text: str) -> ParsedResume:
    """Parse raw, linearized resume text into a ParsedResume."""
    return parse_normalized(normalize(text))
