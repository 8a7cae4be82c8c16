"""
Experience parsing: rebuild job records from the lines of an EXPERIENCE section.

Each line gets one role, tested in this order (first match wins):

  1. bullet          -> responsibility of the job in progress (dropped if none)
  2. job title       -> finalizes the job in progress, opens a new one
  3. date line       -> start/end/current of the job in progress
  4. company line    -> company (and location) if not set yet
  5. anything else   -> plain continuation, kept as a responsibility

Lines before the first job title are ignored. Responsibilities shorter than
MIN_RESPONSIBILITY_LEN are dropped once, when the job is finalized.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from resume_extractor.core.dates import looks_like_dates, parse_date_range, remove_dates
from resume_extractor.core.schemas import ExperienceEntry
from resume_extractor.core.text_normalization import is_bullet, strip_bullet

logger = logging.getLogger(__name__)

MIN_RESPONSIBILITY_LEN = 10
TITLE_MAX_LEN = 100
TITLE_MAX_WORDS = 8
COMPANY_MAX_LEN = 80

ROLE_KEYWORDS = (
    "developer", "engineer", "manager", "analyst", "designer", "consultant",
    "specialist", "coordinator", "director", "lead", "senior", "junior",
    "associate", "intern", "architect", "administrator", "scientist", "programmer",
    "officer", "technician", "supervisor", "assistant", "representative", "founder",
    "co-founder", "president", "head", "vp", "cto", "ceo", "cfo",
)
ROLE_RE = re.compile(r"\b(?:" + "|".join(re.escape(k) for k in ROLE_KEYWORDS) + r")\b", re.IGNORECASE)

# "Software Engineer at Acme", "Software Engineer @ Acme", "Software Engineer | Acme",
# "Software Engineer - Acme", "Software Engineer, Acme"
TITLE_COMPANY_SPLIT_RE = re.compile(r"\s+(?:at|@|\||-)\s+|,\s+")

# Simple "City, State" / "City, Country" detector (e.g., "Austin, TX", "Berlin, Germany")
LOCATION_RE = re.compile(r"^[A-Za-z .'-]+,\s*[A-Za-z]{2,}(?: [A-Za-z]+)?$")


@dataclass
class _JobDraft:
    """A job record in progress; only finalize() produces output."""
    position: str
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    responsibilities: List[str] = field(default_factory=list)

    @property
    def has_dates(self) -> bool:
        return bool(self.start_date or self.current)

    def set_dates(self, line: str) -> None:
        self.start_date, self.end_date, self.current = parse_date_range(line)

    def finalize(self) -> ExperienceEntry:
        return ExperienceEntry(
            position=self.position,
            company=self.company,
            location=self.location,
            start_date=self.start_date,
            end_date="" if self.current else self.end_date,
            current=self.current,
            responsibilities=[r for r in self.responsibilities if len(r) >= MIN_RESPONSIBILITY_LEN],
        )


def looks_like_job_title(line: str) -> bool:
    """Short, non-bullet line containing a role keyword ("Senior Developer")."""
    t = line.strip()
    if not t or is_bullet(t) or len(t) >= TITLE_MAX_LEN:
        return False
    if t.endswith("."):
        return False
    if len(remove_dates(t).split()) > TITLE_MAX_WORDS:
        return False
    return bool(ROLE_RE.search(t))


def looks_like_company(line: str) -> bool:
    t = line.strip()
    if not t or len(t) >= COMPANY_MAX_LEN or t.endswith("."):
        return False
    if is_bullet(t) or looks_like_dates(t):
        return False
    return len(t.split()) <= TITLE_MAX_WORDS


def split_company_location(text: str) -> Tuple[str, str]:
    """
    "Acme Corp, Austin, TX" -> ("Acme Corp", "Austin, TX")
    "Acme Corp | Remote"    -> ("Acme Corp", "Remote")
    """
    t = text.strip()
    if "|" in t:
        company, rest = [p.strip() for p in t.split("|", 1)]
        return company, rest
    if "," in t:
        company, rest = [p.strip() for p in t.split(",", 1)]
        if LOCATION_RE.match(rest) or rest.lower() == "remote":
            return company, rest
    return t, ""


def _start_job(line: str) -> _JobDraft:
    text = line.strip()
    draft_dates: Optional[str] = None
    if looks_like_dates(text):
        draft_dates = text
        text = remove_dates(text)

    position, company = text, ""
    parts = TITLE_COMPANY_SPLIT_RE.split(text, maxsplit=1)
    if len(parts) == 2 and parts[0] and parts[1]:
        left, right = parts[0].strip(), parts[1].strip()
        # Only split when the role keyword sits on the left ("Manager, Sales" stays whole)
        if ROLE_RE.search(left) and not ROLE_RE.search(right):
            position, company = left, right

    draft = _JobDraft(position=position)
    if company:
        draft.company, draft.location = split_company_location(company)
    if draft_dates:
        draft.set_dates(draft_dates)
    return draft


def parse_experience(lines: Sequence[str]) -> List[ExperienceEntry]:
    """Run the job state machine over one section's lines."""
    completed: List[ExperienceEntry] = []
    current: Optional[_JobDraft] = None

    for raw in lines:
        t = raw.strip()
        if not t:
            continue

        # Bullets can never start new entries
        if is_bullet(t):
            if current is not None:
                current.responsibilities.append(strip_bullet(t))
            continue

        if looks_like_job_title(t):
            if current is not None:
                completed.append(current.finalize())
            current = _start_job(t)
            continue

        if current is None:
            continue

        if looks_like_dates(t):
            if not current.has_dates:
                current.set_dates(t)
            continue

        if not current.company and looks_like_company(t):
            current.company, location = split_company_location(t)
            if location and not current.location:
                current.location = location
            continue

        current.responsibilities.append(t)

    if current is not None:
        completed.append(current.finalize())

    logger.debug("Parsed %d experience entries", len(completed))
    return completed
