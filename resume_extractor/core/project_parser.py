"""
Project parsing: rebuild project records from the lines of a PROJECTS section.

Line roles, first match wins:

  1. "Tech: a, b"          -> technologies
  2. line with a URL       -> github or link (see assign_url)
  3. "Live: x.com"         -> link, scheme synthesized
  4. "Repo: owner/name"    -> github, https://github.com/ synthesized
  5. bullet                -> description
  6. title-shaped line     -> finalizes the project in progress, opens a new one
  7. anything else         -> description

Lines before the first project title are ignored.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from resume_extractor.core.schemas import ProjectEntry
from resume_extractor.core.text_normalization import is_bullet, strip_bullet

logger = logging.getLogger(__name__)

URL_RE = re.compile(r"\bhttps?://[^\s)>\]]+", re.IGNORECASE)
# Bare domains need a web TLD so "Node.js/Express" is not read as a URL
BARE_URL_RE = re.compile(
    r"(?<![@\w.-])(?:www\.)?[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*"
    r"\.(?:com|io|dev|app|net|org|me|co|ai|xyz|site|page|tech|info)"
    r"(?:/[^\s)>\]]*)?(?![\w@])",
    re.IGNORECASE,
)
KEY_VALUE_RE = re.compile(r"^(?P<key>[A-Za-z][A-Za-z &/-]{0,30}?)\s*:(?!//)\s*(?P<value>.+)$")

LINK_KEYS = ("live", "demo", "url", "link", "website", "site")
REPO_KEYS = ("github", "repository", "repo", "source", "code")
TECH_KEYS = ("tech", "technologies", "stack", "built with", "tools")
LIVE_HINTS = ("live", "demo", "deployed")

TITLE_MAX_LEN = 60
TITLE_MAX_WORDS = 6
SMALL_WORDS = {"a", "an", "and", "the", "of", "for", "in", "on", "to", "with", "via", "by"}


@dataclass
class _ProjectDraft:
    name: str
    description_parts: List[str] = field(default_factory=list)
    technologies: List[str] = field(default_factory=list)
    link: str = ""
    github: str = ""

    def add_technologies(self, value: str) -> None:
        for tech in re.split(r"[,;|]", value):
            tech = tech.strip().rstrip(".")
            if tech and tech not in self.technologies:
                self.technologies.append(tech)

    def finalize(self) -> ProjectEntry:
        return ProjectEntry(
            name=self.name,
            description=" ".join(self.description_parts),
            technologies=list(self.technologies),
            link=self.link,
            github=self.github,
        )


def _with_scheme(url: str) -> str:
    url = url.strip().rstrip(".,;")
    return url if re.match(r"^https?://", url, re.IGNORECASE) else f"https://{url}"


def _repo_url(value: str) -> str:
    v = value.strip().rstrip(".,;")
    if re.match(r"^https?://", v, re.IGNORECASE):
        return v
    if v.lower().startswith(("github.com/", "www.github.com/")):
        return f"https://{v}"
    return f"https://github.com/{v.lstrip('/')}"


def find_url(line: str) -> str:
    """First URL on the line, with https:// synthesized for bare domains."""
    m = URL_RE.search(line)
    if m:
        return m.group(0).rstrip(".,;")
    m = BARE_URL_RE.search(line)
    if m and "@" not in m.group(0):
        return _with_scheme(m.group(0))
    return ""


def assign_url(draft: _ProjectDraft, line: str, url: str) -> None:
    """
    Route one URL to github or link.

    Explicit cues win: "github" in the line or a github.com host -> github;
    "live"/"demo"/"deployed" -> link. Otherwise the first empty slot, link first.
    """
    low = line.lower()
    host = re.sub(r"^https?://", "", url.lower()).split("/", 1)[0]
    if "github" in low or host in ("github.com", "www.github.com"):
        draft.github = url
    elif any(hint in low for hint in LIVE_HINTS):
        draft.link = url
    elif not draft.link:
        draft.link = url
    elif not draft.github:
        draft.github = url


def split_key_value(line: str) -> Optional[Tuple[str, str]]:
    m = KEY_VALUE_RE.match(line)
    if not m:
        return None
    return m.group("key").strip().lower(), m.group("value").strip()


def _key_matches(key: str, keys: Sequence[str]) -> bool:
    return any(re.search(rf"\b{re.escape(k)}\b", key) for k in keys)


def looks_like_project_title(line: str, strict: bool = True) -> bool:
    """
    Short, colon-free, URL-free line. In strict mode (a project is already open)
    the line must also be Title Case ("Habit Tracker", "E-commerce Platform") so
    plain description lines are not mistaken for new projects.
    """
    t = line.strip()
    if not t or is_bullet(t) or ":" in t or find_url(t):
        return False
    if len(t) >= (TITLE_MAX_LEN if strict else 100):
        return False
    if not strict:
        return True
    if t.endswith(".") or len(t.split()) > TITLE_MAX_WORDS:
        return False
    words = [w for w in t.split() if w[0].isalpha() and w.lower() not in SMALL_WORDS]
    return bool(words) and all(w[0].isupper() for w in words)


def parse_projects(lines: Sequence[str]) -> List[ProjectEntry]:
    """Run the project state machine over one section's lines."""
    completed: List[ProjectEntry] = []
    current: Optional[_ProjectDraft] = None

    for raw in lines:
        t = raw.strip()
        if not t:
            continue

        if current is None:
            if looks_like_project_title(t, strict=False):
                current = _ProjectDraft(name=t)
            continue

        kv = split_key_value(strip_bullet(t))
        # "Stack: React, socket.io" lists technologies even when a value looks like a domain
        if kv and (_key_matches(kv[0], TECH_KEYS) or "tech" in kv[0]):
            current.add_technologies(kv[1])
            continue

        url = find_url(t)
        if url:
            if kv and _key_matches(kv[0], REPO_KEYS):
                current.github = _repo_url(url)
            elif kv and _key_matches(kv[0], LINK_KEYS):
                current.link = url
            else:
                assign_url(current, t, url)
            continue

        if kv:
            key, value = kv
            if _key_matches(key, LINK_KEYS):
                if "." in value:
                    current.link = _with_scheme(value)
                continue
            if _key_matches(key, REPO_KEYS):
                if "/" in value and " " not in value:
                    current.github = _repo_url(value)
                continue

        if is_bullet(t):
            current.description_parts.append(strip_bullet(t))
            continue

        if looks_like_project_title(t):
            completed.append(current.finalize())
            current = _ProjectDraft(name=t)
            continue

        current.description_parts.append(t)

    if current is not None:
        completed.append(current.finalize())

    logger.debug("Parsed %d projects", len(completed))
    return completed
