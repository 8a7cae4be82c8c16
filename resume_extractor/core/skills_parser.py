import logging
import re
from typing import List, Sequence, Tuple

from resume_extractor.core.schemas import SkillCategory
from resume_extractor.core.text_normalization import strip_bullet

logger = logging.getLogger(__name__)

FALLBACK_CATEGORY = "Technical Skills"

# Ordered category table; items are reported as written here
SKILL_CATEGORIES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Programming Languages", (
        "javascript", "python", "java", "typescript", "c++", "c#", "php", "ruby",
        "go", "rust", "swift", "kotlin",
    )),
    ("Frontend", (
        "react", "vue", "angular", "html", "css", "sass", "tailwind", "bootstrap", "jquery",
    )),
    ("Backend", (
        "node.js", "express", "django", "flask", "spring", "laravel", "rails",
    )),
    ("Databases", (
        "mysql", "postgresql", "mongodb", "redis", "sqlite", "oracle",
    )),
    ("Tools & Technologies", (
        "git", "docker", "kubernetes", "aws", "azure", "gcp", "jenkins", "webpack",
    )),
)

# "Languages: Python, Go" -> "Python, Go"
LABEL_RE = re.compile(r"^[A-Za-z][A-Za-z &/-]{0,40}:\s*")


def skills_blob(lines: Sequence[str]) -> str:
    """Join skills section lines into one text, one comma between lines."""
    parts = []
    for line in lines:
        t = strip_bullet(line.strip())
        t = LABEL_RE.sub("", t).strip()
        if t:
            parts.append(t)
    return ", ".join(parts)


def match_keywords(blob: str, keywords: Sequence[str]) -> List[str]:
    """Keywords occurring in the blob (case-insensitive substring), in table order."""
    low = blob.lower()
    return [k for k in keywords if k.lower() in low]


def classify_skills(blob: str) -> List[SkillCategory]:
    """
    Group a skills blob into the fixed categories.

    Falls back to one "Technical Skills" category of comma/semicolon separated
    tokens when no category keyword occurs at all.
    """
    if not blob.strip():
        return []

    categories: List[SkillCategory] = []
    for category, keywords in SKILL_CATEGORIES:
        items = match_keywords(blob, keywords)
        if items:
            categories.append(SkillCategory(category=category, items=items))

    if categories:
        return categories

    tokens = [tok.strip() for tok in re.split(r"[,;]", blob)]
    tokens = [tok for tok in tokens if tok]
    if not tokens:
        return []
    logger.debug("No known skill keywords, using delimiter fallback (%d tokens)", len(tokens))
    return [SkillCategory(category=FALLBACK_CATEGORY, items=tokens)]


def parse_skills(lines: Sequence[str]) -> List[SkillCategory]:
    return classify_skills(skills_blob(lines))
