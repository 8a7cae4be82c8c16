"""
Text normalization for linearized resume text.

Turns whatever the upstream extractor produced (CRLF line endings, tabs, smart
punctuation, control bytes) into one canonical, line-oriented form that every
extractor downstream can rely on:

- line endings are LF, tabs are spaces, whitespace runs are single spaces
- typographic bullets become ``*``, dashes become ``-``, curly quotes straight
- accented letters fold to their base letter, anything else outside printable
  ASCII + newline is dropped
- lines are trimmed, blank-line runs collapse to a single blank line

normalize() is idempotent: normalize(normalize(x).text) == normalize(x).
"""

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Tuple


# ============================================================================
# Character maps
# ============================================================================

BULLET_CHARS = "•●▪◦‣∙·■□►▸➢➤✓✔❖⦿○◆◇"
DASH_CHARS = "‐‑‒–—―−"

_PUNCT_TABLE = str.maketrans({
    **{c: "*" for c in BULLET_CHARS},
    **{c: "-" for c in DASH_CHARS},
    "‘": "'", "’": "'", "‚": "'", "‛": "'",
    "“": '"', "”": '"', "„": '"', "‟": '"',
    "\t": " ",
})

NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\n]")
INLINE_SPACE_RE = re.compile(r" {2,}")

# Leading bullet marker (after normalization only ASCII markers remain)
BULLET_RE = re.compile(r"^\s*(?:[*\-•]|\d{1,2}[.)](?=\s))\s*")


@dataclass(frozen=True)
class NormalizedText:
    """Canonical resume text plus its non-empty line view."""
    text: str
    lines: Tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(ln for ln in self.text.split("\n") if ln))

    def __len__(self) -> int:
        return len(self.text)


def _clean_line(line: str) -> str:
    line = NON_PRINTABLE_RE.sub("", line)
    return INLINE_SPACE_RE.sub(" ", line).strip()


def normalize_text(raw: str) -> str:
    """Return the canonical string form of ``raw`` (see module docstring)."""
    if not raw:
        return ""
    t = raw.replace("\r\n", "\n").replace("\r", "\n")
    # Compatibility decomposition; accents fold to their base letter ("José" -> "Jose")
    t = unicodedata.normalize("NFKD", t)
    t = "".join(c for c in t if not unicodedata.combining(c)).translate(_PUNCT_TABLE)
    # NFKD can introduce new whitespace (e.g. NBSP -> space); treat all as spaces
    t = re.sub(r"[^\S\n]", " ", t)

    out = []
    for line in t.split("\n"):
        cleaned = _clean_line(line)
        if not cleaned and (not out or not out[-1]):
            continue
        out.append(cleaned)
    return "\n".join(out).strip()


def normalize(raw: str) -> NormalizedText:
    """Normalize raw extracted text into a NormalizedText. Never fails."""
    return NormalizedText(normalize_text(raw or ""))


# ============================================================================
# Line helpers shared by the record parsers
# ============================================================================

def is_bullet(line: str) -> bool:
    """True if the line starts with a bullet marker (``*``, ``-``, ``•``, ``1.``)."""
    t = line.lstrip()
    if not t:
        return False
    # A leading minus directly followed by a digit is a negative number / range, not a bullet
    if t[0] == "-" and len(t) > 1 and t[1].isdigit():
        return False
    return bool(BULLET_RE.match(t)) and bool(BULLET_RE.sub("", t, count=1))


def strip_bullet(line: str) -> str:
    """Remove a leading bullet marker and surrounding whitespace."""
    return BULLET_RE.sub("", line, count=1).strip()


def title_case_words(text: str) -> str:
    """Uppercase the first letter of each word, lowercase the rest."""
    return " ".join(w[0].upper() + w[1:].lower() for w in text.split() if w)
