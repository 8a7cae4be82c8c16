import re
from typing import List, Tuple

MONTHS = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?|"
    r"aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)

YEAR_RE = re.compile(r"(?<!\d)\d{4}(?!\d)")
CURRENT_RE = re.compile(r"\b(?:present|current(?:ly)?|now)\b", re.IGNORECASE)

# Examples: "2020 - 2023", "2021 - Present", "Jan 2020 - Mar 2022", "03/2019 to 05/2021",
# "May 2024", "Graduated 2019", "2019"
DATE_SHAPES: List[re.Pattern] = [
    re.compile(r"\d{4}\s*(?:-|to)\s*(?:\d{4}|present|current(?:ly)?|now)\b", re.IGNORECASE),
    re.compile(rf"\b{MONTHS}\.?,?\s+\d{{4}}(?!\d)", re.IGNORECASE),
    re.compile(r"\b\d{1,2}/\d{4}(?!\d)"),
    re.compile(r"^(?:(?:graduated|graduation|expected|class of|completed)\s*:?\s*)?\d{4}$", re.IGNORECASE),
]

# A complete range or single date as it appears inside a longer line, for removal
DATE_SPAN_RE = re.compile(
    rf"(?:(?:{MONTHS}\.?,?\s+|\d{{1,2}}/)?\d{{4}})"
    rf"(?:\s*(?:-|to)\s*(?:(?:{MONTHS}\.?,?\s+|\d{{1,2}}/)?\d{{4}}|present|current(?:ly)?|now))?",
    re.IGNORECASE,
)


def looks_like_dates(line: str) -> bool:
    """True for year ranges, month-name dates, MM/YYYY dates and bare year lines."""
    t = line.strip()
    return any(rx.search(t) for rx in DATE_SHAPES)


def parse_date_range(line: str) -> Tuple[str, str, bool]:
    """
    Parse (start_date, end_date, current) from a date line.

    "present"/"current"/"now" mark a current role: end_date is always "" then.
    Otherwise the first two 4-digit years are start and end.
    """
    years = YEAR_RE.findall(line)
    current = bool(CURRENT_RE.search(line))
    start = years[0] if years else ""
    if current:
        return start, "", True
    end = years[1] if len(years) > 1 else ""
    return start, end, False


def remove_dates(text: str) -> str:
    """Strip date spans from a line and tidy the separators they leave behind."""
    t = DATE_SPAN_RE.sub(" ", text)
    t = re.sub(r"\(\s*\)", " ", t)
    t = " ".join(t.split())
    return t.strip(" ,|-(")
