import logging
import re
from typing import Optional

from resume_extractor.core.contact_parser import SENTINEL_NAME
from resume_extractor.core.exceptions import InsufficientTextError
from resume_extractor.core.resume_parser import parse_resume
from resume_extractor.core.schemas import ParseResponse
from resume_extractor.core.text_normalization import title_case_words

logger = logging.getLogger(__name__)

DEFAULT_MIN_TEXT_LENGTH = 50


def ensure_sufficient_text(text: str, minimum: int = DEFAULT_MIN_TEXT_LENGTH) -> str:
    """Return the stripped text, or raise InsufficientTextError if it is too short."""
    t = (text or "").strip()
    if len(t) < minimum:
        raise InsufficientTextError(len(t), minimum)
    return t


def name_from_filename(filename: Optional[str]) -> str:
    """
    Derive a display name from an upload filename.

    "jane_smith-resume.pdf" -> "Jane Smith". Returns "" if nothing usable is left.
    """
    if not filename:
        return ""
    stem = re.sub(r"\.[A-Za-z0-9]{1,5}$", "", filename.strip())
    stem = re.sub(r"[-_.]+", " ", stem)
    stem = re.sub(r"\b(?:resume|cv)\b", " ", stem, flags=re.IGNORECASE)
    stem = re.sub(r"\d+", " ", stem)
    stem = " ".join(stem.split())
    if len(stem) <= 2:
        return ""
    return title_case_words(stem)


def parse_text_to_response(
    text: str,
    file_name: str = "",
    file_type: str = "text/plain",
    min_length: int = DEFAULT_MIN_TEXT_LENGTH,
) -> ParseResponse:
    """
    Parse already-extracted resume text and wrap it for the API.

    Applies the caller-side policies around the engine: the minimum-length
    precondition and the filename fallback for an unresolved name.
    """
    text = ensure_sufficient_text(text, min_length)
    resume = parse_resume(text)
    warnings = []

    if resume.contact.name == SENTINEL_NAME:
        fallback = name_from_filename(file_name)
        if fallback:
            logger.warning("Name detection failed, using filename-derived name")
            resume = resume.model_copy(
                update={"contact": resume.contact.model_copy(update={"name": fallback})}
            )
            warnings.append(f"Name not found in text; derived '{fallback}' from filename.")
        else:
            logger.warning("Name detection failed and filename gave no usable name")
            warnings.append("Name not found in text.")

    if not resume.contact.email and not resume.contact.phone:
        warnings.append("No email or phone found; this might not be a resume.")

    return ParseResponse(
        data=resume,
        metadata={
            "fileType": file_type,
            "fileName": file_name,
            "textLength": len(text),
        },
        warnings=warnings,
    )
