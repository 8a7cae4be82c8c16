import logging

from fastapi import APIRouter, File, HTTPException, UploadFile

from resume_extractor.config import settings
from resume_extractor.core.docx_extractor import extract_docx_text
from resume_extractor.core.exceptions import InsufficientTextError, UnreadableDocumentError
from resume_extractor.core.pdf_extractor import extract_pdf_text
from resume_extractor.core.schemas import ParseResponse
from resume_extractor.core.text_parser import parse_text_to_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["parse"])

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse Resume",
    description="Extract structured resume data (contact, summary, experience, education, skills, projects, certifications) from a DOCX, PDF, or TXT file using local heuristics only.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "data": {
                            "contact": {
                                "name": "Jane Smith",
                                "email": "jane.smith@example.com",
                                "phone": "(555) 123-4567",
                                "linkedin": "https://linkedin.com/in/janesmith",
                                "github": "",
                                "website": ""
                            },
                            "summary": "",
                            "experience": [
                                {
                                    "position": "Software Engineer",
                                    "company": "Acme Corp",
                                    "location": "",
                                    "startDate": "2020",
                                    "endDate": "",
                                    "current": True,
                                    "responsibilities": ["Built scalable APIs"]
                                }
                            ],
                            "education": [],
                            "skills": [{"category": "Programming Languages", "items": ["python"]}],
                            "projects": [],
                            "certifications": []
                        },
                        "metadata": {"fileType": "text/plain", "fileName": "resume.txt", "textLength": 420},
                        "warnings": []
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text, or too little of it"}
    }
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume file (DOCX, PDF, or TXT format)")
):
    """
    Parse a resume file into structured data.

    **Supported formats:**
    - DOCX (.docx)
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - TXT / Markdown (.txt, .md)

    **Returns:**
    - **data**: the parsed resume
    - **metadata**: fileType, fileName, textLength
    - **warnings**: fallbacks applied while parsing
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail=f"File exceeds {settings.max_upload_size_mb} MB.")

    original_name = file.filename or ""
    filename = original_name.lower()
    content_type = (file.content_type or "").lower()

    try:
        if filename.endswith(".docx") or content_type == DOCX_CONTENT_TYPE:
            text = extract_docx_text(raw)
        elif filename.endswith(".pdf") or content_type == "application/pdf":
            text = extract_pdf_text(raw)
        elif content_type in TEXT_CONTENT_TYPES or filename.endswith((".txt", ".md")):
            text = raw.decode("utf-8", errors="replace")
        else:
            raise HTTPException(status_code=415, detail=f"Unsupported content type for now: {file.content_type}")
    except UnreadableDocumentError as exc:
        logger.warning("Could not read %s: %s", filename, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    logger.info("Processing file %s (%s), text length %d", filename, content_type, len(text))

    try:
        response = parse_text_to_response(
            text,
            file_name=original_name,
            file_type=content_type,
            min_length=settings.min_text_length,
        )
    except InsufficientTextError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    data = response.data
    logger.info(
        "Parsed %s: %d jobs, %d degrees, %d skill groups, %d projects",
        filename, len(data.experience), len(data.education), len(data.skills), len(data.projects),
    )
    return response
