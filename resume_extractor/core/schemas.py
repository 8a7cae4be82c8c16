from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SectionKind(str, Enum):
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    UNKNOWN = "unknown"


class _Frozen(BaseModel):
    """Base for engine output: immutable, camelCase on the wire."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Section(_Frozen):
    kind: SectionKind
    heading_text: str
    lines: List[str] = Field(default_factory=list)
    start_line: int = Field(..., description="Index of the first content line (after the heading)")
    end_line: int = Field(..., description="Exclusive index of the line that closes the section")


class ContactInfo(_Frozen):
    name: str = "Professional"
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""


class ExperienceEntry(_Frozen):
    position: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""  # Always empty when current is True
    current: bool = False
    responsibilities: List[str] = Field(default_factory=list)


class EducationEntry(_Frozen):
    degree: str = ""
    institution: str = ""
    field: str = ""
    location: str = ""
    graduation_date: str = ""
    gpa: str = ""
    honors: List[str] = Field(default_factory=list)


class ProjectEntry(_Frozen):
    name: str
    description: str = ""
    technologies: List[str] = Field(default_factory=list)  # Unique, insertion order
    link: str = ""
    github: str = ""


class SkillCategory(_Frozen):
    category: str
    items: List[str] = Field(default_factory=list)


class ParsedResume(_Frozen):
    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: str = ""
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[SkillCategory] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)


class ParseResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    data: ParsedResume
    metadata: Dict[str, Any] = Field(default_factory=dict, description="fileType, fileName, textLength")
    warnings: List[str] = Field(default_factory=list)
