"""Tailored resume comparison models"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import DiffResult


class TailoredResume(BaseModel):
    """A saved version of a resume tailored to one application"""

    id: str
    version_name: str
    resume_text: str
    position: str | None = None
    company: str | None = None
    created_at: str | None = None  # ISO timestamp, newest first ordering


class ResumeCompareRequest(BaseModel):
    """Request to compare two tailored resumes"""

    left: TailoredResume
    right: TailoredResume
    swap: bool = False
    include_inline: bool = False


class ResumeCompareResponse(BaseModel):
    """Labelled diff of two tailored resumes"""

    left_id: str
    right_id: str
    left_label: str
    right_label: str
    diff: DiffResult
    inline: str | None = None


class DefaultPairRequest(BaseModel):
    """Saved resumes, newest first"""

    resumes: list[TailoredResume]


class DefaultPairResponse(BaseModel):
    """Ids preselected for comparison"""

    left_id: str
    right_id: str
