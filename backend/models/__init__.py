"""Models module - Pydantic data models"""

from .config import ConfigResponse, ConfigUpdateRequest
from .diff import CompareRequest, CompareResponse, DiffResult, DiffSegment, SegmentKind
from .resume import (
    DefaultPairRequest,
    DefaultPairResponse,
    ResumeCompareRequest,
    ResumeCompareResponse,
    TailoredResume,
)

__all__ = [
    # Config models
    "ConfigResponse",
    "ConfigUpdateRequest",
    # Diff models
    "SegmentKind",
    "DiffSegment",
    "DiffResult",
    "CompareRequest",
    "CompareResponse",
    # Resume models
    "TailoredResume",
    "ResumeCompareRequest",
    "ResumeCompareResponse",
    "DefaultPairRequest",
    "DefaultPairResponse",
]
