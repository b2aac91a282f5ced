"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class SegmentKind(str, Enum):
    """Classification of a span of compared text"""

    SAME = "same"
    ADDED = "added"
    REMOVED = "removed"


class DiffSegment(BaseModel):
    """A tagged span of text, possibly several tokens after merging"""

    kind: SegmentKind
    text: str


class DiffResult(BaseModel):
    """Complete word diff between two texts"""

    segments: list[DiffSegment]
    added_words: int = 0
    removed_words: int = 0
    strategy: str = "word"  # "word" (LCS) or "line" (fallback)


class CompareRequest(BaseModel):
    """Request to diff two plain texts"""

    old_text: str
    new_text: str
    include_inline: bool = False


class CompareResponse(BaseModel):
    """Diff of two plain texts"""

    diff: DiffResult
    inline: str | None = None  # [-removed-] / {+added+} preview
