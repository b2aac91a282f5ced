"""Resume diff API endpoints"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from models.diff import CompareRequest, CompareResponse
from models.resume import (
    DefaultPairRequest,
    DefaultPairResponse,
    ResumeCompareRequest,
    ResumeCompareResponse,
)
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.resume_comparison import ResumeComparer, pick_default_pair

router = APIRouter()
logger = logging.getLogger("resume_diff.api")


def get_diff_generator() -> DiffGenerator:
    """Diff generator using the currently configured LCS threshold"""
    return DiffGenerator(ConfigManager.get_instance().max_lcs_cells())


@router.post("/compare", response_model=CompareResponse)
async def compare_texts(request: CompareRequest) -> CompareResponse:
    """Diff two plain texts word by word"""
    diff_generator = get_diff_generator()
    diff = diff_generator.generate_diff(request.old_text, request.new_text)

    logger.info(
        "Compared texts: %d segments, +%d/-%d words (%s)",
        len(diff.segments),
        diff.added_words,
        diff.removed_words,
        diff.strategy,
    )

    return CompareResponse(
        diff=diff,
        inline=diff_generator.render_inline(diff.segments) if request.include_inline else None,
    )


@router.post("/resumes/compare", response_model=ResumeCompareResponse)
async def compare_resumes(request: ResumeCompareRequest) -> ResumeCompareResponse:
    """Diff two tailored resumes, left as the older version"""
    comparer = ResumeComparer(get_diff_generator())
    response = comparer.compare(
        request.left,
        request.right,
        swap=request.swap,
        include_inline=request.include_inline,
    )

    logger.info(
        "Compared resume %s against %s: +%d/-%d words",
        response.left_id,
        response.right_id,
        response.diff.added_words,
        response.diff.removed_words,
    )
    return response


@router.post("/resumes/default-pair", response_model=DefaultPairResponse)
async def default_pair(request: DefaultPairRequest) -> DefaultPairResponse:
    """Preselect the two most recent resumes for comparison"""
    pair = pick_default_pair(request.resumes)
    if pair is None:
        raise HTTPException(status_code=404, detail="At least two resumes are required")

    left, right = pair
    return DefaultPairResponse(left_id=left.id, right_id=right.id)
