"""
Resume Comparison Service - Label and diff pairs of tailored resumes
"""

from __future__ import annotations

from models.resume import ResumeCompareResponse, TailoredResume
from services.diff_generator import DiffGenerator


def resume_label(resume: TailoredResume) -> str:
    """Human-readable label: position and company, else the version name"""
    parts = [part for part in (resume.position, resume.company) if part]
    if not parts:
        parts.append(resume.version_name)
    return " — ".join(parts)


def pick_default_pair(
    resumes: list[TailoredResume],
) -> tuple[TailoredResume, TailoredResume] | None:
    """Second-newest against newest, given records ordered newest first"""
    if len(resumes) < 2:
        return None
    return resumes[1], resumes[0]


class ResumeComparer:
    """Compare two tailored resumes with a shared diff generator"""

    def __init__(self, diff_generator: DiffGenerator):
        self.diff_generator = diff_generator

    def compare(
        self,
        left: TailoredResume,
        right: TailoredResume,
        swap: bool = False,
        include_inline: bool = False,
    ) -> ResumeCompareResponse:
        """Diff left (old) against right (new), optionally swapped first"""
        if swap:
            left, right = right, left

        diff = self.diff_generator.generate_diff(left.resume_text, right.resume_text)
        inline = self.diff_generator.render_inline(diff.segments) if include_inline else None

        return ResumeCompareResponse(
            left_id=left.id,
            right_id=right.id,
            left_label=resume_label(left),
            right_label=resume_label(right),
            diff=diff,
            inline=inline,
        )
