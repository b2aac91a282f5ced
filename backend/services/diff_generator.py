"""
Diff Generator Service - Word-level diffs for comparing resume versions
"""

from __future__ import annotations

import logging
import re

from models.diff import DiffResult, DiffSegment, SegmentKind

logger = logging.getLogger("resume_diff.diff")

# Above this many token pairs the LCS table is skipped for the line heuristic
DEFAULT_MAX_LCS_CELLS = 500_000

_WHITESPACE_SPLIT = re.compile(r"(\s+)")


def tokenize(text: str) -> list[str]:
    """Split text into alternating word and whitespace runs.

    Joining the tokens gives back the original text exactly.
    """
    return [token for token in _WHITESPACE_SPLIT.split(text) if token]


def count_words(text: str) -> int:
    return len(text.split())


class DiffGenerator:
    """Generate word diffs between two versions of a text"""

    def __init__(self, max_lcs_cells: int = DEFAULT_MAX_LCS_CELLS):
        self.max_lcs_cells = max_lcs_cells

    def generate_diff(self, old_text: str, new_text: str) -> DiffResult:
        """Generate merged segments and word counts for two texts"""
        old_tokens = tokenize(old_text)
        new_tokens = tokenize(new_text)
        cells = len(old_tokens) * len(new_tokens)
        logger.debug(
            "Diffing %d old tokens against %d new tokens", len(old_tokens), len(new_tokens)
        )

        if cells > self.max_lcs_cells:
            logger.info(
                "Token product %d exceeds %d, falling back to line diff",
                cells,
                self.max_lcs_cells,
            )
            operations = self._line_operations(old_text, new_text)
            strategy = "line"
        else:
            operations = self._lcs_operations(old_tokens, new_tokens)
            strategy = "word"

        segments = self.merge_segments(operations)
        added_words, removed_words = self.count_changes(segments)

        return DiffResult(
            segments=segments,
            added_words=added_words,
            removed_words=removed_words,
            strategy=strategy,
        )

    def _lcs_operations(
        self,
        old: list[str],
        new: list[str],
    ) -> list[tuple[SegmentKind, str]]:
        """Align two token lists through their longest common subsequence"""
        m, n = len(old), len(new)
        dp = [[0] * (n + 1) for _ in range(m + 1)]

        for i in range(1, m + 1):
            row, prev = dp[i], dp[i - 1]
            old_token = old[i - 1]
            for j in range(1, n + 1):
                if old_token == new[j - 1]:
                    row[j] = prev[j - 1] + 1
                else:
                    row[j] = max(prev[j], row[j - 1])

        operations = []
        i, j = m, n
        while i > 0 or j > 0:
            if i > 0 and j > 0 and old[i - 1] == new[j - 1]:
                operations.append((SegmentKind.SAME, old[i - 1]))
                i -= 1
                j -= 1
            # Ties prefer consuming the new side
            elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
                operations.append((SegmentKind.ADDED, new[j - 1]))
                j -= 1
            else:
                operations.append((SegmentKind.REMOVED, old[i - 1]))
                i -= 1

        operations.reverse()
        return operations

    def _line_operations(
        self,
        old_text: str,
        new_text: str,
    ) -> list[tuple[SegmentKind, str]]:
        """Positional line walk used when the token table would be too large.

        Not a minimal diff: a line that exists on both sides but out of
        place is reported as removed and added again.
        """
        old_lines = old_text.splitlines(keepends=True)
        new_lines = new_text.splitlines(keepends=True)
        old_set = set(old_lines)
        new_set = set(new_lines)

        operations = []
        oi, ni = 0, 0
        while oi < len(old_lines) or ni < len(new_lines):
            has_old = oi < len(old_lines)
            has_new = ni < len(new_lines)

            if has_old and has_new and old_lines[oi] == new_lines[ni]:
                operations.append((SegmentKind.SAME, old_lines[oi]))
                oi += 1
                ni += 1
            elif has_old and old_lines[oi] not in new_set:
                operations.append((SegmentKind.REMOVED, old_lines[oi]))
                oi += 1
            elif has_new and new_lines[ni] not in old_set:
                operations.append((SegmentKind.ADDED, new_lines[ni]))
                ni += 1
            else:
                # Both lines exist elsewhere on the other side
                if has_old:
                    operations.append((SegmentKind.REMOVED, old_lines[oi]))
                    oi += 1
                if has_new:
                    operations.append((SegmentKind.ADDED, new_lines[ni]))
                    ni += 1

        return operations

    def merge_segments(
        self,
        operations: list[tuple[SegmentKind, str]],
    ) -> list[DiffSegment]:
        """Concatenate consecutive operations of the same kind"""
        merged: list[list] = []
        for kind, text in operations:
            if merged and merged[-1][0] == kind:
                merged[-1][1] += text
            else:
                merged.append([kind, text])

        return [DiffSegment(kind=kind, text=text) for kind, text in merged]

    def count_changes(self, segments: list[DiffSegment]) -> tuple[int, int]:
        """Return (added_words, removed_words) over merged segments"""
        added = 0
        removed = 0
        for segment in segments:
            if segment.kind == SegmentKind.ADDED:
                added += count_words(segment.text)
            elif segment.kind == SegmentKind.REMOVED:
                removed += count_words(segment.text)
        return added, removed

    def render_inline(self, segments: list[DiffSegment]) -> str:
        """Render segments as plain text with [-removed-] and {+added+} markers"""
        parts = []
        for segment in segments:
            if segment.kind == SegmentKind.REMOVED:
                parts.append(f"[-{segment.text}-]")
            elif segment.kind == SegmentKind.ADDED:
                parts.append(f"{{+{segment.text}+}}")
            else:
                parts.append(segment.text)
        return "".join(parts)


# ═══════════════════════════════════════════════════════════════════════════
# Module-level helper functions
# ═══════════════════════════════════════════════════════════════════════════


def compute_word_diff(
    old_text: str,
    new_text: str,
    max_lcs_cells: int = DEFAULT_MAX_LCS_CELLS,
) -> DiffResult:
    """Convenience function to diff two texts with the given threshold."""
    return DiffGenerator(max_lcs_cells).generate_diff(old_text, new_text)
