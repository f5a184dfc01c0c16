"""
Diff Generator Service - Line-level diffs between two text documents
"""

from __future__ import annotations

from models.diff import DiffKind, DiffRecord, DiffResult, DiffSummary

from .alignment import build_diff
from .lcs import compute_lcs


class DiffGenerator:
    """Generate line-aligned diffs for two decoded documents"""

    @staticmethod
    def split_lines(text: str) -> list[str]:
        """Split on line feeds only; carriage returns stay part of the line"""
        return text.split("\n")

    def generate_diff(
        self,
        left_text: str,
        right_text: str,
        left_label: str = "left",
        right_label: str = "right",
    ) -> DiffResult:
        """Generate structured diff from left and right content"""
        left_lines = self.split_lines(left_text)
        right_lines = self.split_lines(right_text)

        records = self.diff_lines(left_lines, right_lines)

        return DiffResult(
            left_label=left_label,
            right_label=right_label,
            records=records,
            summary=self.summarize(records),
            has_differences=self.has_differences(records),
        )

    def diff_lines(self, left_lines: list[str], right_lines: list[str]) -> list[DiffRecord]:
        """Align two line sequences"""
        matches = compute_lcs(left_lines, right_lines)
        return build_diff(left_lines, right_lines, matches)

    @staticmethod
    def has_differences(records: list[DiffRecord]) -> bool:
        """True when any line exists on one side only"""
        return any(record.kind != DiffKind.KEPT for record in records)

    @staticmethod
    def summarize(records: list[DiffRecord]) -> DiffSummary:
        summary = DiffSummary()
        for record in records:
            if record.kind == DiffKind.KEPT:
                summary.kept += 1
            elif record.kind == DiffKind.REMOVED:
                summary.removed += 1
            else:
                summary.added += 1

        summary.left_line_count = summary.kept + summary.removed
        summary.right_line_count = summary.kept + summary.added
        return summary

    @staticmethod
    def table_cells(left_text: str, right_text: str) -> int:
        """Size of the LCS table a comparison of these texts would allocate"""
        return (left_text.count("\n") + 2) * (right_text.count("\n") + 2)
