"""
Alignment Reconstructor - Turn an LCS into an ordered list of diff records
"""

from __future__ import annotations

from models.diff import DiffKind, DiffRecord, Match


def build_diff(
    left: list[str],
    right: list[str],
    matches: list[Match],
) -> list[DiffRecord]:
    """
    Walk both line sequences alongside the match list.

    Every line of both inputs ends up in exactly one record. Within each gap
    between two matches, all removed lines are emitted before all added lines.
    """
    records: list[DiffRecord] = []
    i = j = k = 0

    while i < len(left) or j < len(right):
        next_match = matches[k] if k < len(matches) else None

        if next_match is not None and next_match == (i, j):
            records.append(
                DiffRecord(
                    kind=DiffKind.KEPT,
                    left_line_number=i + 1,  # 1-indexed for display
                    right_line_number=j + 1,
                    left_content=left[i],
                    right_content=right[j],
                )
            )
            i += 1
            j += 1
            k += 1
        elif i < len(left) and (next_match is None or i < next_match.left_index):
            records.append(
                DiffRecord(
                    kind=DiffKind.REMOVED,
                    left_line_number=i + 1,
                    left_content=left[i],
                )
            )
            i += 1
        elif j < len(right) and (next_match is None or j < next_match.right_index):
            records.append(
                DiffRecord(
                    kind=DiffKind.ADDED,
                    right_line_number=j + 1,
                    right_content=right[j],
                )
            )
            j += 1
        else:
            raise ValueError(f"Match list out of step with inputs at {next_match}")

    return records
