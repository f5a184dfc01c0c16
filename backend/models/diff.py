"""Diff-related data models"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel


class DiffKind(str, Enum):
    """How a line pair relates the two documents"""

    KEPT = "kept"
    REMOVED = "removed"  # left side only
    ADDED = "added"  # right side only


class Match(NamedTuple):
    """One aligned line pair of the longest common subsequence (0-indexed)"""

    left_index: int
    right_index: int


class DiffRecord(BaseModel):
    """A single annotated line pair"""

    kind: DiffKind
    left_line_number: int | None = None  # 1-indexed, KEPT/REMOVED only
    right_line_number: int | None = None  # 1-indexed, KEPT/ADDED only
    left_content: str = ""
    right_content: str = ""


class DiffSummary(BaseModel):
    """Record counts for one comparison"""

    kept: int = 0
    removed: int = 0
    added: int = 0
    left_line_count: int = 0
    right_line_count: int = 0


class DiffResult(BaseModel):
    """Complete diff result for two documents"""

    left_label: str
    right_label: str
    records: list[DiffRecord]
    summary: DiffSummary
    has_differences: bool
