"""Models module - Pydantic data models"""

from .compare import CompareRequest, DiffStreamEvent, ReportRequest
from .diff import DiffKind, DiffRecord, DiffResult, DiffSummary, Match

__all__ = [
    # Compare models
    "CompareRequest",
    "ReportRequest",
    "DiffStreamEvent",
    # Diff models
    "DiffKind",
    "Match",
    "DiffRecord",
    "DiffSummary",
    "DiffResult",
]
