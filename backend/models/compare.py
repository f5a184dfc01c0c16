"""Compare request/response models"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import DiffRecord, DiffSummary


class CompareRequest(BaseModel):
    """Two decoded documents to compare"""

    left_text: str
    right_text: str
    left_label: str = "left"
    right_label: str = "right"


class ReportRequest(CompareRequest):
    """Request for a downloadable HTML report"""

    title: str | None = None  # Overrides the configured report title


class DiffStreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "record", "done", "error"
    record: DiffRecord | None = None
    summary: DiffSummary | None = None
    has_differences: bool | None = None
    done: bool = False
    error: str | None = None
