"""Diff API endpoints"""

from __future__ import annotations

from typing import Any, Iterator
from urllib.parse import quote

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from sse_starlette.sse import EventSourceResponse

from models.compare import CompareRequest, DiffStreamEvent, ReportRequest
from models.diff import DiffResult
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.report_renderer import ReportRenderer

router = APIRouter()
diff_generator = DiffGenerator()


def check_table_size(request: CompareRequest, config: dict[str, Any]):
    """Reject comparisons whose LCS table exceeds the configured limit"""
    max_cells = config.get("limits", {}).get("maxTableCells", 0)
    if not max_cells or max_cells <= 0:
        return

    cells = diff_generator.table_cells(request.left_text, request.right_text)
    if cells > max_cells:
        print(f"[DiffService] Rejected comparison: {cells} table cells (limit {max_cells})")
        raise HTTPException(
            status_code=413,
            detail=f"Documents too large to compare: {cells} table cells exceeds limit of {max_cells}",
        )


async def run_diff(request: CompareRequest) -> DiffResult:
    """Compute the diff off the event loop"""
    config = ConfigManager.get_instance().get_config()
    check_table_size(request, config)

    return await run_in_threadpool(
        diff_generator.generate_diff,
        request.left_text,
        request.right_text,
        request.left_label,
        request.right_label,
    )


def content_disposition(filename: str) -> str:
    """Attachment header; non-ASCII names go in an RFC 5987 filename* parameter"""
    if all(" " <= ch <= "~" and ch not in '"\\' for ch in filename):
        return f'attachment; filename="{filename}"'
    return f"attachment; filename=\"diff_result.html\"; filename*=UTF-8''{quote(filename, safe='')}"


def build_renderer(config: dict[str, Any], title: str | None = None) -> ReportRenderer:
    report_cfg = config.get("report", {})
    return ReportRenderer(
        title=title or report_cfg.get("title", "Text File Diff Result"),
        timestamp_format=report_cfg.get("timestampFormat", "%Y-%m-%d %H:%M:%S"),
    )


def iter_diff_events(result: DiffResult) -> Iterator[dict[str, str]]:
    """SSE payloads: one per record, then a closing summary"""
    for record in result.records:
        event = DiffStreamEvent(type="record", record=record)
        yield {"event": "message", "data": event.model_dump_json()}

    event = DiffStreamEvent(
        type="done",
        done=True,
        summary=result.summary,
        has_differences=result.has_differences,
    )
    yield {"event": "message", "data": event.model_dump_json()}


@router.post("/compare", response_model=DiffResult)
async def compare(request: CompareRequest) -> DiffResult:
    """Compare two documents and return the diff records"""
    return await run_diff(request)


@router.post("/stream")
async def compare_stream(request: CompareRequest):
    """Compare two documents and stream the diff records (SSE)"""
    config = ConfigManager.get_instance().get_config()
    check_table_size(request, config)

    async def event_generator():
        try:
            result = await run_in_threadpool(
                diff_generator.generate_diff,
                request.left_text,
                request.right_text,
                request.left_label,
                request.right_label,
            )
            for payload in iter_diff_events(result):
                yield payload

        except Exception as e:
            event = DiffStreamEvent(type="error", error=str(e))
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())


@router.post("/view", response_class=HTMLResponse)
async def compare_view(request: CompareRequest) -> HTMLResponse:
    """Compare two documents and return an embeddable HTML table"""
    result = await run_diff(request)
    renderer = build_renderer(ConfigManager.get_instance().get_config())

    return HTMLResponse(
        renderer.render_table(result.records, result.left_label, result.right_label)
    )


@router.post("/report", response_class=HTMLResponse)
async def compare_report(request: ReportRequest) -> HTMLResponse:
    """Compare two documents and return a downloadable HTML report"""
    result = await run_diff(request)
    config = ConfigManager.get_instance().get_config()
    renderer = build_renderer(config, request.title)
    filename = config.get("report", {}).get("downloadFilename", "diff_result.html")

    document = renderer.render_document(result.records, result.left_label, result.right_label)
    return HTMLResponse(
        document,
        headers={"Content-Disposition": content_disposition(filename)},
    )
