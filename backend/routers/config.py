"""Configuration API endpoints"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    report: dict | None = None
    limits: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    report: dict
    limits: dict
    server: dict


def validate_report_settings(report: dict[str, Any]):
    filename = report.get("downloadFilename")
    if filename is not None:
        if not isinstance(filename, str) or not filename.strip():
            raise HTTPException(status_code=400, detail="downloadFilename must be a non-empty string")
        if "/" in filename or "\\" in filename or '"' in filename:
            raise HTTPException(status_code=400, detail="downloadFilename must be a bare file name")
        # Sent in a latin-1 encoded header
        if not all(" " <= ch <= "~" for ch in filename):
            raise HTTPException(status_code=400, detail="downloadFilename must be printable ASCII")

    title = report.get("title")
    if title is not None and not isinstance(title, str):
        raise HTTPException(status_code=400, detail="title must be a string")

    timestamp_format = report.get("timestampFormat")
    if timestamp_format is not None:
        if not isinstance(timestamp_format, str):
            raise HTTPException(status_code=400, detail="timestampFormat must be a string")
        try:
            datetime.now().strftime(timestamp_format)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid timestampFormat: {e}")


def validate_limit_settings(limits: dict[str, Any]):
    max_cells = limits.get("maxTableCells")
    if max_cells is not None and (isinstance(max_cells, bool) or not isinstance(max_cells, int)):
        raise HTTPException(status_code=400, detail="maxTableCells must be an integer")


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        report=config.get("report", {}),
        limits=config.get("limits", {}),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.report:
        validate_report_settings(request.report)
        current_config["report"] = {**current_config.get("report", {}), **request.report}
    if request.limits:
        validate_limit_settings(request.limits)
        current_config["limits"] = {**current_config.get("limits", {}), **request.limits}

    config_manager.save_config(current_config)

    return {"status": "success", "message": "Configuration updated"}
