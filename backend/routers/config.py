"""Configuration API endpoints"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from models.config import ConfigResponse, ConfigUpdateRequest
from services.config_manager import ConfigManager

router = APIRouter()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _validate_diff_settings(values: dict) -> None:
    """Reject thresholds the LCS engine cannot use"""
    if "maxLcsCells" not in values:
        return
    cells = values["maxLcsCells"]
    if isinstance(cells, bool) or not isinstance(cells, int) or cells <= 0:
        raise HTTPException(status_code=400, detail="maxLcsCells must be a positive integer")


def _validate_logging_settings(values: dict) -> None:
    level = values.get("level")
    if level is not None and str(level).upper() not in LOG_LEVELS:
        raise HTTPException(status_code=400, detail=f"Unknown log level: {level}")


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        diff=config.get("diff", {}),
        logging=config.get("logging", {}),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.diff:
        _validate_diff_settings(request.diff)
        current_config["diff"] = {**current_config.get("diff", {}), **request.diff}
    if request.logging:
        _validate_logging_settings(request.logging)
        current_config["logging"] = {**current_config.get("logging", {}), **request.logging}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if request.logging:
        logging.getLogger().setLevel(config_manager.log_level())

    return {"status": "success", "message": "Configuration updated"}
