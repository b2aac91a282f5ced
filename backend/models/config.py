"""Configuration API models"""

from __future__ import annotations

from pydantic import BaseModel


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    diff: dict | None = None
    logging: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: dict
    logging: dict
    server: dict
