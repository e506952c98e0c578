"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status, database reachability and the active token policy."""

    status: Literal["ok"] = "ok"
    version: str
    environment: str = Field(description="dev or prod")
    database: Literal["connected", "disconnected"]
    token_expiry_minutes: int | None = Field(
        default=None,
        description="Lifetime of issued tokens; null when tokens do not expire",
    )
