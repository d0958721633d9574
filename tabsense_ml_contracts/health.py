"""Health check contract."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["ok", "loading", "cold"]
    version: str
    model_name: str
    model_loaded: bool
    cache_backend: str
