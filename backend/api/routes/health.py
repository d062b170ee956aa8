"""
Liveness check.
"""

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    version: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Answer 200 while the process is serving; touches no dependencies."""
    return HealthResponse(version=get_settings().app_version)
