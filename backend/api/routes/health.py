"""
Liveness and readiness endpoints.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import get_supabase_client, check_connection

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    version: str


class ReadinessResponse(BaseModel):
    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Returns 200 while the process is serving requests."""
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Returns 200 when the store answers a probe query, 503 otherwise.
    """
    try:
        check_connection(get_supabase_client())
    except Exception as e:
        logger.warning(f"Readiness probe failed: {e}")
        body = ReadinessResponse(status="unavailable", database="disconnected")
        return JSONResponse(status_code=503, content=body.model_dump())
    return ReadinessResponse(status="ready", database="connected")
