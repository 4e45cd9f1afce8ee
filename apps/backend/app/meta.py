"""
Service metadata endpoints: health/info and the OpenAPI description.
"""
import time

from fastapi import APIRouter, Request

from app.config import SERVICE_NAME, SERVICE_VERSION, Settings
from app.openapi_doc import build_openapi_document

router = APIRouter()


@router.get("/")
async def service_info(request: Request):
    """Static service identity plus uptime. Does not touch the upstream API."""
    settings: Settings = request.app.state.settings
    return {
        "service": SERVICE_NAME,
        "status": "active",
        "version": SERVICE_VERSION,
        "environment": settings.environment,
        "rateLimit": settings.rate_limit_label,
        "endpoints": {
            "jobs": "/api/jobs",
            "openapi": "/api/openapi.json",
        },
        "uptime": time.monotonic() - request.app.state.started_at,
    }


@router.get("/api/openapi.json")
async def openapi_document(request: Request):
    host = request.headers.get("host") or request.url.netloc
    return build_openapi_document(f"{request.url.scheme}://{host}")
