"""
Error taxonomy for the public API.

Every error response has the same JSON shape:
    {"success": false, "error": <short title>, "message": <detail>, ...extra}
"""
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """Base class for errors rendered as structured JSON responses."""

    status_code = 500
    error = "Internal server error"

    def __init__(self, message: str, status_code: Optional[int] = None, **extra: Any):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_body(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": self.error,
            "message": self.message,
            **self.extra,
        }


class UpstreamError(ApiError):
    """Upstream answered with a non-2xx status; its status code is propagated."""

    error = "WordPress API error"

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(
            message or "Failed to fetch jobs",
            status_code=status_code,
            statusCode=status_code,
        )


class UpstreamUnavailable(ApiError):
    """Request sent but no response came back (network failure or timeout)."""

    status_code = 503
    error = "Service unavailable"

    def __init__(self, message: str = "Could not reach WordPress API"):
        super().__init__(message)


class InternalError(ApiError):
    """Anything else that went wrong while handling a request."""


def error_response(status_code: int, error: str, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "message": message, **extra},
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())
