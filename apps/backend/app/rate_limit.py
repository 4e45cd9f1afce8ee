"""
IP-based fixed-window rate limiting for every request.

The check runs in an HTTP middleware before routing, so unmatched paths count
against the client's budget too. Responses carry the standard
RateLimit-Limit / RateLimit-Remaining / RateLimit-Reset headers; rejections
add Retry-After.
"""
import math
import time
import logging
from typing import Dict, Tuple

from fastapi import Request
from fastapi.responses import JSONResponse
from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import Settings
from app.errors import error_response

logger = logging.getLogger(__name__)

RETRY_AFTER_LABEL = "1 minute"
LIMIT_SCOPE = "global"


class ClientRateLimiter:
    """One limit shared across all paths per client address, one-minute fixed window."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.limit = parse(settings.rate_limit)
        # In-memory, lock-guarded counters for the life of the process
        self.limiter = Limiter(key_func=get_remote_address, strategy="fixed-window")

    def hit(self, request: Request) -> Tuple[bool, Dict[str, str]]:
        """
        Count one request for the calling client.

        Returns:
            (allowed, rate-limit headers describing the current window)
        """
        key = get_remote_address(request)
        strategy = self.limiter.limiter
        allowed = strategy.hit(self.limit, LIMIT_SCOPE, key)
        reset_at, remaining = strategy.get_window_stats(self.limit, LIMIT_SCOPE, key)
        reset_in = max(0, math.ceil(reset_at - time.time()))

        headers = {
            "RateLimit-Limit": str(self.limit.amount),
            "RateLimit-Remaining": str(max(0, remaining)),
            "RateLimit-Reset": str(reset_in),
        }
        if not allowed:
            headers["Retry-After"] = str(reset_in)
            logger.warning(f"[rate_limit] {key} exceeded {self.settings.rate_limit} on {request.url.path}")
        return allowed, headers


def rate_limit_exceeded_response(settings: Settings) -> JSONResponse:
    return error_response(
        429,
        "Too many requests",
        f"Rate limit exceeded. Maximum {settings.max_requests_per_minute} requests per minute allowed.",
        retryAfter=RETRY_AFTER_LABEL,
    )


async def rate_limit_middleware(request: Request, call_next):
    rate_limiter: ClientRateLimiter = request.app.state.limiter
    allowed, headers = rate_limiter.hit(request)

    if allowed:
        response = await call_next(request)
    else:
        response = rate_limit_exceeded_response(rate_limiter.settings)

    response.headers.update(headers)
    return response
