from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from typing import Optional
from contextlib import asynccontextmanager
import time
import logging

import httpx

from app.config import SERVICE_NAME, SERVICE_VERSION, Settings
from app.errors import ApiError, api_error_handler, error_response
from app.jobs import JobsService, router as jobs_router
from app.meta import router as meta_router
from app.rate_limit import ClientRateLimiter, rate_limit_middleware
from core.net import HTTPClient

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application lifecycle events."""
    settings: Settings = app.state.settings
    logger.info(f"[main] {SERVICE_NAME} {SERVICE_VERSION} env={settings.environment}")
    logger.info(f"[main] API endpoint: /api/jobs (rate limit {settings.rate_limit_label})")
    logger.info("[main] OpenAPI spec: /api/openapi.json")
    logger.info(f"[main] Source API: {settings.wordpress_api_url}")

    yield

    await app.state.http_client.aclose()


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; read from the environment when omitted
        transport: httpx transport for upstream calls (tests inject a mock)
    """
    settings = settings or Settings.from_env()

    # The hand-written /api/openapi.json replaces FastAPI's generated docs
    app = FastAPI(
        title=SERVICE_NAME,
        version=SERVICE_VERSION,
        lifespan=lifespan,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )

    http_client = HTTPClient(
        settings.wordpress_api_url,
        timeout=settings.upstream_timeout,
        transport=transport,
    )
    app.state.settings = settings
    app.state.started_at = time.monotonic()
    app.state.http_client = http_client
    app.state.jobs_service = JobsService(http_client)
    app.state.limiter = ClientRateLimiter(settings)

    app.add_exception_handler(ApiError, api_error_handler)

    async def request_timing_middleware(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {duration_ms:.0f}ms")
        return response

    async def error_masking_middleware(request: Request, call_next):
        """Turn anything unhandled into the structured 500 body, without tracebacks."""
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error: {e}", exc_info=True)
            return error_response(500, "Internal server error", str(e))

    # Registered innermost first; requests pass error masking, CORS, rate limit, timing, routes
    app.middleware("http")(request_timing_middleware)
    app.middleware("http")(rate_limit_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(error_masking_middleware)

    app.include_router(meta_router)
    app.include_router(jobs_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
