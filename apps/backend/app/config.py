"""
Runtime configuration, read from environment variables.

Recognised variables:
- PORT: listen port when started as a script (default 3000)
- WORDPRESS_API_URL: upstream job_listing collection URL
- MAX_REQUESTS_PER_MINUTE: per-client rate limit (default 60)
- NODE_ENV: deployment label, reported by the health check only
"""
import os
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SERVICE_NAME = "SportsNaukri API Middleware"
SERVICE_VERSION = "1.1.0"

DEFAULT_PORT = 3000
DEFAULT_WORDPRESS_API_URL = "https://sportsnaukri.com/wp-json/wp/v2/job_listing"
DEFAULT_MAX_REQUESTS_PER_MINUTE = 60
DEFAULT_ENVIRONMENT = "development"

UPSTREAM_TIMEOUT_SECONDS = 10.0


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"[config] {name}={raw!r} is not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"[config] {name}={raw!r} must be positive, using {default}")
        return default
    return value


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    wordpress_api_url: str = DEFAULT_WORDPRESS_API_URL
    max_requests_per_minute: int = DEFAULT_MAX_REQUESTS_PER_MINUTE
    environment: str = DEFAULT_ENVIRONMENT
    upstream_timeout: float = UPSTREAM_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment, falling back to defaults."""
        return cls(
            port=_positive_int("PORT", DEFAULT_PORT),
            wordpress_api_url=os.getenv("WORDPRESS_API_URL") or DEFAULT_WORDPRESS_API_URL,
            max_requests_per_minute=_positive_int("MAX_REQUESTS_PER_MINUTE", DEFAULT_MAX_REQUESTS_PER_MINUTE),
            environment=os.getenv("NODE_ENV") or DEFAULT_ENVIRONMENT,
        )

    @property
    def rate_limit(self) -> str:
        """Limit string in the notation slowapi/limits understand, e.g. "60/minute"."""
        return f"{self.max_requests_per_minute}/minute"

    @property
    def rate_limit_label(self) -> str:
        return f"{self.max_requests_per_minute} requests/minute"

