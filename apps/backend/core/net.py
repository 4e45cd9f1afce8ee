"""
HTTP client for the upstream WordPress REST API.

One GET per call, bounded by a timeout. No retries: failures surface as
httpx exceptions for the caller to map:
- httpx.HTTPStatusError: upstream answered with a non-2xx status
- httpx.RequestError: no response (DNS, connect, timeout, ...)
"""
import logging
from typing import Any, Dict, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)

DEFAULT_UA = "SportsNaukriJobsMiddleware/1.1"
DEFAULT_TIMEOUT = 10.0


class HTTPClient:
    """Thin async wrapper around a shared httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Full URL of the job_listing collection endpoint
            timeout: Seconds before the request is abandoned
            user_agent: Override for the User-Agent header
            transport: Custom transport (tests pass httpx.MockTransport)
        """
        self.base_url = base_url
        self.timeout = httpx.Timeout(timeout)
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport,
            follow_redirects=True,
            headers={
                "User-Agent": user_agent or DEFAULT_UA,
                "Accept": "application/json",
            },
        )

    async def get_json(self, params: Dict[str, Any]) -> Tuple[Any, httpx.Headers]:
        """
        GET the collection endpoint with query params.

        Returns:
            (decoded JSON body, response headers)

        Raises:
            httpx.HTTPStatusError: upstream returned a non-2xx status
            httpx.RequestError: upstream could not be reached
        """
        response = await self._client.get(self.base_url, params=params)
        if response.is_error:
            logger.warning(f"[net] {self.base_url} returned HTTP {response.status_code}")
        response.raise_for_status()
        return response.json(), response.headers

    async def aclose(self) -> None:
        await self._client.aclose()
