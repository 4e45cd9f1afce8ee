"""
Job listings endpoint: proxy the WordPress job_listing collection and return
reduced JobRecords.
"""
import re
import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx
from fastapi import APIRouter, Depends, Query, Request

from app.errors import ApiError, InternalError, UpstreamError, UpstreamUnavailable
from core.models import JobRecord, JobsEnvelope
from core.net import HTTPClient
from core.transform import transform_records

logger = logging.getLogger(__name__)
router = APIRouter()

DEFAULT_PER_PAGE = 5
MAX_PER_PAGE = 20
DEFAULT_PAGE = 1
UPSTREAM_FIELDS = "id,slug,title,link,date,content,metas"

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Optional[str], default: int) -> int:
    """
    Read a leading integer the lenient way query strings deserve.

    "12abc" -> 12, "abc" -> default, "0" -> default, None -> default
    """
    if value is None:
        return default
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return default
    return int(match.group(1)) or default


def normalize_pagination(per_page: Optional[str], page: Optional[str]) -> Tuple[int, int]:
    """Clamp per_page to 1..20 (default 5) and page to >= 1 (default 1)."""
    size = min(max(parse_int(per_page, DEFAULT_PER_PAGE), 1), MAX_PER_PAGE)
    number = max(parse_int(page, DEFAULT_PAGE), 1)
    return size, number


def _header_int(headers: httpx.Headers, name: str, fallback: int) -> int:
    raw = headers.get(name)
    if raw is None:
        return fallback
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning(f"[jobs] Ignoring non-integer {name} header: {raw!r}")
        return fallback


def _upstream_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None


def filter_jobs(jobs: List[JobRecord], location: Optional[str] = None, job_type: Optional[str] = None) -> List[JobRecord]:
    """Case-insensitive substring filters on the display strings, order preserved."""
    if location:
        needle = location.lower()
        jobs = [job for job in jobs if needle in job.location.lower()]
    if job_type:
        needle = job_type.lower()
        jobs = [job for job in jobs if needle in job.job_type.lower()]
    return jobs


class JobsService:
    """Fetches one page of upstream listings and shapes the response envelope."""

    def __init__(self, http_client: HTTPClient):
        self.http_client = http_client

    def build_params(
        self,
        per_page: int,
        page: int,
        search: Optional[str] = None,
        slug: Optional[str] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "per_page": per_page,
            "page": page,
            "_fields": UPSTREAM_FIELDS,
        }
        if search:
            params["search"] = search
        if slug:
            params["slug"] = slug
        return params

    async def _fetch(self, params: Dict[str, Any]) -> Tuple[Any, httpx.Headers]:
        try:
            return await self.http_client.get_json(params)
        except httpx.HTTPStatusError as e:
            raise UpstreamError(e.response.status_code, _upstream_message(e.response)) from e
        except httpx.RequestError as e:
            logger.error(f"[jobs] Upstream unreachable: {type(e).__name__}: {e}")
            raise UpstreamUnavailable() from e

    async def list_jobs(
        self,
        search: Optional[str] = None,
        slug: Optional[str] = None,
        per_page: Optional[str] = None,
        page: Optional[str] = None,
        location: Optional[str] = None,
        job_type: Optional[str] = None,
    ) -> JobsEnvelope:
        """
        Run one request through the pipeline.

        Note: total and totalPages come from the upstream headers and count
        listings before the location/job_type filters are applied.

        Raises:
            UpstreamError: upstream returned a non-2xx status
            UpstreamUnavailable: upstream could not be reached in time
        """
        size, number = normalize_pagination(per_page, page)
        params = self.build_params(size, number, search=search, slug=slug)

        logger.info(f"[jobs] Fetching jobs from WordPress API with params: {params}")
        records, headers = await self._fetch(params)

        if not isinstance(records, list):
            raise TypeError(f"Expected a JSON array from WordPress API, got {type(records).__name__}")

        jobs = filter_jobs(transform_records(records), location=location, job_type=job_type)

        return JobsEnvelope(
            count=len(jobs),
            total=_header_int(headers, "x-wp-total", len(jobs)),
            total_pages=_header_int(headers, "x-wp-totalpages", 1),
            current_page=number,
            jobs=jobs,
        )


def get_jobs_service(request: Request) -> JobsService:
    return request.app.state.jobs_service


@router.get("/api/jobs", response_model=JobsEnvelope)
async def get_jobs(
    search: Optional[str] = Query(None, description="Keyword to search for jobs"),
    slug: Optional[str] = Query(None, description="Job slug to fetch a specific job"),
    per_page: Optional[str] = Query(None, description="Jobs per page (default 5, max 20)"),
    page: Optional[str] = Query(None, description="Page number (default 1)"),
    location: Optional[str] = Query(None, description="Filter by location"),
    job_type: Optional[str] = Query(None, description="Filter by job type"),
    service: JobsService = Depends(get_jobs_service),
):
    try:
        return await service.list_jobs(
            search=search,
            slug=slug,
            per_page=per_page,
            page=page,
            location=location,
            job_type=job_type,
        )
    except ApiError as e:
        logger.error(f"[jobs] Error fetching jobs: {e.message}")
        raise
    except Exception as e:
        logger.error(f"[jobs] Error fetching jobs: {e}", exc_info=True)
        raise InternalError(str(e)) from e
