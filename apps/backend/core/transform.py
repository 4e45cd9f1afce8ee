"""
Map raw WordPress job_listing records onto the reduced JobRecord schema.

Raw records are permissive dicts; nothing about their shape is trusted. A
record that cannot be mapped produces a failed RecordResult and is dropped by
transform_records, never a partial JobRecord.
"""
import logging
from typing import Any, Iterable, List, Mapping, Optional

from dateutil import parser as date_parser

from core.field_extractors import (
    NOT_SPECIFIED,
    extract_category,
    extract_job_type,
    extract_location,
    format_salary,
)
from core.models import JobRecord, RecordResult
from core.text import decode_entities, strip_tags

logger = logging.getLogger(__name__)

DESCRIPTION_LIMIT = 800
ELLIPSIS = "..."


def _mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _rendered(raw: Mapping, key: str) -> str:
    """Text of a WordPress rich-text wrapper such as {"rendered": "..."}."""
    rendered = _mapping(raw.get(key)).get("rendered")
    return rendered if isinstance(rendered, str) else ""


def _text(value: Any, default: Optional[str]) -> Optional[str]:
    if not value or isinstance(value, bool):
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return default


def _record_id(value: Any):
    if isinstance(value, bool) or value == "":
        return None
    return value if isinstance(value, (int, str)) else None


def _truncate(description: str) -> str:
    if len(description) > DESCRIPTION_LIMIT:
        return description[:DESCRIPTION_LIMIT] + ELLIPSIS
    return description


def format_posted_date(value: Any) -> Optional[str]:
    """
    Format a WordPress publish date as an Indian calendar date (D/M/YYYY).

    Examples:
        "2024-03-05T10:20:30" -> "5/3/2024"
        None -> None
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = date_parser.parse(value)
    except (ValueError, OverflowError):
        logger.warning(f"[transform] Unparseable publish date: {value!r}")
        return None
    return f"{parsed.day}/{parsed.month}/{parsed.year}"


def _build_job(raw: Any) -> JobRecord:
    if not isinstance(raw, Mapping):
        raise TypeError(f"expected a JSON object, got {type(raw).__name__}")

    metas = _mapping(raw.get("metas"))
    link = _text(raw.get("link"), None)

    return JobRecord(
        id=_record_id(raw.get("id")),
        slug=_text(raw.get("slug"), None),
        title=decode_entities(_rendered(raw, "title")) or "No title",
        link=link,
        employer=_text(metas.get("_job_employer_name"), NOT_SPECIFIED),
        employer_logo=_text(metas.get("_job_logo"), None),
        employer_url=_text(metas.get("_job_employer_url"), None),
        location=extract_location(metas.get("_job_location")),
        job_type=extract_job_type(metas.get("_job_type")),
        category=extract_category(metas.get("_job_category")),
        qualification=_text(metas.get("_job_qualification"), NOT_SPECIFIED),
        experience=_text(metas.get("_job_experience"), NOT_SPECIFIED),
        salary=format_salary(metas.get("_job_salary"), metas.get("_job_max_salary")),
        description=_truncate(strip_tags(_rendered(raw, "content"))),
        posted_date=format_posted_date(raw.get("date")),
        full_description_url=link,
    )


def transform_record(raw: Any) -> RecordResult:
    """
    Map one upstream record. Never raises.

    Returns:
        RecordResult with either the JobRecord or the error that stopped it
    """
    try:
        return RecordResult(job=_build_job(raw))
    except Exception as e:
        record_id = raw.get("id") if isinstance(raw, Mapping) else None
        logger.error(f"[transform] Error cleaning job data (id={record_id}): {e}")
        return RecordResult(error=e)


def clean_job_data(raw: Any) -> Optional[JobRecord]:
    """Map one upstream record, or None when it cannot be mapped."""
    return transform_record(raw).job


def transform_records(raws: Iterable[Any]) -> List[JobRecord]:
    """Map records in order, keeping only the ones that succeeded."""
    results = [transform_record(raw) for raw in raws]
    jobs = [result.job for result in results if result.ok]

    dropped = len(results) - len(jobs)
    if dropped:
        logger.warning(f"[transform] Dropped {dropped} of {len(results)} records that could not be mapped")

    return jobs
