"""
Output models for the jobs middleware.

Upstream records are plain dicts and never leave core.transform; everything
downstream works with these typed models.
"""
from dataclasses import dataclass
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.field_extractors import NOT_SPECIFIED


class JobRecord(BaseModel):
    """Reduced, flat job listing. Serialised with camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: Optional[Union[int, str]] = None
    slug: Optional[str] = None
    title: str = "No title"
    link: Optional[str] = None
    employer: str = NOT_SPECIFIED
    employer_logo: Optional[str] = None
    employer_url: Optional[str] = None
    location: str = NOT_SPECIFIED
    job_type: str = NOT_SPECIFIED
    category: str = NOT_SPECIFIED
    qualification: str = NOT_SPECIFIED
    experience: str = NOT_SPECIFIED
    salary: str = NOT_SPECIFIED
    description: str = ""
    posted_date: Optional[str] = None
    full_description_url: Optional[str] = None


class JobsEnvelope(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    count: int
    total: int
    total_pages: int
    current_page: int
    jobs: List[JobRecord]


@dataclass(frozen=True)
class RecordResult:
    """Outcome of mapping one upstream record: a job or the error that stopped it."""

    job: Optional[JobRecord] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.job is not None
