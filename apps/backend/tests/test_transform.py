"""
Tests for core/transform.py record mapping.
"""
import pytest

from conftest import make_record
from core.models import JobRecord
from core.transform import (
    DESCRIPTION_LIMIT,
    clean_job_data,
    format_posted_date,
    transform_record,
    transform_records,
)


class TestCleanJobData:
    def test_full_record(self):
        job = clean_job_data(make_record())

        assert isinstance(job, JobRecord)
        assert job.id == 101
        assert job.slug == "cricket-coach-mumbai"
        assert job.title == "Cricket Coach – U19"
        assert job.employer == "Mumbai Cricket Academy"
        assert job.employer_logo == "https://sportsnaukri.com/logo.png"
        assert job.employer_url == "https://sportsnaukri.com/employer/mca/"
        assert job.location == "Mumbai"
        assert job.job_type == "Full Time"
        assert job.category == "Coaching"
        assert job.qualification == "Level 2 Coach"
        assert job.experience == "3 Years"
        assert job.salary == "50000 - 80000"
        assert job.description == "Coach the U19 squad & scout talent."
        assert job.posted_date == "5/3/2024"

    def test_link_duplicated(self):
        job = clean_job_data(make_record())
        assert job.link == "https://sportsnaukri.com/job/cricket-coach-mumbai/"
        assert job.full_description_url == job.link

    def test_camel_case_serialisation(self):
        data = clean_job_data(make_record()).model_dump(by_alias=True)
        assert set(data) == {
            "id", "slug", "title", "link", "employer", "employerLogo", "employerUrl",
            "location", "jobType", "category", "qualification", "experience",
            "salary", "description", "postedDate", "fullDescriptionUrl",
        }

    def test_minimal_record_gets_defaults(self):
        job = clean_job_data({})

        assert job is not None
        assert job.id is None
        assert job.slug is None
        assert job.title == "No title"
        assert job.link is None
        assert job.employer == "Not specified"
        assert job.employer_logo is None
        assert job.employer_url is None
        assert job.location == "Not specified"
        assert job.job_type == "Not specified"
        assert job.category == "Not specified"
        assert job.qualification == "Not specified"
        assert job.experience == "Not specified"
        assert job.salary == "Not specified"
        assert job.description == ""
        assert job.posted_date is None
        assert job.full_description_url is None

    def test_no_field_is_missing(self):
        data = clean_job_data({"id": 5}).model_dump(by_alias=True)
        assert len(data) == 16

    def test_empty_title_defaults(self):
        job = clean_job_data(make_record(title={"rendered": ""}))
        assert job.title == "No title"

    def test_malformed_nested_objects_default(self):
        job = clean_job_data(make_record(title="plain", content=["x"], metas="oops"))
        assert job.title == "No title"
        assert job.description == ""
        assert job.employer == "Not specified"

    def test_wrong_shaped_metadata_defaults(self):
        metas = {
            "_job_employer_name": ["A", "B"],
            "_job_logo": {"url": "x"},
            "_job_experience": 5,
            "_job_location": "Mumbai",
        }
        job = clean_job_data(make_record(metas=metas))
        assert job.employer == "Not specified"
        assert job.employer_logo is None
        assert job.experience == "5"
        assert job.location == "Not specified"

    def test_empty_map_salary_falls_back(self):
        job = clean_job_data(make_record(metas={"_job_salary": [], "_job_max_salary": "80000"}))
        assert job.salary == "80000"

    def test_record_that_is_not_an_object(self):
        assert clean_job_data("not a record") is None
        assert clean_job_data(None) is None


class TestDescriptionTruncation:
    def test_long_description_truncated_with_marker(self):
        body = "a" * 900
        job = clean_job_data(make_record(content={"rendered": body}))
        assert job.description == "a" * DESCRIPTION_LIMIT + "..."
        assert len(job.description) == 803

    def test_short_description_unchanged(self):
        body = "b" * 700
        job = clean_job_data(make_record(content={"rendered": body}))
        assert job.description == body

    def test_exactly_limit_has_no_marker(self):
        body = "c" * DESCRIPTION_LIMIT
        job = clean_job_data(make_record(content={"rendered": body}))
        assert job.description == body

    def test_limit_applies_after_stripping(self):
        body = "<p>" + "d" * 790 + "</p>"
        job = clean_job_data(make_record(content={"rendered": body}))
        assert job.description == "d" * 790


class TestPostedDate:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-03-05T10:20:30", "5/3/2024"),
            ("2023-12-25T00:00:00", "25/12/2023"),
            ("2024-11-09", "9/11/2024"),
        ],
    )
    def test_india_format(self, value, expected):
        assert format_posted_date(value) == expected

    def test_missing(self):
        assert format_posted_date(None) is None
        assert format_posted_date("") is None

    def test_unparseable(self):
        assert format_posted_date("not a date") is None


class TestTransformRecords:
    def test_result_type(self):
        ok = transform_record(make_record())
        assert ok.ok
        assert ok.error is None

        failed = transform_record(["not", "a", "record"])
        assert not failed.ok
        assert isinstance(failed.error, TypeError)

    def test_drops_failures_keeps_order(self):
        raws = [make_record(id=1), 42, make_record(id=2), None, make_record(id=3)]
        jobs = transform_records(raws)
        assert [job.id for job in jobs] == [1, 2, 3]

    def test_empty(self):
        assert transform_records([]) == []

    def test_job_record_is_immutable(self):
        job = clean_job_data(make_record())
        with pytest.raises(Exception):
            job.title = "changed"
