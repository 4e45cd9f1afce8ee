import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from main import create_app

UPSTREAM_URL = "https://jobs.example.test/wp-json/wp/v2/job_listing"


def make_record(**overrides):
    """A well-formed WordPress job_listing record."""
    record = {
        "id": 101,
        "slug": "cricket-coach-mumbai",
        "title": {"rendered": "Cricket Coach &#8211; U19"},
        "link": "https://sportsnaukri.com/job/cricket-coach-mumbai/",
        "date": "2024-03-05T10:20:30",
        "content": {"rendered": "<p>Coach the <strong>U19</strong> squad &amp; scout talent.</p>"},
        "metas": {
            "_job_employer_name": "Mumbai Cricket Academy",
            "_job_logo": "https://sportsnaukri.com/logo.png",
            "_job_employer_url": "https://sportsnaukri.com/employer/mca/",
            "_job_location": {"412": "Mumbai"},
            "_job_type": {"7": "Full Time"},
            "_job_category": {"31": "Coaching"},
            "_job_qualification": "Level 2 Coach",
            "_job_experience": "3 Years",
            "_job_salary": "50000",
            "_job_max_salary": "80000",
        },
    }
    record.update(overrides)
    return record


class FakeUpstream:
    """httpx.MockTransport handler that records requests and replays a canned reply."""

    def __init__(self, body=None, status_code=200, headers=None, exc=None):
        self.body = [] if body is None else body
        self.status_code = status_code
        self.headers = headers or {}
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(f"upstream failure for {request.url}", request=request)
        return httpx.Response(self.status_code, json=self.body, headers=self.headers)

    @property
    def last_params(self):
        return self.requests[-1].url.params

    @property
    def transport(self):
        return httpx.MockTransport(self)


@pytest.fixture
def upstream():
    return FakeUpstream(
        body=[make_record()],
        headers={"x-wp-total": "42", "x-wp-totalpages": "9"},
    )


@pytest.fixture
def settings():
    return Settings(wordpress_api_url=UPSTREAM_URL, max_requests_per_minute=1000)


@pytest.fixture
def client(settings, upstream):
    return TestClient(create_app(settings, transport=upstream.transport))
