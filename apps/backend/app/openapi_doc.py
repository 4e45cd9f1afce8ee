"""
Hand-written OpenAPI 3.1 description of the public jobs API.

Only servers[0].url changes per request; everything else is static.
"""
from typing import Any, Dict


def _string(description: str) -> Dict[str, str]:
    return {"type": "string", "description": description}


def _query_param(name: str, schema: Dict[str, Any], description: str) -> Dict[str, Any]:
    return {
        "name": name,
        "in": "query",
        "required": False,
        "schema": schema,
        "description": description,
    }


JOB_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": {"type": "integer", "description": "Unique job ID"},
        "slug": _string("Job slug identifier"),
        "title": _string("Job title"),
        "employer": _string("Employer or organization name"),
        "employerLogo": _string("URL of employer logo image"),
        "employerUrl": _string("URL to employer profile page"),
        "location": _string("Job location(s)"),
        "jobType": _string("Job type (Full Time, Part Time, etc.)"),
        "category": _string("Job category (e.g., Management Team, Coaching, etc.)"),
        "qualification": _string("Required qualification"),
        "experience": _string("Required experience (e.g., 2 Years, 5+ Years)"),
        "salary": _string("Salary range or amount"),
        "description": _string("Brief job description (first 800 chars, no HTML)"),
        "postedDate": _string("Date when job was posted"),
        "link": _string("Direct link to full job posting"),
        "fullDescriptionUrl": _string("URL for complete job details"),
    },
}

ENVELOPE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "success": {"type": "boolean", "description": "Request success status"},
        "count": {"type": "integer", "description": "Number of jobs in current response"},
        "total": {"type": "integer", "description": "Total number of jobs available"},
        "totalPages": {"type": "integer", "description": "Total pages available"},
        "currentPage": {"type": "integer", "description": "Current page number"},
        "jobs": {"type": "array", "items": JOB_SCHEMA},
    },
}

JOBS_PARAMETERS = [
    _query_param("search", {"type": "string"}, "Keyword to search for jobs (e.g. coach, fitness, manager, cricket)."),
    _query_param("slug", {"type": "string"}, "Job slug to fetch a specific job (e.g. sports-manager-bengaluru)."),
    _query_param("location", {"type": "string"}, "Filter jobs by location (e.g. Mumbai, Delhi, Bangalore)."),
    _query_param("job_type", {"type": "string"}, "Filter jobs by type (e.g. Full Time, Part Time, Contract)."),
    _query_param(
        "per_page",
        {"type": "integer", "default": 5, "minimum": 1, "maximum": 20},
        "Number of jobs per page (default 5, max 20).",
    ),
    _query_param("page", {"type": "integer", "default": 1}, "Page number for pagination."),
]


def build_openapi_document(server_url: str) -> Dict[str, Any]:
    """
    Args:
        server_url: "<scheme>://<host>" of the incoming request

    Returns:
        OpenAPI 3.1.0 document as a plain dict
    """
    return {
        "openapi": "3.1.0",
        "info": {
            "title": "SportsNaukri Job API Middleware",
            "description": (
                "Optimized API middleware that fetches and filters job listings from "
                "SportsNaukri.com. Returns only essential job data for ChatGPT integration."
            ),
            "version": "v1.0.0",
        },
        "servers": [{"url": server_url}],
        "paths": {
            "/api/jobs": {
                "get": {
                    "operationId": "getJobs",
                    "summary": "Fetch optimized job listings",
                    "description": (
                        "Retrieves and filters job listings from SportsNaukri.com, returning only "
                        "essential fields (id, title, employer, location, job type, qualification, "
                        "description summary, and link)."
                    ),
                    "parameters": JOBS_PARAMETERS,
                    "responses": {
                        "200": {
                            "description": "Successful response with optimized job listings",
                            "content": {"application/json": {"schema": ENVELOPE_SCHEMA}},
                        },
                    },
                },
            },
        },
    }
