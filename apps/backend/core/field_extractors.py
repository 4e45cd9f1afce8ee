"""
Field extraction utilities for WordPress job metadata.

The `metas` bag on each upstream record is loosely typed. Taxonomy-style
fields (location, job type, category) arrive as mappings of term id to
display name, e.g. {"412": "Mumbai", "413": "Delhi"}; salary arrives as two
free-text strings. These helpers reduce them to display strings.
"""
from typing import Any, Mapping, Optional

NOT_SPECIFIED = "Not specified"


def _is_scalar(value: Any) -> bool:
    """Display-worthy leaf values: strings and numbers, not bools or containers."""
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def extract_joined_values(obj: Any) -> str:
    """
    Join the truthy values of a term mapping with ", ".

    Args:
        obj: Mapping of term id -> display name. WordPress serialises an
            empty mapping as [], so lists are accepted as well.

    Returns:
        Joined display names in the mapping's own key order, or
        "Not specified" when obj is not a collection or has no truthy values

    Examples:
        {"a": "Mumbai", "b": "", "c": "Delhi"} -> "Mumbai, Delhi"
        {} -> "Not specified"
    """
    if isinstance(obj, Mapping):
        values = obj.values()
    elif isinstance(obj, list):
        values = obj
    else:
        return NOT_SPECIFIED

    names = [str(value) for value in values if value and _is_scalar(value)]
    return ", ".join(names) if names else NOT_SPECIFIED


def extract_location(obj: Any) -> str:
    return extract_joined_values(obj)


def extract_job_type(obj: Any) -> str:
    return extract_joined_values(obj)


def extract_category(obj: Any) -> str:
    return extract_joined_values(obj)


def _clean_salary_value(value: Any) -> Optional[str]:
    if not _is_scalar(value):
        return None
    cleaned = str(value).strip()
    return cleaned or None


def format_salary(min_salary: Any, max_salary: Any) -> str:
    """
    Format a salary range for display.

    Examples:
        ("50000", "80000") -> "50000 - 80000"
        ("50000", "") -> "50000"
        ("", "") -> "Not specified"
    """
    clean_min = _clean_salary_value(min_salary)
    clean_max = _clean_salary_value(max_salary)

    if clean_min and clean_max:
        return f"{clean_min} - {clean_max}"

    return clean_min or clean_max or NOT_SPECIFIED
