"""
Helpers over a resolved view model's top performers and breakdowns.

- filter_jobs    : case-insensitive search across job title and location
- sort_jobs      : by clicks (default desc) or location (default asc)
- rank_breakdown : descending top-N with an optional "Other" bucket

Inputs are never mutated; new lists/maps are returned.
"""

from typing import Dict, List, Optional, Sequence

from ..analytics.schemas import TopPerformer
from ..errors import ValidationFailed

SORT_KEYS = ("clicks", "location")
DEFAULT_DIRECTIONS = {"clicks": "desc", "location": "asc"}

LOCATION_TOP_N = 10
JOB_TITLE_TOP_N = 8
OTHER_LABEL = "Other"


def filter_jobs(jobs: Sequence[TopPerformer], search: Optional[str] = None) -> List[TopPerformer]:
    if not search or not search.strip():
        return list(jobs)
    needle = search.strip().lower()
    return [j for j in jobs if needle in j.job_title.lower() or needle in j.location.lower()]


def sort_jobs(
    jobs: Sequence[TopPerformer],
    key: str = "clicks",
    direction: Optional[str] = None,
) -> List[TopPerformer]:
    """
    Sort jobs for the top-jobs table.

    Raises:
        ValidationFailed: Unknown key or direction.
    """
    if key not in SORT_KEYS:
        raise ValidationFailed(f"Unknown sort key {key!r}")
    direction = direction or DEFAULT_DIRECTIONS[key]
    if direction not in ("asc", "desc"):
        raise ValidationFailed(f"Unknown sort direction {direction!r}")

    if key == "clicks":
        sort_key = lambda j: j.clicks  # noqa: E731
    else:
        sort_key = lambda j: j.location.lower()  # noqa: E731
    # sorted() is stable, so ties keep upstream order
    return sorted(jobs, key=sort_key, reverse=direction == "desc")


def rank_breakdown(
    breakdown: Dict[str, int],
    top_n: int,
    other_label: Optional[str] = OTHER_LABEL,
) -> Dict[str, int]:
    """
    Keep the `top_n` largest entries; fold the rest into `other_label` when
    it is set and the remainder is non-zero.

    Example:
        >>> rank_breakdown({"a": 1, "b": 5, "c": 3}, top_n=2)
        {'b': 5, 'c': 3, 'Other': 1}
    """
    ordered = sorted(breakdown.items(), key=lambda item: item[1], reverse=True)
    ranked = dict(ordered[:top_n])
    rest = sum(value for _, value in ordered[top_n:])
    if other_label and rest > 0:
        ranked[other_label] = ranked.get(other_label, 0) + rest
    return ranked
