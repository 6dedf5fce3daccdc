"""Time tracking arithmetic

Pure functions over Project timer state. Elapsed time is always derived
from the persisted timer_start_time and a caller-supplied ``now``; no
clock runs inside the service.

Wall-clock timestamps are used as-is: when ``now`` precedes the stored
start (clock rollback) the elapsed value is negative and is not clamped.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from src.domain.project import Project

MILLISECOND = timedelta(milliseconds=1)


def to_utc_naive(value: datetime) -> datetime:
    """Normalize a timestamp to naive UTC, the storage representation."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def elapsed_ms(start: datetime, end: datetime) -> int:
    """Whole milliseconds from ``start`` to ``end`` (negative if end < start)."""
    return (to_utc_naive(end) - to_utc_naive(start)) // MILLISECOND


def is_running(project: Project) -> bool:
    return project.timer_start_time is not None


def current_elapsed_ms(project: Project, now: datetime) -> int:
    """Length of the running session, 0 when no timer is running. Never persisted."""
    if project.timer_start_time is None:
        return 0
    return elapsed_ms(project.timer_start_time, now)


def start_session(project: Project, now: datetime) -> None:
    project.timer_start_time = to_utc_naive(now)


def close_session(project: Project, now: datetime, committed_ms: Optional[int] = None) -> int:
    """
    Close the running session and fold it into total_time_spent

    Args:
        project: Project with a running timer
        now: Stop timestamp
        committed_ms: Duration to accumulate; defaults to now - timer_start_time

    Returns:
        The number of milliseconds added to total_time_spent

    Raises:
        ValueError: If the project has no running timer
    """
    if project.timer_start_time is None:
        raise ValueError(f"Project {project.id} has no running timer")

    if committed_ms is None:
        committed_ms = elapsed_ms(project.timer_start_time, now)

    project.total_time_spent = (project.total_time_spent or 0) + committed_ms
    project.timer_start_time = None
    return committed_ms
