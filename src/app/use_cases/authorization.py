"""Ownership checks shared by use cases

A record that does not exist and a record owned by another user yield
the same NOT_FOUND error, so callers cannot discover other users' data.
"""

from typing import Optional, TypeVar
from libs.result import Result, Return, Error

T = TypeVar("T")


def not_found(entity: str) -> Error:
    return Error(
        code=f"{entity.upper()}_NOT_FOUND",
        message=f"{entity.capitalize()} not found",
    )


def authorize(record: Optional[T], user_id: str, entity: str) -> Result[T]:
    """
    Check that a record exists and belongs to the calling user

    Args:
        record: Loaded record or None
        user_id: Calling user
        entity: Entity name used in the error code (e.g. "project")

    Returns:
        Result with the record, or <ENTITY>_NOT_FOUND
    """
    if record is None or getattr(record, "user_id", None) != user_id:
        return Return.err(not_found(entity))
    return Return.ok(record)


def validation_error(message: str, reason: Optional[str] = None) -> Error:
    return Error(code="VALIDATION_ERROR", message=message, reason=reason)
