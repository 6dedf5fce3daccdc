"""Request schemas for the timer endpoints"""

from typing import Optional
from pydantic import BaseModel, Field


class StopTimerRequestSchema(BaseModel):
    """
    Request schema for stopping a project timer

    Used for POST /projects/{project_id}/timer/stop. The body is optional.
    """

    committed_elapsed_ms: Optional[int] = Field(
        default=None,
        ge=0,
        description=(
            "Elapsed milliseconds as displayed by the client. When given it is "
            "added to the accumulated time instead of the server-side measurement."
        )
    )

    class Config:
        json_schema_extra = {
            "example": {
                "committed_elapsed_ms": 5400000
            }
        }
