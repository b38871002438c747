"""Activity event log entries."""
from pydantic import BaseModel, Field
from typing import Any, Optional
from datetime import datetime

from hiretrack.utils.clock import utcnow


class ActivityEvent(BaseModel):
    """Immutable record of one candidate mutation."""
    id: int
    type: str                        # "created", "stage_changed", "updated", "note_added", ...
    candidate_id: int
    candidate_name: str
    before: Optional[Any] = None
    after: Optional[Any] = None
    timestamp: datetime = Field(default_factory=utcnow)
