"""Position record model."""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from hiretrack.utils.clock import utcnow


class PositionModel(BaseModel):
    """Open (or closed) role candidates apply to."""

    id: int
    title: str
    department: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    status: str = "Active"           # "Active", "Closed"
    candidate_count: int = 0         # informational, not kept in sync
    created_at: datetime = Field(default_factory=utcnow)
