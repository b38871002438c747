"""Interview calendar models."""
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from hiretrack.utils.clock import utcnow


class InterviewStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    RESCHEDULED = "rescheduled"


class InterviewNote(BaseModel):
    """Note on an interview (appended, oldest first)."""
    id: int
    content: str
    timestamp: datetime = Field(default_factory=utcnow)
    author: str = "Current User"


class Participant(BaseModel):
    """Person attending an interview. Email is unique per interview."""
    id: int
    name: str
    email: str
    role: str = "Interviewer"
    added_at: datetime = Field(default_factory=utcnow)


class InterviewModel(BaseModel):
    """Calendar interview."""

    id: int
    title: str = "New Interview"
    candidate_name: str = "Unknown Candidate"
    candidate_id: Optional[int] = None   # not checked against candidates
    start_time: datetime
    end_time: datetime
    status: InterviewStatus = InterviewStatus.SCHEDULED
    type: str = "technical"
    location: str = "Virtual"

    notes: List[InterviewNote] = Field(default_factory=list)
    participants: Optional[List[Participant]] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
