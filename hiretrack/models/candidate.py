"""Candidate record models."""
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from hiretrack.utils.clock import utcnow


class Stage(str, Enum):
    """Hiring pipeline stages, in pipeline order."""
    APPLIED = "Applied"
    SCREENING = "Screening"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    HIRED = "Hired"


STAGE_ORDER: List[Stage] = list(Stage)


class CandidateNote(BaseModel):
    """Note attached to a candidate (newest first)."""
    id: int
    content: str
    timestamp: datetime = Field(default_factory=utcnow)
    type: str = "general"


class CandidateInterview(BaseModel):
    """Interview scheduled inline from the candidate detail view.

    Independent of the calendar's Interview records.
    """
    id: int
    title: str
    start: datetime
    end: datetime
    candidate_id: int
    type: str = "interview"
    created_at: datetime = Field(default_factory=utcnow)


class CandidateModel(BaseModel):
    """Candidate model."""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    position: str = ""

    stage: Stage = Stage.APPLIED
    skills: List[str] = Field(default_factory=list)
    notes: List[CandidateNote] = Field(default_factory=list)
    interviews: List[CandidateInterview] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
