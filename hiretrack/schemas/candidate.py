"""Candidate schemas."""
from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional
from datetime import datetime

from hiretrack.models.candidate import Stage


class CreateCandidateRequest(BaseModel):
    """Request to create a candidate."""
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    position: str = ""
    stage: Stage = Stage.APPLIED
    skills: List[str] = Field(default_factory=list)


class UpdateCandidateRequest(BaseModel):
    """Request to update a candidate."""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    position: Optional[str] = None
    stage: Optional[Stage] = None
    skills: Optional[List[str]] = None


class UpdateStageRequest(BaseModel):
    stage: Stage


class AddCandidateNoteRequest(BaseModel):
    content: str
    type: str = "general"


class ScheduleInterviewRequest(BaseModel):
    """Inline interview booked from the candidate detail view."""
    title: Optional[str] = None
    start: datetime
    end: datetime
    type: str = "interview"
