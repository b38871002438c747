from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from hiretrack.models.interview import InterviewStatus


class CreateInterviewRequest(BaseModel):
    title: Optional[str] = None
    candidate_name: Optional[str] = None
    candidate_id: Optional[int] = None
    start_time: datetime
    end_time: datetime
    status: Optional[InterviewStatus] = None
    type: Optional[str] = None
    location: Optional[str] = None


class UpdateInterviewRequest(BaseModel):
    title: Optional[str] = None
    candidate_name: Optional[str] = None
    candidate_id: Optional[int] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    status: Optional[InterviewStatus] = None
    type: Optional[str] = None
    location: Optional[str] = None


class UpdateStatusRequest(BaseModel):
    status: InterviewStatus


class RescheduleRequest(BaseModel):
    start_time: datetime
    duration_minutes: int = Field(60, gt=0)


class AddInterviewNoteRequest(BaseModel):
    content: str
    author: Optional[str] = None
    timestamp: Optional[datetime] = None


class AddParticipantRequest(BaseModel):
    email: str
    name: Optional[str] = None
    role: Optional[str] = None


class InterviewStatisticsResponse(BaseModel):
    total: int
    scheduled: int
    completed: int
    cancelled: int
    rescheduled: int
    completion_rate: int
