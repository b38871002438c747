"""Dashboard schemas."""
from pydantic import BaseModel
from typing import Dict, List
from datetime import datetime

from hiretrack.models.candidate import Stage


class DashboardMetrics(BaseModel):
    total: int
    by_stage: Dict[str, int]
    active_positions: int
    recent_candidates: int


class UpcomingTask(BaseModel):
    id: str
    type: str
    title: str
    candidate: str
    position: str
    priority: str
    due_date: datetime


class ActivityItem(BaseModel):
    id: int
    type: str
    title: str
    candidate: str
    position: str
    stage: Stage
    timestamp: datetime


class DashboardResponse(BaseModel):
    metrics: DashboardMetrics
    upcoming_tasks: List[UpcomingTask]
    recent_activity: List[ActivityItem]


class AvailableSlot(BaseModel):
    id: str
    title: str
    start: datetime
    end: datetime
    type: str
