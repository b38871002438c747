"""Pipeline board schemas."""
from pydantic import BaseModel
from typing import List

from hiretrack.models.candidate import CandidateModel, Stage


class StageMetric(BaseModel):
    stage: Stage
    count: int
    percentage: int


class StageColumn(BaseModel):
    """One kanban column."""
    stage: Stage
    candidates: List[CandidateModel]


class PipelineResponse(BaseModel):
    """Response schema for the pipeline board."""
    total: int
    columns: List[StageColumn]
    metrics: List[StageMetric]
