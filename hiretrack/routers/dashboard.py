"""Dashboard router."""
from fastapi import APIRouter, Depends
from typing import List

from hiretrack.models.activity import ActivityEvent
from hiretrack.schemas.dashboard import DashboardResponse
from hiretrack.services import analytics
from hiretrack.services.candidate_service import CandidateService
from hiretrack.services.position_service import PositionService
from hiretrack.utils.dependencies import get_candidate_service, get_position_service


router = APIRouter(prefix="/api/v1/dashboard", tags=["Dashboard"])


@router.get("/", response_model=DashboardResponse)
async def get_dashboard(
    candidates: CandidateService = Depends(get_candidate_service),
    positions: PositionService = Depends(get_position_service)
):
    """Headline metrics, inferred tasks and the recent activity feed."""
    all_candidates = await candidates.get_all()
    all_positions = await positions.get_all()
    return DashboardResponse(
        metrics=analytics.dashboard_metrics(all_candidates, all_positions),
        upcoming_tasks=analytics.upcoming_tasks(all_candidates),
        recent_activity=analytics.recent_activity(all_candidates),
    )


@router.get("/events", response_model=List[ActivityEvent])
async def activity_events(candidates: CandidateService = Depends(get_candidate_service)):
    """Full candidate event log, newest first."""
    return await candidates.get_activity_log()
