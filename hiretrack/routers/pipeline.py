"""Pipeline board router."""
from fastapi import APIRouter, Depends

from hiretrack.schemas.pipeline import PipelineResponse
from hiretrack.services import analytics
from hiretrack.services.candidate_service import CandidateService
from hiretrack.utils.dependencies import get_candidate_service


router = APIRouter(prefix="/api/v1/pipeline", tags=["Pipeline"])


@router.get("/", response_model=PipelineResponse)
async def get_pipeline(service: CandidateService = Depends(get_candidate_service)):
    """Candidates grouped by stage, with per-stage counts and shares."""
    candidates = await service.get_all()
    return PipelineResponse(
        total=len(candidates),
        columns=analytics.pipeline_board(candidates),
        metrics=analytics.stage_metrics(candidates),
    )
