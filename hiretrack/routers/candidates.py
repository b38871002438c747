"""Candidate router."""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from hiretrack.models.activity import ActivityEvent
from hiretrack.models.candidate import CandidateModel, CandidateInterview, Stage
from hiretrack.schemas.candidate import (
    CreateCandidateRequest,
    UpdateCandidateRequest,
    UpdateStageRequest,
    AddCandidateNoteRequest,
    ScheduleInterviewRequest,
)
from hiretrack.schemas.dashboard import AvailableSlot
from hiretrack.services.candidate_service import CandidateService
from hiretrack.utils.dependencies import get_candidate_service, http_error
from hiretrack.utils.exceptions import ServiceError


router = APIRouter(prefix="/api/v1/candidates", tags=["Candidates"])


@router.get("/", response_model=List[CandidateModel])
async def list_candidates(
    q: str = "",
    positions: Optional[List[str]] = Query(None),
    stages: Optional[List[Stage]] = Query(None),
    service: CandidateService = Depends(get_candidate_service)
):
    """List candidates matching the search text, positions and stages."""
    return await service.filter(query=q, positions=positions, stages=stages)


@router.post("/", response_model=CandidateModel, status_code=status.HTTP_201_CREATED)
async def create_candidate(
    request: CreateCandidateRequest,
    service: CandidateService = Depends(get_candidate_service)
):
    """Create a candidate."""
    try:
        return await service.create(request.model_dump())
    except ServiceError as e:
        raise http_error(e)


@router.get("/slots", response_model=List[AvailableSlot])
async def available_slots(service: CandidateService = Depends(get_candidate_service)):
    """Open interview slots for the coming two weeks."""
    return await service.get_available_slots()


@router.get("/stage/{stage}", response_model=List[CandidateModel])
async def candidates_by_stage(
    stage: Stage,
    service: CandidateService = Depends(get_candidate_service)
):
    return await service.get_by_stage(stage)


@router.get("/{candidate_id}", response_model=CandidateModel)
async def get_candidate(
    candidate_id: int,
    service: CandidateService = Depends(get_candidate_service)
):
    """Get a specific candidate."""
    try:
        return await service.get_by_id(candidate_id)
    except ServiceError as e:
        raise http_error(e)


@router.put("/{candidate_id}", response_model=CandidateModel)
async def update_candidate(
    candidate_id: int,
    request: UpdateCandidateRequest,
    service: CandidateService = Depends(get_candidate_service)
):
    """Update a candidate."""
    try:
        return await service.update(candidate_id, request.model_dump(exclude_unset=True))
    except ServiceError as e:
        raise http_error(e)


@router.delete("/{candidate_id}", response_model=CandidateModel)
async def delete_candidate(
    candidate_id: int,
    service: CandidateService = Depends(get_candidate_service)
):
    """Delete a candidate and return the removed record."""
    try:
        return await service.delete(candidate_id)
    except ServiceError as e:
        raise http_error(e)


@router.patch("/{candidate_id}/stage", response_model=CandidateModel)
async def update_stage(
    candidate_id: int,
    request: UpdateStageRequest,
    service: CandidateService = Depends(get_candidate_service)
):
    """Move a candidate to another pipeline stage."""
    try:
        return await service.update_stage(candidate_id, request.stage)
    except ServiceError as e:
        raise http_error(e)


@router.post("/{candidate_id}/notes", response_model=CandidateModel)
async def add_note(
    candidate_id: int,
    request: AddCandidateNoteRequest,
    service: CandidateService = Depends(get_candidate_service)
):
    try:
        return await service.add_note(candidate_id, request.content, request.type)
    except ServiceError as e:
        raise http_error(e)


@router.post("/{candidate_id}/interviews", response_model=CandidateModel)
async def schedule_interview(
    candidate_id: int,
    request: ScheduleInterviewRequest,
    service: CandidateService = Depends(get_candidate_service)
):
    """Book an inline interview on the candidate record."""
    try:
        return await service.schedule_interview(candidate_id, request.model_dump(exclude_none=True))
    except ServiceError as e:
        raise http_error(e)


@router.get("/{candidate_id}/interviews", response_model=List[CandidateInterview])
async def scheduled_interviews(
    candidate_id: int,
    service: CandidateService = Depends(get_candidate_service)
):
    try:
        return await service.get_scheduled_interviews(candidate_id)
    except ServiceError as e:
        raise http_error(e)


@router.get("/{candidate_id}/activity", response_model=List[ActivityEvent])
async def candidate_activity(
    candidate_id: int,
    service: CandidateService = Depends(get_candidate_service)
):
    """Recorded changes to one candidate, newest first."""
    return await service.get_activity_log(candidate_id)
