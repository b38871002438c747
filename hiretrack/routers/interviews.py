"""Interview calendar router."""
from fastapi import APIRouter, Depends
from datetime import datetime
from typing import List, Optional

from hiretrack.models.interview import InterviewModel, InterviewStatus
from hiretrack.schemas.interview import (
    CreateInterviewRequest,
    UpdateInterviewRequest,
    UpdateStatusRequest,
    RescheduleRequest,
    AddInterviewNoteRequest,
    AddParticipantRequest,
    InterviewStatisticsResponse,
)
from hiretrack.services.interview_service import InterviewService
from hiretrack.utils.dependencies import get_interview_service, http_error
from hiretrack.utils.exceptions import InputValidationError, ServiceError

router = APIRouter(prefix="/api/v1/interviews", tags=["Interviews"])


@router.get("/", response_model=List[InterviewModel])
async def list_interviews(
    q: str = "",
    status: Optional[str] = None,
    service: InterviewService = Depends(get_interview_service)
):
    """Calendar listing filtered by title/candidate text and status ("all" for any)."""
    if status and status != "all" and status not in {s.value for s in InterviewStatus}:
        raise http_error(InputValidationError(f"Unknown status: {status}"))
    return await service.filter_calendar(query=q, status=status)


@router.post("/", response_model=InterviewModel, status_code=201)
async def create_interview(
    request: CreateInterviewRequest,
    service: InterviewService = Depends(get_interview_service)
):
    """Put a new interview on the calendar."""
    try:
        return await service.create(request.model_dump(exclude_none=True))
    except ServiceError as e:
        raise http_error(e)


@router.get("/search", response_model=List[InterviewModel])
async def search_interviews(q: str = "", service: InterviewService = Depends(get_interview_service)):
    return await service.search(q)


@router.get("/upcoming", response_model=List[InterviewModel])
async def upcoming_interviews(service: InterviewService = Depends(get_interview_service)):
    """Scheduled interviews in the next seven days."""
    return await service.get_upcoming()


@router.get("/statistics", response_model=InterviewStatisticsResponse)
async def interview_statistics(service: InterviewService = Depends(get_interview_service)):
    return await service.get_statistics()


@router.get("/range", response_model=List[InterviewModel])
async def interviews_in_range(
    start: datetime,
    end: datetime,
    service: InterviewService = Depends(get_interview_service)
):
    """Interviews starting between ``start`` and ``end`` inclusive."""
    return await service.get_by_date_range(start, end)


@router.get("/status/{interview_status}", response_model=List[InterviewModel])
async def interviews_by_status(
    interview_status: InterviewStatus,
    service: InterviewService = Depends(get_interview_service)
):
    return await service.get_by_status(interview_status)


@router.get("/candidate/{candidate_id}", response_model=List[InterviewModel])
async def candidate_interviews(
    candidate_id: int,
    service: InterviewService = Depends(get_interview_service)
):
    """Get all calendar interviews referencing a candidate."""
    return await service.get_by_candidate_id(candidate_id)


@router.get("/{interview_id}", response_model=InterviewModel)
async def get_interview(
    interview_id: int,
    service: InterviewService = Depends(get_interview_service)
):
    try:
        return await service.get_by_id(interview_id)
    except ServiceError as e:
        raise http_error(e)


@router.put("/{interview_id}", response_model=InterviewModel)
async def update_interview(
    interview_id: int,
    request: UpdateInterviewRequest,
    service: InterviewService = Depends(get_interview_service)
):
    try:
        return await service.update(interview_id, request.model_dump(exclude_unset=True))
    except ServiceError as e:
        raise http_error(e)


@router.delete("/{interview_id}", response_model=InterviewModel)
async def delete_interview(
    interview_id: int,
    service: InterviewService = Depends(get_interview_service)
):
    try:
        return await service.delete(interview_id)
    except ServiceError as e:
        raise http_error(e)


@router.patch("/{interview_id}/status", response_model=InterviewModel)
async def update_status(
    interview_id: int,
    request: UpdateStatusRequest,
    service: InterviewService = Depends(get_interview_service)
):
    try:
        return await service.update_status(interview_id, request.status)
    except ServiceError as e:
        raise http_error(e)


@router.post("/{interview_id}/reschedule", response_model=InterviewModel)
async def reschedule_interview(
    interview_id: int,
    request: RescheduleRequest,
    service: InterviewService = Depends(get_interview_service)
):
    """Move an interview; the end time follows from the duration."""
    try:
        return await service.reschedule(interview_id, request.start_time, request.duration_minutes)
    except ServiceError as e:
        raise http_error(e)


@router.post("/{interview_id}/notes", response_model=InterviewModel)
async def add_note(
    interview_id: int,
    request: AddInterviewNoteRequest,
    service: InterviewService = Depends(get_interview_service)
):
    try:
        return await service.add_note(interview_id, request.content, request.author, request.timestamp)
    except ServiceError as e:
        raise http_error(e)


@router.post("/{interview_id}/participants", response_model=InterviewModel)
async def add_participant(
    interview_id: int,
    request: AddParticipantRequest,
    service: InterviewService = Depends(get_interview_service)
):
    try:
        return await service.add_participant(
            interview_id, request.email, name=request.name, role=request.role
        )
    except ServiceError as e:
        raise http_error(e)


@router.delete("/{interview_id}/participants/{participant_id}", response_model=InterviewModel)
async def remove_participant(
    interview_id: int,
    participant_id: int,
    service: InterviewService = Depends(get_interview_service)
):
    try:
        return await service.remove_participant(interview_id, participant_id)
    except ServiceError as e:
        raise http_error(e)
