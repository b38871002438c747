"""Service dependencies and error translation for routes."""
from fastapi import Depends, HTTPException, status

from hiretrack.database import InMemoryDatabase, get_db
from hiretrack.services.candidate_service import CandidateService
from hiretrack.services.interview_service import InterviewService
from hiretrack.services.position_service import PositionService
from hiretrack.utils.exceptions import (
    DuplicateParticipantError,
    InputValidationError,
    NotFoundError,
    ServiceError,
)


async def get_candidate_service(db: InMemoryDatabase = Depends(get_db)) -> CandidateService:
    return CandidateService(db)


async def get_position_service(db: InMemoryDatabase = Depends(get_db)) -> PositionService:
    return PositionService(db)


async def get_interview_service(db: InMemoryDatabase = Depends(get_db)) -> InterviewService:
    return InterviewService(db)


def http_error(error: ServiceError) -> HTTPException:
    """Map a service error onto the matching HTTP status."""
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, DuplicateParticipantError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, InputValidationError):
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(error))
