"""Service-layer exceptions."""
from typing import Any, Optional


class ServiceError(Exception):
    """Base class for errors raised by lifecycle and query operations."""


class NotFoundError(ServiceError):
    """An operation referenced an id absent from the target store."""

    def __init__(self, entity: str, entity_id: Any = None, message: Optional[str] = None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message or f"{entity} not found")


class ParticipantNotFoundError(NotFoundError):
    """No participant on the interview matches the given id."""

    def __init__(self, participant_id: Any):
        super().__init__("Participant", participant_id)


class DuplicateParticipantError(ServiceError):
    """A participant with the same email is already on the interview."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Participant already added to this interview")


class InputValidationError(ServiceError):
    """Required input was empty or otherwise rejected before the store call."""


class StageTransitionError(InputValidationError):
    """Raised only when forward-only stage transitions are enforced."""
