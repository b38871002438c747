"""Service for calendar interviews: scheduling, notes and participants."""
import logging
from typing import Any, Dict, List, Optional
from datetime import datetime, timedelta

from pydantic import ValidationError

from hiretrack.database import Database, InMemoryDatabase
from hiretrack.models.interview import (
    InterviewModel,
    InterviewNote,
    InterviewStatus,
    Participant,
)
from hiretrack.services import analytics, filters
from hiretrack.utils.clock import ensure_utc, simulate_latency, touch, utcnow
from hiretrack.utils.exceptions import (
    DuplicateParticipantError,
    InputValidationError,
    NotFoundError,
    ParticipantNotFoundError,
)


logger = logging.getLogger(__name__)

# Notes and participants change only through their own operations.
PROTECTED_FIELDS = {"id", "created_at", "updated_at", "notes", "participants"}


class InterviewService:
    def __init__(self, db: Optional[InMemoryDatabase] = None):
        self._db = db

    @property
    def db(self) -> InMemoryDatabase:
        return self._db if self._db is not None else Database.get_database()

    def _models(self) -> List[InterviewModel]:
        return [InterviewModel.model_validate(doc) for doc in self.db.interviews.all()]

    def _load(self, interview_id: int) -> InterviewModel:
        return InterviewModel.model_validate(self.db.interviews.get(int(interview_id)))

    def _save(self, interview: InterviewModel) -> InterviewModel:
        stored = self.db.interviews.replace(interview.id, interview.model_dump(mode="json"))
        return InterviewModel.model_validate(stored)

    async def get_all(self) -> List[InterviewModel]:
        await simulate_latency(300, 300)
        return self._models()

    async def get_by_id(self, interview_id: int) -> InterviewModel:
        await simulate_latency(200, 200)
        return self._load(interview_id)

    async def create(self, interview_data: Dict[str, Any]) -> InterviewModel:
        """Put a new interview on the calendar."""
        await simulate_latency(400, 400)
        now = utcnow()
        data = {
            k: v for k, v in interview_data.items()
            if v is not None and k not in ("id", "notes", "participants", "created_at", "updated_at")
        }
        try:
            interview = InterviewModel(
                **data,
                id=self.db.interviews.next_id(),
                notes=[],
                participants=[],
                created_at=now,
                updated_at=now,
            )
        except ValidationError as e:
            raise InputValidationError(str(e)) from e

        stored = InterviewModel.model_validate(self.db.interviews.insert(interview.model_dump(mode="json")))
        logger.info("Created interview %s (%s)", stored.id, stored.title)
        return stored

    async def update(self, interview_id: int, update_data: Dict[str, Any]) -> InterviewModel:
        await simulate_latency(300, 300)
        return self._apply_update(interview_id, update_data)

    def _apply_update(self, interview_id: int, update_data: Dict[str, Any]) -> InterviewModel:
        existing = self._load(interview_id)
        changes = {k: v for k, v in update_data.items() if k not in PROTECTED_FIELDS}
        merged = {**existing.model_dump(), **changes, "id": existing.id, "updated_at": touch(existing.updated_at)}
        try:
            interview = InterviewModel.model_validate(merged)
        except ValidationError as e:
            raise InputValidationError(str(e)) from e

        saved = self._save(interview)
        logger.info("Updated interview %s: %s", saved.id, ", ".join(sorted(changes)) or "no fields")
        return saved

    async def delete(self, interview_id: int) -> InterviewModel:
        await simulate_latency(200, 200)
        removed = InterviewModel.model_validate(self.db.interviews.remove(int(interview_id)))
        logger.info("Deleted interview %s", removed.id)
        return removed

    async def update_status(self, interview_id: int, status: InterviewStatus) -> InterviewModel:
        await simulate_latency(200, 200)
        return self._apply_update(interview_id, {"status": status})

    async def reschedule(self, interview_id: int, new_start: datetime, duration_minutes: int = 60) -> InterviewModel:
        """Move the interview to ``new_start`` and mark it rescheduled."""
        await simulate_latency(300, 300)
        start = ensure_utc(new_start)
        return self._apply_update(interview_id, {
            "start_time": start,
            "end_time": start + timedelta(minutes=duration_minutes),
            "status": InterviewStatus.RESCHEDULED,
        })

    async def add_note(
        self,
        interview_id: int,
        content: str,
        author: Optional[str] = None,
        timestamp: Optional[datetime] = None,
    ) -> InterviewModel:
        """Append a note to the end of the interview's notes."""
        if not content or not content.strip():
            raise InputValidationError("Note content is required")
        await simulate_latency(300, 300)

        interview = self._load(interview_id)
        note = InterviewNote(
            id=self.db.child_ids.next(),
            content=content,
            timestamp=timestamp or utcnow(),
            author=author or "Current User",
        )
        interview.notes.append(note)
        interview.updated_at = touch(interview.updated_at)

        saved = self._save(interview)
        logger.info("Added note %s to interview %s", note.id, saved.id)
        return saved

    async def add_participant(
        self,
        interview_id: int,
        email: str,
        name: Optional[str] = None,
        role: Optional[str] = None,
        added_at: Optional[datetime] = None,
    ) -> InterviewModel:
        """Add a participant; emails must be unique per interview (exact match)."""
        if not email or not email.strip():
            raise InputValidationError("Participant email is required")
        await simulate_latency(300, 300)

        interview = self._load(interview_id)
        if interview.participants is None:
            interview.participants = []

        if any(p.email == email for p in interview.participants):
            logger.warning("Participant %s already on interview %s", email, interview.id)
            raise DuplicateParticipantError(email)

        participant = Participant(
            id=self.db.child_ids.next(),
            name=name or email.split("@")[0],
            email=email,
            role=role or "Interviewer",
            added_at=added_at or utcnow(),
        )
        interview.participants.append(participant)
        interview.updated_at = touch(interview.updated_at)

        saved = self._save(interview)
        logger.info("Added participant %s to interview %s", participant.id, saved.id)
        return saved

    async def remove_participant(self, interview_id: int, participant_id: int) -> InterviewModel:
        await simulate_latency(200, 200)
        interview = self._load(interview_id)
        if interview.participants is None:
            raise NotFoundError("Interview", interview.id, "No participants found")

        remaining = [p for p in interview.participants if p.id != int(participant_id)]
        if len(remaining) == len(interview.participants):
            logger.warning("Participant %s not on interview %s", participant_id, interview.id)
            raise ParticipantNotFoundError(participant_id)

        interview.participants = remaining
        interview.updated_at = touch(interview.updated_at)

        saved = self._save(interview)
        logger.info("Removed participant %s from interview %s", participant_id, saved.id)
        return saved

    async def get_by_candidate_id(self, candidate_id: int) -> List[InterviewModel]:
        await simulate_latency(200, 200)
        return [i for i in self._models() if i.candidate_id == int(candidate_id)]

    async def get_by_date_range(self, start: datetime, end: datetime) -> List[InterviewModel]:
        await simulate_latency(200, 200)
        return filters.filter_by_date_range(self._models(), start, end)

    async def get_by_status(self, status: InterviewStatus) -> List[InterviewModel]:
        await simulate_latency(200, 200)
        return filters.filter_by_status(self._models(), status)

    async def search(self, query: str) -> List[InterviewModel]:
        await simulate_latency(300, 300)
        return filters.search_interviews(self._models(), query)

    async def filter_calendar(self, query: str = "", status: Optional[str] = None) -> List[InterviewModel]:
        await simulate_latency(300, 300)
        return filters.filter_calendar(self._models(), query, status)

    async def get_upcoming(self, now: Optional[datetime] = None) -> List[InterviewModel]:
        await simulate_latency(200, 200)
        return analytics.upcoming_interviews(self._models(), now=now)

    async def get_statistics(self) -> Dict:
        await simulate_latency(200, 200)
        return analytics.interview_statistics(self._models())
