"""Candidate lifecycle operations."""
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from hiretrack.config import settings
from hiretrack.database import Database, InMemoryDatabase
from hiretrack.models.activity import ActivityEvent
from hiretrack.models.candidate import (
    CandidateModel,
    CandidateNote,
    CandidateInterview,
    Stage,
)
from hiretrack.services import analytics, filters
from hiretrack.utils.clock import simulate_latency, touch, utcnow
from hiretrack.utils.exceptions import InputValidationError
from hiretrack.utils.stage_rules import check_forward_transition


logger = logging.getLogger(__name__)

# Notes and inline interviews change only through add_note and schedule_interview.
PROTECTED_FIELDS = {"id", "created_at", "updated_at", "notes", "interviews"}


class CandidateService:
    def __init__(self, db: Optional[InMemoryDatabase] = None, enforce_forward_stages: Optional[bool] = None):
        self._db = db
        self.enforce_forward_stages = (
            settings.enforce_forward_stages if enforce_forward_stages is None else enforce_forward_stages
        )

    @property
    def db(self) -> InMemoryDatabase:
        return self._db if self._db is not None else Database.get_database()

    def _models(self) -> List[CandidateModel]:
        return [CandidateModel.model_validate(doc) for doc in self.db.candidates.all()]

    def _load(self, candidate_id: int) -> CandidateModel:
        return CandidateModel.model_validate(self.db.candidates.get(int(candidate_id)))

    def _save(self, candidate: CandidateModel) -> CandidateModel:
        stored = self.db.candidates.replace(candidate.id, candidate.model_dump(mode="json"))
        return CandidateModel.model_validate(stored)

    def _record(self, event_type: str, candidate: CandidateModel, before: Any = None, after: Any = None):
        event = ActivityEvent(
            id=len(self.db.activity) + 1,
            type=event_type,
            candidate_id=candidate.id,
            candidate_name=candidate.name,
            before=before,
            after=after,
        )
        self.db.activity.append(event.model_dump(mode="json"))

    # Entity store

    async def get_all(self) -> List[CandidateModel]:
        await simulate_latency(300, 300)
        return self._models()

    async def get_by_id(self, candidate_id: int) -> CandidateModel:
        await simulate_latency(200, 200)
        return self._load(candidate_id)

    async def create(self, payload: Dict[str, Any]) -> CandidateModel:
        """Create a candidate with the next free id."""
        await simulate_latency(400, 400)
        now = utcnow()
        data = {k: v for k, v in payload.items() if k not in ("id", "created_at", "updated_at")}
        try:
            candidate = CandidateModel(
                **data,
                id=self.db.candidates.next_id(),
                created_at=now,
                updated_at=now,
            )
        except ValidationError as e:
            raise InputValidationError(str(e)) from e

        stored = CandidateModel.model_validate(self.db.candidates.insert(candidate.model_dump(mode="json")))
        self._record("created", stored, after=stored.stage.value)
        logger.info("Created candidate %s (%s)", stored.id, stored.name)
        return stored

    async def update(self, candidate_id: int, updates: Dict[str, Any]) -> CandidateModel:
        """Merge ``updates`` onto the candidate; id is kept, updated_at refreshed."""
        await simulate_latency(300, 300)
        return self._apply_update(candidate_id, updates)

    def _apply_update(self, candidate_id: int, updates: Dict[str, Any]) -> CandidateModel:
        existing = self._load(candidate_id)
        changes = {k: v for k, v in updates.items() if k not in PROTECTED_FIELDS}

        if "stage" in changes and self.enforce_forward_stages:
            try:
                new_stage = Stage(changes["stage"])
            except ValueError as e:
                raise InputValidationError(f"Unknown stage: {changes['stage']}") from e
            check_forward_transition(existing.stage, new_stage)

        merged = {**existing.model_dump(), **changes, "id": existing.id, "updated_at": touch(existing.updated_at)}
        try:
            candidate = CandidateModel.model_validate(merged)
        except ValidationError as e:
            raise InputValidationError(str(e)) from e

        saved = self._save(candidate)
        if saved.stage != existing.stage:
            self._record("stage_changed", saved, before=existing.stage.value, after=saved.stage.value)
        else:
            self._record("updated", saved, after=sorted(changes))
        logger.info("Updated candidate %s: %s", saved.id, ", ".join(sorted(changes)) or "no fields")
        return saved

    async def delete(self, candidate_id: int) -> CandidateModel:
        """Remove the candidate. Its calendar interviews are left alone."""
        await simulate_latency(250, 250)
        removed = CandidateModel.model_validate(self.db.candidates.remove(int(candidate_id)))
        self._record("deleted", removed, before=removed.stage.value)
        logger.info("Deleted candidate %s", removed.id)
        return removed

    # Lifecycle

    async def update_stage(self, candidate_id: int, new_stage: Stage) -> CandidateModel:
        """Move a candidate to any stage, backwards included unless enforced."""
        await simulate_latency(250, 250)
        try:
            stage = Stage(new_stage)
        except ValueError as e:
            raise InputValidationError(f"Unknown stage: {new_stage}") from e
        return self._apply_update(candidate_id, {"stage": stage})

    async def add_note(self, candidate_id: int, content: str, note_type: str = "general") -> CandidateModel:
        """Put a note at the front of the candidate's notes."""
        if not content or not content.strip():
            raise InputValidationError("Note content is required")
        await simulate_latency(200, 200)

        candidate = self._load(candidate_id)
        note = CandidateNote(
            id=self.db.child_ids.next(),
            content=content,
            timestamp=utcnow(),
            type=note_type or "general",
        )
        candidate.notes.insert(0, note)
        candidate.updated_at = touch(candidate.updated_at)

        saved = self._save(candidate)
        self._record("note_added", saved, after=note.id)
        logger.info("Added note %s to candidate %s", note.id, saved.id)
        return saved

    async def schedule_interview(self, candidate_id: int, interview_data: Dict[str, Any]) -> CandidateModel:
        """Append an inline interview to the candidate; the calendar is not touched."""
        await simulate_latency(300, 300)
        candidate = self._load(candidate_id)
        data = {k: v for k, v in interview_data.items() if k not in ("id", "created_at")}
        data.setdefault("title", f"Interview with {candidate.name}")
        data.setdefault("candidate_id", candidate.id)
        try:
            interview = CandidateInterview(**data, id=self.db.child_ids.next(), created_at=utcnow())
        except ValidationError as e:
            raise InputValidationError(str(e)) from e

        candidate.interviews.append(interview)
        candidate.updated_at = touch(candidate.updated_at)

        saved = self._save(candidate)
        self._record("interview_scheduled", saved, after=interview.id)
        logger.info("Scheduled inline interview %s for candidate %s", interview.id, saved.id)
        return saved

    async def get_scheduled_interviews(self, candidate_id: int) -> List[CandidateInterview]:
        await simulate_latency(200, 200)
        return self._load(candidate_id).interviews

    async def get_available_slots(self, today: Optional[date] = None) -> List[Dict]:
        await simulate_latency(200, 200)
        return analytics.available_slots(today=today)

    # Queries

    async def get_by_stage(self, stage: Stage) -> List[CandidateModel]:
        await simulate_latency(200, 200)
        return filters.filter_by_stage(self._models(), [stage])

    async def search(self, query: str) -> List[CandidateModel]:
        await simulate_latency(300, 300)
        return filters.search_candidates(self._models(), query)

    async def filter(
        self,
        query: str = "",
        positions: Optional[Iterable[str]] = None,
        stages: Optional[Iterable[Stage]] = None,
    ) -> List[CandidateModel]:
        await simulate_latency(300, 300)
        return filters.filter_candidates(self._models(), query, positions, stages)

    async def get_activity_log(self, candidate_id: Optional[int] = None) -> List[ActivityEvent]:
        """Recorded mutations, newest first."""
        await simulate_latency(200, 200)
        events = [ActivityEvent.model_validate(e) for e in self.db.activity]
        if candidate_id is not None:
            events = [e for e in events if e.candidate_id == int(candidate_id)]
        return list(reversed(events))
