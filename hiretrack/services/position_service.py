"""Position CRUD."""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from hiretrack.database import Database, InMemoryDatabase
from hiretrack.models.position import PositionModel
from hiretrack.utils.clock import simulate_latency, utcnow
from hiretrack.utils.exceptions import InputValidationError


logger = logging.getLogger(__name__)


class PositionService:
    def __init__(self, db: Optional[InMemoryDatabase] = None):
        self._db = db

    @property
    def db(self) -> InMemoryDatabase:
        return self._db if self._db is not None else Database.get_database()

    async def get_all(self) -> List[PositionModel]:
        await simulate_latency(250, 250)
        return [PositionModel.model_validate(doc) for doc in self.db.positions.all()]

    async def get_by_id(self, position_id: int) -> PositionModel:
        await simulate_latency(200, 200)
        return PositionModel.model_validate(self.db.positions.get(int(position_id)))

    async def create(self, payload: Dict[str, Any]) -> PositionModel:
        """Open a position; the candidate count always starts at zero."""
        await simulate_latency(350, 350)
        data = {k: v for k, v in payload.items() if k not in ("id", "candidate_count", "created_at")}
        try:
            position = PositionModel(
                **data,
                id=self.db.positions.next_id(),
                candidate_count=0,
                created_at=utcnow(),
            )
        except ValidationError as e:
            raise InputValidationError(str(e)) from e

        stored = PositionModel.model_validate(self.db.positions.insert(position.model_dump(mode="json")))
        logger.info("Created position %s (%s)", stored.id, stored.title)
        return stored

    async def update(self, position_id: int, updates: Dict[str, Any]) -> PositionModel:
        await simulate_latency(300, 300)
        existing = PositionModel.model_validate(self.db.positions.get(int(position_id)))
        merged = {**existing.model_dump(), **updates, "id": existing.id}
        try:
            position = PositionModel.model_validate(merged)
        except ValidationError as e:
            raise InputValidationError(str(e)) from e

        stored = self.db.positions.replace(existing.id, position.model_dump(mode="json"))
        logger.info("Updated position %s", existing.id)
        return PositionModel.model_validate(stored)

    async def delete(self, position_id: int) -> PositionModel:
        await simulate_latency(250, 250)
        removed = PositionModel.model_validate(self.db.positions.remove(int(position_id)))
        logger.info("Deleted position %s", removed.id)
        return removed
