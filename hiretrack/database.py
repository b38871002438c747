"""In-memory entity store and its lifecycle."""
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from hiretrack.config import settings
from hiretrack.utils.ids import IdSequence
from hiretrack.utils.exceptions import NotFoundError


logger = logging.getLogger(__name__)

FIXTURE_FILES = {
    "candidates": "candidates.json",
    "positions": "positions.json",
    "interviews": "interviews.json",
}


class Collection:
    """Insertion-ordered records of one entity type with integer ids.

    Every read hands back a deep copy; the only way to change a stored
    record is through ``insert``, ``replace`` or ``remove``.
    """

    def __init__(self, entity: str, records: Optional[Iterable[Dict[str, Any]]] = None):
        self.entity = entity
        self._records: List[Dict[str, Any]] = [copy.deepcopy(r) for r in (records or [])]

    def __len__(self) -> int:
        return len(self._records)

    def _index(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record["id"] == record_id:
                return index
        raise NotFoundError(self.entity, record_id)

    def next_id(self) -> int:
        return max((r["id"] for r in self._records), default=0) + 1

    def all(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._records)

    def get(self, record_id: int) -> Dict[str, Any]:
        return copy.deepcopy(self._records[self._index(record_id)])

    def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Append a record, assigning ``max(id) + 1``."""
        stored = copy.deepcopy(record)
        stored["id"] = self.next_id()
        self._records.append(stored)
        return copy.deepcopy(stored)

    def replace(self, record_id: int, record: Dict[str, Any]) -> Dict[str, Any]:
        index = self._index(record_id)
        stored = copy.deepcopy(record)
        stored["id"] = self._records[index]["id"]
        self._records[index] = stored
        return copy.deepcopy(stored)

    def remove(self, record_id: int) -> Dict[str, Any]:
        return self._records.pop(self._index(record_id))


class InMemoryDatabase:
    """The three entity stores plus the candidate activity log."""

    def __init__(
        self,
        candidates: Optional[Iterable[Dict[str, Any]]] = None,
        positions: Optional[Iterable[Dict[str, Any]]] = None,
        interviews: Optional[Iterable[Dict[str, Any]]] = None,
    ):
        self.candidates = Collection("Candidate", candidates)
        self.positions = Collection("Position", positions)
        self.interviews = Collection("Interview", interviews)
        self.activity: List[Dict[str, Any]] = []
        self.child_ids = IdSequence()
        self._observe_child_ids()

    def _observe_child_ids(self):
        for candidate in self.candidates.all():
            for item in (candidate.get("notes") or []) + (candidate.get("interviews") or []):
                self.child_ids.observe(int(item["id"]))
        for interview in self.interviews.all():
            for item in (interview.get("notes") or []) + (interview.get("participants") or []):
                self.child_ids.observe(int(item["id"]))

    @classmethod
    def from_fixtures(cls, fixtures_dir: Path) -> "InMemoryDatabase":
        """Load the bundled JSON fixtures."""
        data = {}
        for name, filename in FIXTURE_FILES.items():
            path = Path(fixtures_dir) / filename
            if path.exists():
                with open(path, encoding="utf-8") as fh:
                    data[name] = json.load(fh)
            else:
                logger.warning("Fixture %s missing, starting with an empty %s store", path, name)
                data[name] = []
        return cls(**data)


class Database:
    """Process-wide store manager, mirroring a database connection."""

    db: Optional[InMemoryDatabase] = None

    @classmethod
    async def connect(cls, fixtures_dir: Optional[Path] = None):
        """Load fixtures into fresh in-memory stores."""
        cls.db = InMemoryDatabase.from_fixtures(fixtures_dir or settings.fixtures_dir)
        logger.info(
            "Loaded fixtures: %d candidates, %d positions, %d interviews",
            len(cls.db.candidates), len(cls.db.positions), len(cls.db.interviews),
        )

    @classmethod
    async def disconnect(cls):
        """Drop the in-memory stores."""
        if cls.db is not None:
            cls.db = None
            logger.info("In-memory store released")

    @classmethod
    def get_database(cls) -> InMemoryDatabase:
        """Get database instance."""
        if cls.db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return cls.db


# Dependency for FastAPI routes
async def get_db() -> InMemoryDatabase:
    """Get database dependency for routes."""
    return Database.get_database()
