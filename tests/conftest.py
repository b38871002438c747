import asyncio
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from hiretrack.config import settings, DEFAULT_FIXTURES_DIR
from hiretrack.database import InMemoryDatabase
from hiretrack.main import app
from hiretrack.services.candidate_service import CandidateService
from hiretrack.services.interview_service import InterviewService
from hiretrack.services.position_service import PositionService


def run(coro):
    return asyncio.run(coro)


def ts(text):
    return datetime.fromisoformat(text).replace(tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def no_latency(monkeypatch):
    monkeypatch.setattr(settings, "simulate_latency", False)


@pytest.fixture
def db():
    return InMemoryDatabase.from_fixtures(DEFAULT_FIXTURES_DIR)


@pytest.fixture
def candidates(db):
    return CandidateService(db)


@pytest.fixture
def positions(db):
    return PositionService(db)


@pytest.fixture
def interviews(db):
    return InterviewService(db)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
