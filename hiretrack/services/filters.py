"""Search and filter predicates over candidate and interview records.

Every filter is a pure narrowing pass, so combining them is an
intersection and the order they run in does not change the result.
"""
from datetime import datetime
from typing import Iterable, List, Optional

from hiretrack.models.candidate import CandidateModel, Stage
from hiretrack.models.interview import InterviewModel, InterviewStatus
from hiretrack.utils.clock import ensure_utc


def _contains(value: Optional[str], term: str) -> bool:
    return bool(value) and term in value.lower()


def _value(member) -> str:
    """Enum members and their plain string values compare alike."""
    return getattr(member, "value", member)


def candidate_matches(candidate: CandidateModel, query: str) -> bool:
    """Case-insensitive substring match on name, email, position or any skill."""
    term = (query or "").lower()
    if not term:
        return True
    return (
        _contains(candidate.name, term)
        or _contains(candidate.email, term)
        or _contains(candidate.position, term)
        or any(_contains(skill, term) for skill in candidate.skills)
    )


def interview_matches(interview: InterviewModel, query: str) -> bool:
    """Case-insensitive substring match on title, candidate name, type or location."""
    term = (query or "").lower()
    if not term:
        return True
    return (
        _contains(interview.title, term)
        or _contains(interview.candidate_name, term)
        or _contains(interview.type, term)
        or _contains(interview.location, term)
    )


def search_candidates(candidates: Iterable[CandidateModel], query: str) -> List[CandidateModel]:
    return [c for c in candidates if candidate_matches(c, query)]


def search_interviews(interviews: Iterable[InterviewModel], query: str) -> List[InterviewModel]:
    return [i for i in interviews if interview_matches(i, query)]


def filter_by_stage(candidates: Iterable[CandidateModel], stages: Optional[Iterable[Stage]]) -> List[CandidateModel]:
    """Keep candidates in one of ``stages``; an empty selection keeps everyone."""
    wanted = {_value(s) for s in (stages or [])}
    if not wanted:
        return list(candidates)
    return [c for c in candidates if c.stage.value in wanted]


def filter_by_position(candidates: Iterable[CandidateModel], positions: Optional[Iterable[str]]) -> List[CandidateModel]:
    """Keep candidates applying for one of ``positions``; empty keeps everyone."""
    wanted = set(positions or [])
    if not wanted:
        return list(candidates)
    return [c for c in candidates if c.position in wanted]


def filter_candidates(
    candidates: Iterable[CandidateModel],
    query: str = "",
    positions: Optional[Iterable[str]] = None,
    stages: Optional[Iterable[Stage]] = None,
) -> List[CandidateModel]:
    """Candidates view: search AND position filter AND stage filter."""
    result = search_candidates(candidates, query)
    result = filter_by_position(result, positions)
    return filter_by_stage(result, stages)


def filter_by_date_range(interviews: Iterable[InterviewModel], start: datetime, end: datetime) -> List[InterviewModel]:
    """Interviews whose start time lies in ``[start, end]``."""
    start, end = ensure_utc(start), ensure_utc(end)
    return [i for i in interviews if start <= ensure_utc(i.start_time) <= end]


def filter_by_status(interviews: Iterable[InterviewModel], status: InterviewStatus) -> List[InterviewModel]:
    """Exact status match; an unknown status matches nothing."""
    return [i for i in interviews if i.status.value == _value(status)]


def filter_calendar(
    interviews: Iterable[InterviewModel],
    query: str = "",
    status: Optional[str] = None,
) -> List[InterviewModel]:
    """Calendar view: title/candidate-name search AND status ("all" matches any)."""
    term = (query or "").lower()
    result = []
    for interview in interviews:
        if term and not (_contains(interview.title, term) or _contains(interview.candidate_name, term)):
            continue
        if status and status != "all" and interview.status.value != _value(status):
            continue
        result.append(interview)
    return result
