"""Derived views over the stores: metrics, tasks, activity and free slots.

Nothing here is persisted; every value is recomputed from the records it
is given.
"""
import math
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, Optional

from hiretrack.config import settings
from hiretrack.models.candidate import CandidateModel, Stage, STAGE_ORDER
from hiretrack.models.interview import InterviewModel, InterviewStatus
from hiretrack.models.position import PositionModel
from hiretrack.utils.clock import calendar_tz, ensure_utc, utcnow


SLOT_TIMES = (time(10, 0), time(14, 0))
SLOT_LENGTH = timedelta(minutes=60)

TASK_RULES = {
    Stage.SCREENING: ("screening", "Screen candidate: {name}", "high", timedelta(days=1)),
    Stage.INTERVIEW: ("interview", "Interview: {name}", "medium", timedelta(days=2)),
}


def percentage(part: int, total: int) -> int:
    """Whole-number percentage, halves rounded up; 0 when total is 0."""
    if total <= 0:
        return 0
    return int(math.floor(100 * part / total + 0.5))


def stage_metrics(candidates: Iterable[CandidateModel]) -> List[Dict]:
    """Count and share of candidates for each stage, in pipeline order.

    Percentages are rounded independently and may not add up to 100.
    """
    candidates = list(candidates)
    total = len(candidates)
    metrics = []
    for stage in STAGE_ORDER:
        count = sum(1 for c in candidates if c.stage == stage)
        metrics.append({"stage": stage, "count": count, "percentage": percentage(count, total)})
    return metrics


def pipeline_board(candidates: Iterable[CandidateModel]) -> List[Dict]:
    """Kanban columns: each stage with its candidates."""
    candidates = list(candidates)
    return [
        {"stage": stage, "candidates": [c for c in candidates if c.stage == stage]}
        for stage in STAGE_ORDER
    ]


def upcoming_tasks(
    candidates: Iterable[CandidateModel],
    now: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> List[Dict]:
    """Tasks inferred from the current stage of each candidate."""
    now = now or utcnow()
    limit = settings.upcoming_task_limit if limit is None else limit
    tasks = []
    for candidate in candidates:
        rule = TASK_RULES.get(candidate.stage)
        if rule is None:
            continue
        task_type, title, priority, due_in = rule
        tasks.append({
            "id": f"{task_type}-{candidate.id}",
            "type": task_type,
            "title": title.format(name=candidate.name),
            "candidate": candidate.name,
            "position": candidate.position,
            "priority": priority,
            "due_date": now + due_in,
        })
    tasks.sort(key=lambda t: t["due_date"])
    return tasks[:limit]


def recent_activity(candidates: Iterable[CandidateModel], limit: Optional[int] = None) -> List[Dict]:
    """Most recently touched candidates, newest first.

    Any update shows up as "moved to <stage>", note adds included.
    """
    limit = settings.recent_activity_limit if limit is None else limit
    ordered = sorted(candidates, key=lambda c: ensure_utc(c.updated_at), reverse=True)
    return [
        {
            "id": c.id,
            "type": "candidate_updated",
            "title": f"{c.name} moved to {c.stage.value}",
            "candidate": c.name,
            "position": c.position,
            "stage": c.stage,
            "timestamp": c.updated_at,
        }
        for c in ordered[:limit]
    ]


def dashboard_metrics(
    candidates: Iterable[CandidateModel],
    positions: Iterable[PositionModel],
    today: Optional[date] = None,
) -> Dict:
    candidates = list(candidates)
    tz = calendar_tz()
    today = today or utcnow().astimezone(tz).date()
    recent_days = {today, today + timedelta(days=1)}

    by_stage: Dict[str, int] = {}
    for c in candidates:
        by_stage[c.stage.value] = by_stage.get(c.stage.value, 0) + 1

    return {
        "total": len(candidates),
        "by_stage": by_stage,
        "active_positions": sum(1 for p in positions if p.status == "Active"),
        "recent_candidates": sum(
            1 for c in candidates if ensure_utc(c.created_at).astimezone(tz).date() in recent_days
        ),
    }


def available_slots(today: Optional[date] = None, days: Optional[int] = None) -> List[Dict]:
    """Two one-hour slots (10:00 and 14:00) on each weekday of the coming days.

    Starts the day after ``today``; booked interviews are not subtracted.
    """
    tz = calendar_tz()
    today = today or utcnow().astimezone(tz).date()
    days = settings.slot_horizon_days if days is None else days
    slots = []
    for offset in range(1, days + 1):
        day = today + timedelta(days=offset)
        if day.weekday() >= 5:
            continue
        for slot_time in SLOT_TIMES:
            start = datetime.combine(day, slot_time, tzinfo=tz)
            slots.append({
                "id": f"slot-{day.isoformat()}-{slot_time.strftime('%H%M')}",
                "title": "Available",
                "start": start,
                "end": start + SLOT_LENGTH,
                "type": "available",
            })
    return slots


def interview_statistics(interviews: Iterable[InterviewModel]) -> Dict:
    interviews = list(interviews)
    total = len(interviews)
    counts = {status.value: 0 for status in InterviewStatus}
    for interview in interviews:
        counts[interview.status.value] += 1
    return {
        "total": total,
        **counts,
        "completion_rate": percentage(counts[InterviewStatus.COMPLETED.value], total),
    }


def upcoming_interviews(
    interviews: Iterable[InterviewModel],
    now: Optional[datetime] = None,
    days: Optional[int] = None,
) -> List[InterviewModel]:
    """Scheduled interviews starting within the next ``days`` days, soonest first."""
    now = ensure_utc(now or utcnow())
    days = settings.upcoming_interview_days if days is None else days
    horizon = now + timedelta(days=days)
    upcoming = [
        i for i in interviews
        if i.status == InterviewStatus.SCHEDULED and now <= ensure_utc(i.start_time) <= horizon
    ]
    return sorted(upcoming, key=lambda i: ensure_utc(i.start_time))
