from datetime import date, timedelta

from hiretrack.models.candidate import CandidateModel, Stage
from hiretrack.models.position import PositionModel
from hiretrack.services import analytics

from conftest import ts


def candidate(id, stage, updated_at="2024-01-10T00:00:00", created_at="2024-01-01T00:00:00"):
    return CandidateModel(
        id=id,
        name=f"Person {id}",
        email=f"p{id}@example.com",
        position="Engineer",
        stage=stage,
        created_at=ts(created_at),
        updated_at=ts(updated_at),
    )


def test_stage_metrics_counts_and_percentages():
    people = (
        [candidate(i, Stage.APPLIED) for i in range(1, 4)]
        + [candidate(i, Stage.SCREENING) for i in range(4, 6)]
        + [candidate(i, Stage.HIRED) for i in range(6, 11)]
    )
    metrics = analytics.stage_metrics(people)
    assert [m["stage"] for m in metrics] == list(Stage)
    assert [m["count"] for m in metrics] == [3, 2, 0, 0, 5]
    assert [m["percentage"] for m in metrics] == [30, 20, 0, 0, 50]


def test_stage_metrics_with_no_candidates():
    assert [m["percentage"] for m in analytics.stage_metrics([])] == [0, 0, 0, 0, 0]


def test_percentages_round_half_up_independently():
    people = [candidate(i, Stage.APPLIED) for i in range(1, 4)] + [
        candidate(i, stage) for i, stage in zip(range(4, 9), [Stage.SCREENING, Stage.INTERVIEW, Stage.INTERVIEW, Stage.OFFER, Stage.HIRED])
    ]
    # 3/8 = 37.5 -> 38, 1/8 = 12.5 -> 13
    assert [m["percentage"] for m in analytics.stage_metrics(people)] == [38, 13, 25, 13, 13]


def test_pipeline_board_groups_by_stage():
    board = analytics.pipeline_board([candidate(1, Stage.OFFER), candidate(2, Stage.APPLIED)])
    assert [col["stage"] for col in board] == list(Stage)
    assert [c.id for c in board[0]["candidates"]] == [2]
    assert [c.id for c in board[3]["candidates"]] == [1]


def test_upcoming_tasks_from_stage():
    now = ts("2024-03-01T09:00:00")
    people = [candidate(1, Stage.INTERVIEW), candidate(2, Stage.SCREENING), candidate(3, Stage.APPLIED)]
    tasks = analytics.upcoming_tasks(people, now=now)
    assert [t["id"] for t in tasks] == ["screening-2", "interview-1"]
    assert tasks[0]["priority"] == "high"
    assert tasks[0]["due_date"] == now + timedelta(days=1)
    assert tasks[1]["title"] == "Interview: Person 1"
    assert tasks[1]["due_date"] == now + timedelta(days=2)


def test_upcoming_tasks_truncated_to_five():
    people = [candidate(i, Stage.INTERVIEW if i % 2 else Stage.SCREENING) for i in range(1, 10)]
    tasks = analytics.upcoming_tasks(people, now=ts("2024-03-01T09:00:00"))
    assert len(tasks) == 5
    assert [t["type"] for t in tasks] == ["screening"] * 4 + ["interview"]


def test_recent_activity_newest_first_limited_to_eight():
    people = [candidate(i, Stage.OFFER, updated_at=f"2024-01-{i:02d}T00:00:00") for i in range(1, 11)]
    feed = analytics.recent_activity(people)
    assert [item["id"] for item in feed] == [10, 9, 8, 7, 6, 5, 4, 3]
    assert feed[0]["title"] == "Person 10 moved to Offer"
    assert feed[0]["type"] == "candidate_updated"


def test_available_slots_from_a_monday():
    monday = date(2024, 1, 15)
    slots = analytics.available_slots(today=monday)
    assert len(slots) == 20
    days = {s["start"].date() for s in slots}
    assert len(days) == 10
    assert all(d.weekday() < 5 for d in days)
    assert all(monday < d <= monday + timedelta(days=14) for d in days)
    assert all(s["end"] - s["start"] == timedelta(minutes=60) for s in slots)
    assert all(s["type"] == "available" for s in slots)
    assert {(s["start"].hour, s["end"].hour) for s in slots} == {(10, 11), (14, 15)}


def test_available_slots_are_deterministic():
    assert analytics.available_slots(today=date(2024, 1, 17)) == analytics.available_slots(today=date(2024, 1, 17))


def test_dashboard_metrics():
    today = date(2024, 1, 10)
    people = [
        candidate(1, Stage.APPLIED, created_at="2024-01-10T08:00:00"),
        candidate(2, Stage.APPLIED, created_at="2024-01-11T08:00:00"),
        candidate(3, Stage.HIRED, created_at="2024-01-09T08:00:00"),
    ]
    positions = [
        PositionModel(id=1, title="A", status="Active"),
        PositionModel(id=2, title="B", status="Closed"),
    ]
    assert analytics.dashboard_metrics(people, positions, today=today) == {
        "total": 3,
        "by_stage": {"Applied": 2, "Hired": 1},
        "active_positions": 1,
        "recent_candidates": 2,
    }


def test_interview_statistics_empty():
    assert analytics.interview_statistics([])["completion_rate"] == 0
