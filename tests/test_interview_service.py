from datetime import timedelta

import pytest

from hiretrack.models.interview import InterviewStatus
from hiretrack.utils.exceptions import (
    DuplicateParticipantError,
    InputValidationError,
    NotFoundError,
    ParticipantNotFoundError,
)

from conftest import run, ts


def test_create_applies_defaults(interviews):
    start = ts("2024-02-05T10:00:00")
    created = run(interviews.create({"start_time": start, "end_time": start + timedelta(hours=1)}))
    assert created.id == 5
    assert created.title == "New Interview"
    assert created.candidate_name == "Unknown Candidate"
    assert created.candidate_id is None
    assert created.status == InterviewStatus.SCHEDULED
    assert created.type == "technical"
    assert created.location == "Virtual"
    assert created.notes == [] and created.participants == []
    assert run(interviews.get_by_id(5)) == created


def test_create_accepts_dangling_candidate_reference(interviews):
    start = ts("2024-02-05T10:00:00")
    created = run(interviews.create({
        "candidate_id": 999, "candidate_name": "Nobody", "start_time": start, "end_time": start,
    }))
    assert created.candidate_id == 999


def test_update_keeps_id_and_bumps_updated_at(interviews):
    before = run(interviews.get_by_id(1))
    updated = run(interviews.update(1, {"location": "Room 4", "id": 50}))
    assert updated.id == 1
    assert updated.location == "Room 4"
    assert updated.updated_at > before.updated_at


def test_update_cannot_replace_participants_or_notes(interviews):
    before = run(interviews.get_by_id(1))
    alex = before.participants[0].model_dump(mode="json")
    updated = run(interviews.update(1, {
        "participants": [alex, dict(alex, id=alex["id"] + 1)],
        "notes": [],
        "created_at": ts("2099-01-01T00:00:00"),
        "location": "Room 7",
    }))
    assert updated.location == "Room 7"
    assert [p.email for p in updated.participants] == [p.email for p in before.participants]
    assert updated.notes == before.notes
    assert updated.created_at == before.created_at
    assert updated.updated_at >= updated.created_at


def test_update_status(interviews):
    assert run(interviews.update_status(1, "completed")).status == InterviewStatus.COMPLETED


def test_delete_then_get_fails(interviews):
    assert run(interviews.delete(3)).title == "Culture Fit Chat"
    with pytest.raises(NotFoundError):
        run(interviews.get_by_id(3))


def test_add_note_appends_with_default_author(interviews):
    updated = run(interviews.add_note(2, "Strong on caching"))
    assert [n.content for n in updated.notes] == ["Focus on distributed systems.", "Strong on caching"]
    assert updated.notes[-1].author == "Current User"


def test_add_note_rejects_blank_content(interviews):
    with pytest.raises(InputValidationError):
        run(interviews.add_note(2, "  "))
    assert len(run(interviews.get_by_id(2)).notes) == 1


def test_add_participant_defaults_name_and_role(interviews):
    updated = run(interviews.add_participant(2, "jordan.lee@company.com"))
    participant = updated.participants[-1]
    assert participant.name == "jordan.lee"
    assert participant.role == "Interviewer"


def test_duplicate_participant_is_rejected(interviews):
    run(interviews.add_participant(2, "pat@company.com", name="Pat"))
    with pytest.raises(DuplicateParticipantError):
        run(interviews.add_participant(2, "pat@company.com", name="Pat Again"))
    assert len(run(interviews.get_by_id(2)).participants) == 1


def test_duplicate_check_is_case_sensitive(interviews):
    updated = run(interviews.add_participant(1, "ALEX@company.com"))
    assert [p.email for p in updated.participants] == ["alex@company.com", "ALEX@company.com"]


def test_add_participant_to_interview_without_list(interviews):
    updated = run(interviews.add_participant(4, "sam@company.com"))
    assert len(updated.participants) == 1


def test_remove_participant(interviews):
    updated = run(interviews.remove_participant(1, 1705500000000))
    assert updated.participants == []


def test_remove_unknown_participant_leaves_list_unchanged(interviews):
    before = run(interviews.get_by_id(1))
    with pytest.raises(ParticipantNotFoundError):
        run(interviews.remove_participant(1, 12345))
    assert run(interviews.get_by_id(1)).participants == before.participants


def test_remove_participant_without_list(interviews):
    with pytest.raises(NotFoundError) as excinfo:
        run(interviews.remove_participant(4, 1))
    assert excinfo.type is NotFoundError
    assert str(excinfo.value) == "No participants found"


def test_reschedule_sets_end_and_status(interviews):
    new_start = ts("2024-01-25T13:30:00")
    updated = run(interviews.reschedule(1, new_start))
    assert updated.start_time == new_start
    assert updated.end_time == new_start + timedelta(minutes=60)
    assert updated.status == InterviewStatus.RESCHEDULED


def test_reschedule_with_custom_duration(interviews):
    new_start = ts("2024-01-25T13:30:00")
    updated = run(interviews.reschedule(2, new_start, duration_minutes=90))
    assert updated.end_time - updated.start_time == timedelta(minutes=90)


def test_reschedule_missing_interview(interviews):
    with pytest.raises(NotFoundError):
        run(interviews.reschedule(404, ts("2024-01-25T13:30:00")))


def test_date_range_is_inclusive_on_start_time(interviews):
    result = run(interviews.get_by_date_range(ts("2024-01-18T10:00:00"), ts("2024-01-19T14:00:00")))
    assert [i.id for i in result] == [1, 2]
    result = run(interviews.get_by_date_range(ts("2024-01-18T10:00:01"), ts("2024-01-19T13:59:59")))
    assert result == []


def test_get_by_status_and_candidate(interviews):
    assert [i.id for i in run(interviews.get_by_status("scheduled"))] == [1, 2]
    assert [i.id for i in run(interviews.get_by_candidate_id(6))] == [2]


def test_unknown_status_matches_nothing(interviews):
    assert run(interviews.get_by_status("archived")) == []
    assert run(interviews.filter_calendar("", "archived")) == []


def test_search_covers_type_and_location(interviews):
    assert [i.id for i in run(interviews.search("behavioral"))] == [3]
    assert [i.id for i in run(interviews.search("conference"))] == [2]
    assert len(run(interviews.search(""))) == 4


def test_calendar_filter(interviews):
    assert [i.id for i in run(interviews.filter_calendar("sarah", "all"))] == [1]
    assert [i.id for i in run(interviews.filter_calendar("", "cancelled"))] == [4]
    # location is not part of the calendar text filter
    assert run(interviews.filter_calendar("conference")) == []


def test_upcoming_only_scheduled_within_a_week(interviews):
    result = run(interviews.get_upcoming(now=ts("2024-01-17T00:00:00")))
    assert [i.id for i in result] == [1, 2]
    assert run(interviews.get_upcoming(now=ts("2024-01-19T00:00:00")))[0].id == 2


def test_statistics(interviews):
    assert run(interviews.get_statistics()) == {
        "total": 4,
        "scheduled": 2,
        "completed": 1,
        "cancelled": 1,
        "rescheduled": 0,
        "completion_rate": 25,
    }
