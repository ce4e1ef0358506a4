# tests/unit/test_models.py
"""
Unit tests for domain models and timestamp helpers.
"""

from datetime import datetime, timedelta, timezone

from meetingbot.core.dates import parse_iso, to_iso
from meetingbot.core.models import ActionItem, Meeting, Task, TaskStatus


class TestDates:

    def test_to_iso_is_utc_milliseconds(self):
        value = datetime(2024, 1, 15, 12, 0, 0, 123456, tzinfo=timezone(timedelta(hours=2)))

        assert to_iso(value) == "2024-01-15T10:00:00.123+00:00"
        assert to_iso(None) is None

    def test_parse_iso_accepts_z_suffix(self):
        assert parse_iso("2024-01-15T10:00:00.000Z") == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
        assert parse_iso("") is None


class TestMeeting:

    def test_from_row_decodes_json_text(self):
        meeting = Meeting.from_row({
            "id": "m1",
            "user_id": "u1",
            "title": "Standup",
            "date": "2024-01-15T10:00:00.000+00:00",
            "participants": '["Alice", "Bob"]',
            "action_items": None,
            "transcript": None,
        })

        assert meeting.participants == ["Alice", "Bob"]
        assert meeting.action_items == []
        assert meeting.transcript == ""
        assert meeting.end_date is None

    def test_to_dict_uses_api_field_names(self):
        meeting = Meeting(
            id="m1",
            user_id="u1",
            title="Standup",
            date=datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc),
            participants=["Alice"],
        )

        assert meeting.to_dict() == {
            "id": "m1",
            "userId": "u1",
            "title": "Standup",
            "date": "2024-01-15T10:00:00.000+00:00",
            "endDate": None,
            "duration": None,
            "participants": ["Alice"],
            "transcript": "",
            "summary": "",
            "actionItems": [],
        }


class TestTask:

    def test_row_round_trip(self):
        task = Task(
            user_id="u1",
            title="Write notes",
            due_date=datetime(2024, 1, 22, tzinfo=timezone.utc),
            status=TaskStatus.IN_PROGRESS,
            meeting_id="m1",
        )

        restored = Task.from_row({**task.to_row(), "id": "t1"})

        assert restored.status == TaskStatus.IN_PROGRESS
        assert restored.due_date == task.due_date
        assert restored.to_dict()["status"] == "in-progress"
        assert restored.to_dict()["meetingId"] == "m1"

    def test_action_item_to_dict(self):
        item = ActionItem(title="Action Item 1", due_date=datetime(2024, 1, 22, tzinfo=timezone.utc))

        assert item.to_dict() == {"title": "Action Item 1", "dueDate": "2024-01-22T00:00:00.000+00:00"}
