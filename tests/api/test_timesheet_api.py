"""
API tests for the timer, time log and timesheet endpoints.
"""

import pytest

from timetrack.config import settings
from tests.support import WORKER, OTHER_WORKER, MANAGER, LEADER


API = settings.api_prefix


def manual_log(day, start, end, task_id="t-design", **extra):
    body = {
        "taskId": task_id,
        "date": day,
        "startTime": f"{day}T{start}:00",
        "endTime": f"{day}T{end}:00",
        "isManual": True,
    }
    body.update(extra)
    return body


class TestTimesheetLifecycle:
    """Log a week, submit it, approve it, and find it locked."""

    def test_week_to_approval(self, client, auth):
        """3h + 2h + 4h in 2026-W05 totals 9.0 and locks on approval."""
        for day, start, end in [("2026-01-26", "09:00", "12:00"),
                                ("2026-01-27", "10:00", "12:00"),
                                ("2026-01-28", "08:00", "12:00")]:
            response = client.post(f"{API}/timelogs", json=manual_log(day, start, end), headers=auth(WORKER))
            assert response.status_code == 201
            assert response.json()["isManual"] is True

        response = client.get(f"{API}/timesheets/user/{WORKER.user_id}/week/2026-W05", headers=auth(WORKER))
        assert response.status_code == 200
        sheet = response.json()
        assert sheet["totalHours"] == 9.0
        assert sheet["status"] == "draft"
        assert [entry["date"] for entry in sheet["entries"]] == ["2026-01-26", "2026-01-27", "2026-01-28"]

        response = client.post(f"{API}/timesheets/submit", json={"weekId": "2026-W05"}, headers=auth(WORKER))
        assert response.status_code == 200
        assert response.json()["status"] == "submitted"
        assert response.json()["totalHours"] == 9.0

        response = client.get(f"{API}/timesheets/pending", headers=auth(LEADER))
        assert [item["id"] for item in response.json()] == [sheet["id"]]

        response = client.put(f"{API}/timesheets/{sheet['id']}/approve", headers=auth(MANAGER))
        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        assert response.json()["approvedBy"] == MANAGER.user_id

        response = client.post(
            f"{API}/timesheets/save",
            json={"timesheetId": sheet["id"], "entries": [{"taskId": "t-design", "dayIndex": 3, "duration": 2}]},
            headers=auth(WORKER),
        )
        assert response.status_code == 409
        assert response.json()["error"] == "STATE_ERROR"

        response = client.get(f"{API}/timesheets/user/{WORKER.user_id}/week/2026-W05", headers=auth(WORKER))
        assert response.json()["totalHours"] == 9.0

    def test_reject_and_resubmit(self, client, auth):
        """A rejected week can be edited and submitted again."""
        sheet = client.post(f"{API}/timesheets/submit", json={"weekId": "2026-W05"}, headers=auth(WORKER)).json()

        response = client.put(
            f"{API}/timesheets/{sheet['id']}/reject", json={"reason": "Missing Friday"}, headers=auth(MANAGER)
        )
        assert response.status_code == 200
        assert response.json()["rejectionReason"] == "Missing Friday"

        response = client.post(
            f"{API}/timesheets/save",
            json={"timesheetId": sheet["id"], "entries": [{"taskId": "t-design", "dayIndex": 4, "duration": 8}]},
            headers=auth(WORKER),
        )
        assert response.status_code == 200
        assert response.json()["totalHours"] == 8.0

        response = client.post(f"{API}/timesheets/submit", json={"timesheetId": sheet["id"]}, headers=auth(WORKER))
        assert response.json()["status"] == "submitted"
        assert response.json()["rejectionReason"] is None

    @pytest.mark.parametrize("duration", ["NaN", "Infinity", "0.0001"])
    def test_unusable_cell_duration(self, client, auth, duration):
        """Durations that are not a positive number of seconds are validation errors."""
        sheet = client.get(f"{API}/timesheets/user/{WORKER.user_id}/week/2026-W05", headers=auth(WORKER)).json()
        body = (
            f'{{"timesheetId": {sheet["id"]}, '
            f'"entries": [{{"taskId": "t-design", "dayIndex": 0, "duration": {duration}}}]}}'
        )

        response = client.post(
            f"{API}/timesheets/save",
            content=body,
            headers={**auth(WORKER), "Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert response.json()["field"].endswith("duration")

    def test_blank_rejection_reason(self, client, auth):
        """Rejecting without a reason is a validation error."""
        sheet = client.post(f"{API}/timesheets/submit", json={"weekId": "2026-W05"}, headers=auth(WORKER)).json()

        response = client.put(f"{API}/timesheets/{sheet['id']}/reject", json={"reason": "  "}, headers=auth(MANAGER))

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert response.json()["field"] == "reason"

    def test_team_leader_cannot_review(self, client, auth):
        """Team leaders can view the queue but not approve or reject."""
        sheet = client.post(f"{API}/timesheets/submit", json={"weekId": "2026-W05"}, headers=auth(WORKER)).json()

        response = client.put(f"{API}/timesheets/{sheet['id']}/approve", headers=auth(LEADER))
        assert response.status_code == 403
        assert response.json()["error"] == "PERMISSION_ERROR"

        response = client.put(f"{API}/timesheets/{sheet['id']}/reject", json={"reason": "no"}, headers=auth(LEADER))
        assert response.status_code == 403

    def test_pending_hidden_from_members(self, client, auth):
        """Team members cannot list pending sheets."""
        response = client.get(f"{API}/timesheets/pending", headers=auth(WORKER))
        assert response.status_code == 403

    def test_other_users_sheet(self, client, auth):
        """Peers cannot read each other's sheets."""
        response = client.get(f"{API}/timesheets/user/{WORKER.user_id}/week/2026-W05", headers=auth(OTHER_WORKER))
        assert response.status_code == 403

    def test_bad_week_id(self, client, auth):
        """Malformed week ids are validation errors."""
        response = client.get(f"{API}/timesheets/user/{WORKER.user_id}/week/2026-5", headers=auth(WORKER))
        assert response.status_code == 422
        assert response.json()["field"] == "week_id"

    def test_unknown_timesheet(self, client, auth):
        """Approving a missing sheet is a 404."""
        response = client.put(f"{API}/timesheets/999/approve", headers=auth(MANAGER))
        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"


class TestTimerApi:
    """Timer endpoints."""

    def test_short_session_is_refused(self, client, auth, clock):
        """Stopping after 45 seconds is refused and the timer keeps running."""
        response = client.post(f"{API}/timer/start", json={"taskId": "t-design"}, headers=auth(WORKER))
        assert response.status_code == 201
        assert response.json()["projectId"] == "p-web"

        clock.advance(seconds=45)
        response = client.post(f"{API}/timer/stop", headers=auth(WORKER))
        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"

        response = client.get(f"{API}/timer/active", headers=auth(WORKER))
        assert response.status_code == 200
        assert response.json()["elapsedSeconds"] == 45
        assert response.json()["elapsedFormatted"] == "00:00:45"

    def test_stop_records_log(self, client, auth, clock):
        """Stopping a timer returns the created log."""
        client.post(f"{API}/timer/start", json={"taskId": "t-design", "description": "wireframes"}, headers=auth(WORKER))
        clock.advance(hours=1, minutes=30)

        response = client.post(f"{API}/timer/stop", headers=auth(WORKER))

        assert response.status_code == 200
        body = response.json()
        assert body["source"] == "timer"
        assert body["isManual"] is False
        assert body["durationHours"] == 1.5
        assert body["description"] == "wireframes"
        assert client.get(f"{API}/timer/active", headers=auth(WORKER)).json() is None

    def test_double_start(self, client, auth):
        """A second start conflicts."""
        client.post(f"{API}/timer/start", json={"taskId": "t-design"}, headers=auth(WORKER))
        response = client.post(f"{API}/timer/start", json={"taskId": "t-build"}, headers=auth(WORKER))

        assert response.status_code == 409
        assert response.json()["error"] == "CONFLICT_ERROR"

    @pytest.mark.parametrize("method,path", [("post", "/timer/stop"), ("delete", "/timer/discard")])
    def test_no_active_timer(self, client, auth, method, path):
        """Stop and discard need a running timer."""
        response = getattr(client, method)(f"{API}{path}", headers=auth(WORKER))
        assert response.status_code == 404
        assert response.json()["message"] == "No active timer found"

    def test_discard(self, client, auth):
        """Discarding clears the timer."""
        client.post(f"{API}/timer/start", json={"taskId": "t-design"}, headers=auth(WORKER))

        response = client.delete(f"{API}/timer/discard", headers=auth(WORKER))

        assert response.status_code == 200
        assert response.json()["message"] == "Timer discarded"
        assert client.get(f"{API}/timer/active", headers=auth(WORKER)).json() is None

    def test_unassigned_task(self, client, auth):
        """Timing an unassigned task is forbidden."""
        response = client.post(f"{API}/timer/start", json={"taskId": "t-audit"}, headers=auth(WORKER))
        assert response.status_code == 403


class TestTimeLogApi:
    """Time log endpoints."""

    def test_timer_flag_refused(self, client, auth):
        """isManual=false is refused on the manual endpoint."""
        response = client.post(
            f"{API}/timelogs", json=manual_log("2026-01-26", "09:00", "10:00", isManual=False), headers=auth(WORKER)
        )
        assert response.status_code == 422

    def test_invalid_range(self, client, auth):
        """End before start is refused."""
        response = client.post(f"{API}/timelogs", json=manual_log("2026-01-26", "12:00", "09:00"), headers=auth(WORKER))
        assert response.status_code == 422
        assert response.json()["field"] == "end_time"

    def test_unknown_field(self, client, auth):
        """Unexpected request fields are rejected."""
        response = client.post(
            f"{API}/timelogs", json=manual_log("2026-01-26", "09:00", "10:00", billable=True), headers=auth(WORKER)
        )
        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_utc_timestamps(self, client, auth):
        """Offset timestamps are stored as UTC and can be edited one end at a time."""
        body = manual_log("2026-01-26", "09:00", "12:00")
        body["startTime"] = "2026-01-26T09:00:00Z"
        body["endTime"] = "2026-01-26T13:00:00+01:00"
        response = client.post(f"{API}/timelogs", json=body, headers=auth(WORKER))
        assert response.status_code == 201
        created = response.json()
        assert created["durationHours"] == 3.0
        assert created["endTime"] == "2026-01-26T12:00:00"

        response = client.put(
            f"{API}/timelogs/{created['id']}", json={"startTime": "2026-01-26T08:00:00Z"}, headers=auth(WORKER)
        )
        assert response.status_code == 200
        assert response.json()["startTime"] == "2026-01-26T08:00:00"
        assert response.json()["durationHours"] == 4.0

        response = client.put(
            f"{API}/timelogs/{created['id']}", json={"endTime": "2026-01-26T07:00:00Z"}, headers=auth(WORKER)
        )
        assert response.status_code == 422
        assert response.json()["field"] == "end_time"

    def test_mixed_timestamp_styles(self, client, auth):
        """A plain and an offset timestamp in one request are compared as UTC."""
        body = manual_log("2026-01-26", "09:00", "12:00")
        body["startTime"] = "2026-01-26T09:00:00Z"
        response = client.post(f"{API}/timelogs", json=body, headers=auth(WORKER))

        assert response.status_code == 201
        assert response.json()["durationHours"] == 3.0

    def test_edit_and_delete(self, client, auth):
        """Owners edit and delete their logs; totals follow."""
        created = client.post(
            f"{API}/timelogs", json=manual_log("2026-01-26", "09:00", "12:00"), headers=auth(WORKER)
        ).json()

        response = client.put(
            f"{API}/timelogs/{created['id']}", json={"endTime": "2026-01-26T10:00:00"}, headers=auth(WORKER)
        )
        assert response.status_code == 200
        assert response.json()["durationHours"] == 1.0

        response = client.delete(f"{API}/timelogs/{created['id']}", headers=auth(WORKER))
        assert response.status_code == 200
        assert response.json() == {"id": created["id"]}

        sheet = client.get(f"{API}/timesheets/user/{WORKER.user_id}/week/2026-W05", headers=auth(WORKER)).json()
        assert sheet["totalHours"] == 0.0

    def test_listings(self, client, auth):
        """User, task and weekly listings."""
        client.post(f"{API}/timelogs", json=manual_log("2026-01-26", "09:00", "12:00"), headers=auth(WORKER))
        client.post(
            f"{API}/timelogs", json=manual_log("2026-01-27", "09:00", "11:00", task_id="t-build"), headers=auth(WORKER)
        )

        by_user = client.get(f"{API}/timelogs/user/{WORKER.user_id}", headers=auth(WORKER)).json()
        assert [log["taskId"] for log in by_user] == ["t-build", "t-design"]

        by_task = client.get(f"{API}/timelogs/task/t-design", headers=auth(MANAGER)).json()
        assert len(by_task) == 1

        grid = client.get(f"{API}/timelogs/weekly", params={"weekId": "2026-W05"}, headers=auth(WORKER)).json()
        assert grid["weeklyTotal"] == 5.0
        assert grid["dailyTotals"]["Mon"] == 3.0
        assert grid["dailyTotals"]["Tue"] == 2.0

        current = client.get(f"{API}/timelogs/weekly", headers=auth(WORKER)).json()
        assert current["weekId"] == "2026-W05"


class TestAuthAndService:
    """Authentication and service endpoints."""

    def test_missing_token(self, client):
        """Requests without a token are unauthorized."""
        response = client.get(f"{API}/timer/active")
        assert response.status_code == 401
        assert response.json()["error"] == "UNAUTHORIZED"

    def test_invalid_token(self, client):
        """Garbage tokens are unauthorized."""
        response = client.get(f"{API}/timer/active", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    def test_unknown_user(self, client, jwt):
        """Users without a directory role are unauthorized."""
        token = jwt.create_token("u-ghost")
        response = client.get(f"{API}/timer/active", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_health(self, client):
        """Health and root endpoints answer without auth."""
        assert client.get(f"{API}/health").json()["status"] == "healthy"
        assert client.get("/").json()["health"] == f"{API}/health"
