"""
API tests for tasks, manual time entries and timers.

Run with:
    pytest tests/test_time_tracking_api.py -v
"""

from datetime import date, datetime, timedelta

import pytest

from services.time_entry_service import MIN_TIMER_HOURS, timer_hours


@pytest.fixture
def project(client, project_payload):
    response = client.post("/projects", json=project_payload)
    assert response.status_code == 201
    return response.json()


def log_hours(client, project_id, hours, designer="David Kim"):
    return client.post(
        f"/projects/{project_id}/time-entries",
        json={"designer_name": designer, "hours": hours, "date": date.today().isoformat()},
    )


def hours_worked(client, project_id):
    return client.get(f"/projects/{project_id}").json()["hours_worked"]


# ============================================================================
# Tasks
# ============================================================================

class TestTasks:
    def test_create_toggle_delete(self, client, project):
        created = client.post(
            f"/projects/{project['id']}/tasks", json={"name": "Write scripts", "estimated_hours": 4}
        )
        assert created.status_code == 201
        task = created.json()
        assert task["completed"] is False
        assert task["estimated_hours"] == 4

        toggled = client.patch(f"/tasks/{task['id']}", json={"completed": True}).json()
        assert toggled["completed"] is True

        deleted = client.delete(f"/tasks/{task['id']}")
        assert deleted.json() == {"status": "deleted", "id": task["id"]}
        assert client.get(f"/projects/{project['id']}").json()["tasks"] == []

    def test_task_for_unknown_project(self, client):
        response = client.post("/projects/missing/tasks", json={"name": "Orphan"})
        assert response.status_code == 404

    def test_unknown_task(self, client):
        assert client.patch("/tasks/missing", json={"completed": True}).status_code == 404
        assert client.delete("/tasks/missing").status_code == 404


# ============================================================================
# Manual time entries
# ============================================================================

class TestTimeEntries:
    def test_entries_recompute_hours_worked(self, client, project):
        first = log_hours(client, project["id"], 2.5)
        assert first.status_code == 201
        assert first.json()["is_timer_entry"] is False
        assert hours_worked(client, project["id"]) == pytest.approx(2.5)

        log_hours(client, project["id"], 1.5)
        assert hours_worked(client, project["id"]) == pytest.approx(4.0)

        client.delete(f"/time-entries/{first.json()['id']}")
        assert hours_worked(client, project["id"]) == pytest.approx(1.5)

    def test_logged_hours_feed_risk(self, client, project):
        log_hours(client, project["id"], 26)

        detail = client.get(f"/projects/{project['id']}").json()

        assert detail["risk"]["is_over_budget"] is True
        assert len(detail["time_entries"]) == 1

    def test_minimum_hours(self, client, project):
        assert log_hours(client, project["id"], 0.05).status_code == 422

    def test_entry_for_unknown_project(self, client):
        assert log_hours(client, "missing", 1).status_code == 404

    def test_delete_unknown_entry(self, client):
        assert client.delete("/time-entries/missing").status_code == 404


# ============================================================================
# Timers
# ============================================================================

class TestTimers:
    def test_start_and_stop(self, client, project):
        started = client.post(
            f"/projects/{project['id']}/timer/start", json={"designer_name": "David Kim"}
        )
        assert started.status_code == 201
        timer = started.json()
        assert timer["is_timer_entry"] is True
        assert timer["timer_ended_at"] is None

        active = client.get("/timers/active", params={"designer": "David Kim"}).json()
        assert active["id"] == timer["id"]

        stopped = client.post(f"/timers/{timer['id']}/stop").json()
        assert stopped["timer_ended_at"] is not None
        assert stopped["hours"] >= MIN_TIMER_HOURS
        assert hours_worked(client, project["id"]) == pytest.approx(stopped["hours"])

        assert client.get("/timers/active", params={"designer": "David Kim"}).json() is None

    def test_one_running_timer_per_designer(self, client, project):
        client.post(f"/projects/{project['id']}/timer/start", json={"designer_name": "David Kim"})

        second = client.post(f"/projects/{project['id']}/timer/start", json={"designer_name": "David Kim"})

        assert second.status_code == 409
        assert second.json()["errors"] == ["You already have an active timer. Please stop it first."]

        other = client.post(f"/projects/{project['id']}/timer/start", json={"designer_name": "Alice Chen"})
        assert other.status_code == 201

    def test_stop_twice(self, client, project):
        timer = client.post(
            f"/projects/{project['id']}/timer/start", json={"designer_name": "David Kim"}
        ).json()
        client.post(f"/timers/{timer['id']}/stop")

        again = client.post(f"/timers/{timer['id']}/stop")

        assert again.status_code == 404
        assert again.json()["errors"] == ["Timer not found or already stopped"]

    def test_manual_entry_is_not_a_timer(self, client, project):
        entry = log_hours(client, project["id"], 1).json()
        assert client.post(f"/timers/{entry['id']}/stop").status_code == 404


class TestTimerHours:
    def test_rounds_to_two_decimals(self):
        start = datetime(2026, 10, 19, 9, 0)
        assert timer_hours(start, start + timedelta(minutes=90)) == 1.5
        assert timer_hours(start, start + timedelta(minutes=20)) == 0.33

    def test_short_timers_count_minimum(self):
        start = datetime(2026, 10, 19, 9, 0)
        assert timer_hours(start, start + timedelta(seconds=30)) == MIN_TIMER_HOURS
        assert timer_hours(None, start) == MIN_TIMER_HOURS


class TestUnexpectedErrors:
    def test_task_failure_uses_envelope(self, client, project, monkeypatch):
        def broken(self, project_id, data, team):
            raise RuntimeError("boom")

        monkeypatch.setattr("services.task_service.TaskService.create_task", broken)

        response = client.post(f"/projects/{project['id']}/tasks", json={"name": "Script"})

        assert response.status_code == 500
        assert response.json()["status"] == "failure"
        assert response.json()["errors"] == ["Failed to create task"]

    def test_timer_failure_uses_envelope(self, client, project, monkeypatch):
        def broken(self, *args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("services.time_entry_service.TimeEntryService.start_timer", broken)

        response = client.post(
            f"/projects/{project['id']}/timer/start", json={"designer_name": "David Kim"}
        )

        assert response.status_code == 500
        assert response.json()["errors"] == ["Failed to start timer"]
