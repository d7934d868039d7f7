"""
Tests for the dashboard and the CSV report.

Run with:
    pytest tests/test_dashboard_api.py -v
"""

from datetime import date, datetime, timedelta
from types import SimpleNamespace

from domain.records import CapacityRecord, ProjectStatus
from domain.workload import aggregate_workload
from services.dashboard_service import build_dashboard
from services.export_service import (
    REPORT_TITLE,
    build_report_csv,
    percent_complete,
    report_filename,
)
from settings.config import get_settings


def add_project(client, title, designer, due_in_days, scoped, status="IN_PROGRESS"):
    response = client.post("/projects", json={
        "title": title,
        "client": "HR Department",
        "instructional_designer": designer,
        "status": status,
        "due_date": (date.today() + timedelta(days=due_in_days)).isoformat(),
        "estimated_scoped_hours": scoped,
    })
    assert response.status_code == 201
    return response.json()


# ============================================================================
# GET /dashboard
# ============================================================================

class TestDashboardEndpoint:
    def test_empty_team(self, client):
        body = client.get("/dashboard").json()

        assert body["as_of"] == date.today().isoformat()
        assert body["workload"]["designers"] == []
        assert body["workload"]["total_capacity"] == 0
        assert body["focus"] == []
        assert body["flagged_projects"] == []

    def test_workload_focus_and_flags(self, client):
        client.post("/capacities", json={"designer_name": "Alice", "weekly_available_hours": 40})
        alice_urgent = add_project(client, "Onboarding", "Alice", 3, 30)
        add_project(client, "Sales", "Alice", 20, 25)
        add_project(client, "Compliance", "Bob", 25, 10)
        add_project(client, "Safety", "Carol", 1, 50, status="HANDOVER")

        body = client.get("/dashboard").json()
        workload = body["workload"]

        assert [d["designer_name"] for d in workload["designers"]] == ["Alice", "Bob"]
        alice, bob = workload["designers"]
        assert alice["hours_remaining"] == -15
        assert bob["capacity"] == get_settings().default_capacity_hours
        assert bob["hours_remaining"] == 30
        assert workload["total_capacity"] == 80
        assert workload["total_estimated_hours"] == 65
        assert workload["total_hours_remaining"] == 15

        focus = {f["designer_name"]: f["project"] for f in body["focus"]}
        assert focus["Alice"]["id"] == alice_urgent["id"]
        assert focus["Bob"]["title"] == "Compliance"
        assert focus["Carol"] is None

        flagged = [f["project"]["id"] for f in body["flagged_projects"]]
        assert flagged == [alice_urgent["id"]]
        assert body["flagged_projects"][0]["risk"]["is_at_risk"] is True


class TestBuildDashboard:
    def test_accepts_plain_records(self, make_project, today):
        projects = [
            make_project(designer="Alice", due_in_days=2, scoped=30),
            make_project(designer="Alice", due_in_days=40, scoped=10, worked=12),
            make_project(designer="Bob", status=ProjectStatus.HANDOVER),
        ]
        # ProjectResponse needs the full set of project columns
        rows = [
            SimpleNamespace(
                **p.__dict__, team_id="t1", client="Client", priority=None,
                early_reminder_date=None, media_budget=None, notes=None, created_by=None,
            )
            for p in projects
        ]

        dashboard = build_dashboard(
            "t1", rows, [CapacityRecord("Alice", 20)], today,
            default_capacity=40, thresholds=get_settings().risk_thresholds,
        )

        assert dashboard.as_of == today
        assert dashboard.workload.total_capacity == 20
        assert dashboard.workload.designers[0].hours_remaining == -20
        assert [f.designer_name for f in dashboard.focus] == ["Alice", "Bob"]
        assert dashboard.focus[0].project.id == projects[0].id
        assert dashboard.focus[1].project is None
        assert len(dashboard.flagged_projects) == 2


# ============================================================================
# CSV report
# ============================================================================

def report_project(**overrides):
    values = dict(
        title="Onboarding Revamp",
        client="HR",
        instructional_designer="Alice",
        priority="A",
        status="IN_PROGRESS",
        due_date=date(2026, 10, 24),
        early_reminder_date=None,
        estimated_scoped_hours=60.0,
        hours_worked=45.0,
        media_budget=None,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class TestReportCsv:
    def test_layout(self):
        projects = [report_project()]
        workload = aggregate_workload(projects, [CapacityRecord("Alice", 40)], 40)

        content = build_report_csv(projects, workload, datetime(2026, 10, 19, 8, 30, 0))
        lines = content.splitlines()

        assert lines[0] == REPORT_TITLE
        assert lines[1] == "Generated: 2026-10-19 08:30:00"
        assert lines[3] == "TEAM SUMMARY"
        assert lines[5] == "Alice,40.0,60.0,-20.0,1"
        assert "ALL PROJECTS" in lines
        assert lines[-1] == (
            "Onboarding Revamp,HR,Alice,A,IN_PROGRESS,Sat Oct 24 2026,None,60.0,45.0,75%,None"
        )

    def test_percent_complete(self):
        assert percent_complete(report_project()) == "75%"
        assert percent_complete(report_project(estimated_scoped_hours=0, hours_worked=3)) == "0%"

    def test_percent_complete_rounds_halves_up(self):
        assert percent_complete(report_project(estimated_scoped_hours=8, hours_worked=1)) == "13%"
        assert percent_complete(report_project(estimated_scoped_hours=40, hours_worked=1)) == "3%"

    def test_filename(self):
        assert report_filename(datetime(2026, 10, 19, 23, 59)) == "claritycanvas-report-2026-10-19.csv"

    def test_export_endpoint(self, client):
        add_project(client, "Remote Work", "David Kim", 2, 15)

        response = client.get("/export/report.csv")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "claritycanvas-report-" in response.headers["content-disposition"]
        assert response.text.splitlines()[0] == REPORT_TITLE
        assert "Remote Work" in response.text


class TestUnexpectedErrors:
    def test_dashboard_failure_uses_envelope(self, client, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("api.dashboard.build_dashboard", broken)

        response = client.get("/dashboard")

        assert response.status_code == 500
        assert response.json() == {
            "status": "failure",
            "data": None,
            "errors": ["Failed to build dashboard"],
        }

    def test_export_failure_uses_envelope(self, client, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("api.dashboard.build_report_csv", broken)

        response = client.get("/export/report.csv")

        assert response.status_code == 500
        assert response.json()["errors"] == ["Failed to export report"]
