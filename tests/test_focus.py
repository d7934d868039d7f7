from datetime import date, timedelta
from unittest import TestCase

from domain.focus import group_projects_by_designer, score_project, select_focus
from domain.records import ProjectRecord, ProjectStatus

TODAY = date(2026, 10, 19)


def project(project_id, due_in_days, scoped=20.0, worked=0.0, status=ProjectStatus.IN_PROGRESS, designer="Alice"):
    return ProjectRecord(
        id=project_id,
        instructional_designer=designer,
        status=status,
        due_date=TODAY + timedelta(days=due_in_days),
        estimated_scoped_hours=scoped,
        hours_worked=worked,
    )


class TestScoreProject(TestCase):
    def test_at_risk_adds_weight(self):
        # at risk (+100) plus 30 - 3 urgency
        self.assertEqual(score_project(project("p", 3, scoped=25, worked=8), TODAY), 127)

    def test_over_budget_adds_weight(self):
        self.assertEqual(score_project(project("p", 40, scoped=10, worked=12), TODAY), 50)

    def test_overdue_urgency_exceeds_window(self):
        self.assertEqual(score_project(project("p", -10, scoped=5), TODAY), 40)

    def test_far_out_projects_score_zero(self):
        self.assertEqual(score_project(project("p", 45, scoped=5), TODAY), 0)


class TestSelectFocus(TestCase):
    def test_empty_input(self):
        self.assertIsNone(select_focus([], TODAY))

    def test_only_handover(self):
        projects = [project("h1", 1, status=ProjectStatus.HANDOVER), project("h2", -3, status=ProjectStatus.HANDOVER)]
        self.assertIsNone(select_focus(projects, TODAY))

    def test_at_risk_beats_due_soon_in_any_order(self):
        at_risk = project("risk", 5, scoped=25, worked=8)
        due_soon = project("soon", 8, scoped=5)
        self.assertEqual(select_focus([due_soon, at_risk], TODAY).id, "risk")
        self.assertEqual(select_focus([at_risk, due_soon], TODAY).id, "risk")

    def test_tie_goes_to_first(self):
        first = project("first", 40)
        second = project("second", 50)
        self.assertEqual(select_focus([first, second], TODAY).id, "first")
        self.assertEqual(select_focus([second, first], TODAY).id, "second")

    def test_handover_is_skipped_even_when_urgent(self):
        handed_over = project("done", -20, scoped=10, worked=30, status=ProjectStatus.HANDOVER)
        active = project("active", 60)
        self.assertEqual(select_focus([handed_over, active], TODAY).id, "active")

    def test_overdue_outranks_upcoming(self):
        overdue = project("late", -10, scoped=5)
        upcoming = project("next", 2, scoped=5)
        self.assertEqual(select_focus([upcoming, overdue], TODAY).id, "late")


class TestGroupProjectsByDesigner(TestCase):
    def test_groups_in_first_appearance_order(self):
        projects = [
            project("1", 1, designer="Bob"),
            project("2", 1, designer="Alice"),
            project("3", 1, designer="Bob"),
        ]
        grouped = group_projects_by_designer(projects)
        self.assertEqual(list(grouped), ["Bob", "Alice"])
        self.assertEqual([p.id for p in grouped["Bob"]], ["1", "3"])
