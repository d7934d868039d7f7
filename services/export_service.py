import csv
import io
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Sequence

from domain.records import TeamWorkloadSummary

REPORT_TITLE = "ClarityCanvas Project Report"
TEAM_SUMMARY_HEADER = ["Designer", "Capacity (hrs)", "Planned (hrs)", "Remaining (hrs)", "Active Projects"]
PROJECTS_HEADER = [
    "Title", "Client", "Designer", "Priority", "Status", "Due Date", "Early Reminder",
    "Scoped Hours", "Hours Worked", "% Complete", "Media Budget",
]


def _hours(value: float) -> str:
    return f"{value:.1f}"


def _day(value) -> str:
    return value.strftime("%a %b %d %Y") if value else "None"


def percent_complete(project: Any) -> str:
    if not project.estimated_scoped_hours:
        return "0%"
    # halves round up, not to even
    percent = Decimal(str(project.hours_worked / project.estimated_scoped_hours * 100))
    return f"{percent.quantize(Decimal('1'), rounding=ROUND_HALF_UP)}%"


def report_filename(generated_at: datetime) -> str:
    return f"claritycanvas-report-{generated_at.date().isoformat()}.csv"


def build_report_csv(projects: Sequence[Any], workload: TeamWorkloadSummary, generated_at: datetime) -> str:
    """
    Render the team report as CSV.

    Layout: title, generation time, a TEAM SUMMARY block with one row per
    designer from ``workload``, then an ALL PROJECTS block.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow([REPORT_TITLE])
    writer.writerow([f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}"])
    writer.writerow([])

    writer.writerow(["TEAM SUMMARY"])
    writer.writerow(TEAM_SUMMARY_HEADER)
    for designer in workload.designers:
        writer.writerow([
            designer.designer_name,
            _hours(designer.capacity),
            _hours(designer.estimated_hours),
            _hours(designer.hours_remaining),
            len(designer.active_projects),
        ])
    writer.writerow([])

    writer.writerow(["ALL PROJECTS"])
    writer.writerow(PROJECTS_HEADER)
    for project in projects:
        writer.writerow([
            project.title,
            project.client,
            project.instructional_designer,
            project.priority or "None",
            project.status,
            _day(project.due_date),
            _day(project.early_reminder_date),
            _hours(project.estimated_scoped_hours),
            _hours(project.hours_worked),
            percent_complete(project),
            project.media_budget or "None",
        ])

    return buffer.getvalue()
