#!/usr/bin/env python3

import click
import sys
import os
from datetime import date, timedelta

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session  # noqa: E402

from common.db_utils import generic_upsert  # noqa: E402
from domain.records import ProjectStatus  # noqa: E402
from models.planning import Team, Project, Task, DesignerCapacity  # noqa: E402

SAMPLE_TEAM_ID = "team-1"
SAMPLE_TEAM_NAME = "Learning & Development"

SAMPLE_DESIGNERS = [
    ("Alice Chen", 40),
    ("Bob Martinez", 32),
    ("Carol Williams", 40),
    ("David Kim", 24),
    ("Emma Thompson", 40),
]

# (id, title, client, designer, status, due in days, scoped hours, hours worked, notes)
SAMPLE_PROJECTS = [
    ("proj-1", "New Hire Onboarding Revamp", "HR Department", "Alice Chen", ProjectStatus.IN_PROGRESS, 5, 60, 45,
     "Major update to onboarding program. Need to finalize video scripts and review assessment questions."),
    ("proj-2", "Sales Enablement Course", "Sales Team", "Alice Chen", ProjectStatus.REVIEW, 10, 40, 38,
     "Final review with sales leadership scheduled for Friday."),
    ("proj-3", "Compliance Training 2024", "Legal", "Bob Martinez", ProjectStatus.IN_PROGRESS, 3, 30, 35,
     "Over budget due to additional regulatory requirements."),
    ("proj-4", "Leadership Development Program", "Executive Team", "Carol Williams", ProjectStatus.PLANNING, 21, 80, 10,
     "Kickoff meeting completed. Gathering requirements from department heads."),
    ("proj-5", "Customer Service Excellence", "Support Team", "Carol Williams", ProjectStatus.IN_PROGRESS, 7, 45, 30,
     "Good progress. Interactive scenarios in development."),
    ("proj-6", "Product Knowledge Base", "Product Team", "David Kim", ProjectStatus.IN_PROGRESS, 4, 25, 8,
     "Started late due to delayed requirements. Need to prioritize this week."),
    ("proj-7", "Safety Procedures Update", "Operations", "Emma Thompson", ProjectStatus.HANDOVER, -2, 20, 18,
     "Successfully completed and handed over to Operations team."),
    ("proj-8", "Technical Writing Workshop", "Engineering", "Emma Thompson", ProjectStatus.IN_PROGRESS, 14, 35, 15,
     "On track. First draft of workshop materials complete."),
    ("proj-9", "Diversity & Inclusion Training", "HR Department", "Bob Martinez", ProjectStatus.PLANNING, 30, 50, 5,
     "Initial research phase. Consulting with external D&I experts."),
    ("proj-10", "Remote Work Best Practices", "IT Department", "David Kim", ProjectStatus.REVIEW, 2, 15, 14,
     "Final review in progress. Minor edits needed."),
]

# (project id, name, completed); recreated on every run
SAMPLE_TASKS = [
    ("proj-1", "Write video scripts for Module 1", True),
    ("proj-1", "Write video scripts for Module 2", True),
    ("proj-1", "Write video scripts for Module 3", False),
    ("proj-1", "Create assessment questions", False),
    ("proj-1", "Review with HR stakeholders", False),
    ("proj-3", "Update compliance scenarios", True),
    ("proj-3", "Add new regulatory content", True),
    ("proj-3", "Final legal review", False),
    ("proj-5", "Design interactive scenarios", False),
    ("proj-5", "Record customer service examples", True),
    ("proj-6", "Gather product documentation", True),
    ("proj-6", "Create knowledge base structure", False),
    ("proj-6", "Write product guides", False),
]


def seed_sample_data(db: Session, today: date) -> dict:
    """
    Upsert the sample team, capacities and projects, then recreate the sample tasks.

    Due dates are relative to ``today``.
    """
    team, _ = generic_upsert(db, Team, {"id": SAMPLE_TEAM_ID}, {"name": SAMPLE_TEAM_NAME})

    for designer_name, hours in SAMPLE_DESIGNERS:
        generic_upsert(
            db,
            DesignerCapacity,
            {"team_id": team.id, "designer_name": designer_name},
            {"weekly_available_hours": hours},
        )

    for project_id, title, client, designer, status, due_in, scoped, worked, notes in SAMPLE_PROJECTS:
        generic_upsert(
            db,
            Project,
            {"id": project_id},
            {
                "team_id": team.id,
                "title": title,
                "client": client,
                "instructional_designer": designer,
                "status": status.value,
                "due_date": today + timedelta(days=due_in),
                "estimated_scoped_hours": scoped,
                "hours_worked": worked,
                "notes": notes,
                "created_by": "seed",
            },
        )

    task_project_ids = sorted({project_id for project_id, _, _ in SAMPLE_TASKS})
    db.query(Task).filter(Task.project_id.in_(task_project_ids)).delete(synchronize_session=False)
    for project_id, name, completed in SAMPLE_TASKS:
        db.add(Task(project_id=project_id, name=name, completed=completed, created_by="seed"))

    db.commit()
    return {
        "team": team.name,
        "capacities": len(SAMPLE_DESIGNERS),
        "projects": len(SAMPLE_PROJECTS),
        "tasks": len(SAMPLE_TASKS),
    }


@click.command()
@click.option('--create-tables', is_flag=True, help='Create missing tables before seeding (skip when using alembic).')
def seed(create_tables):
    from settings.database import Base, engine, get_db

    if create_tables:
        Base.metadata.create_all(bind=engine)
        print("✅ Tables created")

    db = next(get_db())
    try:
        summary = seed_sample_data(db, date.today())
        print(f"✅ Seeded team: {summary['team']}")
        print(f"   Capacities: {summary['capacities']}")
        print(f"   Projects: {summary['projects']}")
        print(f"   Tasks: {summary['tasks']}")
    except Exception as e:
        print(f"❌ Error: {str(e)}")
        db.rollback()
        raise click.Abort()
    finally:
        db.close()

if __name__ == '__main__':
    seed()
