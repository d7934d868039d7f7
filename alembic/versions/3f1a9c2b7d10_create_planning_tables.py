"""create planning tables

Revision ID: 3f1a9c2b7d10
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1a9c2b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns():
    return [
        sa.Column('created_by', sa.String(length=255), nullable=True),
        sa.Column('modified_by', sa.String(length=255), nullable=True),
        sa.Column('created_on', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('modified_on', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('clarity_team',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('clarity_project',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('team_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('client', sa.String(length=200), nullable=False),
        sa.Column('instructional_designer', sa.String(length=200), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('priority', sa.String(length=1), nullable=True),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('early_reminder_date', sa.Date(), nullable=True),
        sa.Column('estimated_scoped_hours', sa.Float(), nullable=False),
        sa.Column('hours_worked', sa.Float(), nullable=False),
        sa.Column('media_budget', sa.String(length=500), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['team_id'], ['clarity_team.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_clarity_project_team_id', 'clarity_project', ['team_id'])
    op.create_index('idx_clarity_project_team_designer', 'clarity_project', ['team_id', 'instructional_designer'])
    op.create_index('idx_clarity_project_due_date', 'clarity_project', ['due_date'])

    op.create_table('clarity_task',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('project_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=500), nullable=False),
        sa.Column('estimated_hours', sa.Float(), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['project_id'], ['clarity_project.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_clarity_task_project_id'), 'clarity_task', ['project_id'])

    op.create_table('clarity_time_entry',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('project_id', sa.String(length=36), nullable=False),
        sa.Column('designer_name', sa.String(length=200), nullable=False),
        sa.Column('hours', sa.Float(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_timer_entry', sa.Boolean(), nullable=False),
        sa.Column('timer_started_at', sa.DateTime(), nullable=True),
        sa.Column('timer_ended_at', sa.DateTime(), nullable=True),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['project_id'], ['clarity_project.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_clarity_time_entry_project_id'), 'clarity_time_entry', ['project_id'])
    op.create_index('idx_clarity_time_entry_designer_timer', 'clarity_time_entry', ['designer_name', 'is_timer_entry'])

    op.create_table('clarity_designer_capacity',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('team_id', sa.String(length=36), nullable=False),
        sa.Column('designer_name', sa.String(length=200), nullable=False),
        sa.Column('weekly_available_hours', sa.Float(), nullable=False),
        *_audit_columns(),
        sa.ForeignKeyConstraint(['team_id'], ['clarity_team.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('team_id', 'designer_name', name='uix_team_designer')
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('clarity_designer_capacity')
    op.drop_index('idx_clarity_time_entry_designer_timer', table_name='clarity_time_entry')
    op.drop_index(op.f('ix_clarity_time_entry_project_id'), table_name='clarity_time_entry')
    op.drop_table('clarity_time_entry')
    op.drop_index(op.f('ix_clarity_task_project_id'), table_name='clarity_task')
    op.drop_table('clarity_task')
    op.drop_index('idx_clarity_project_due_date', table_name='clarity_project')
    op.drop_index('idx_clarity_project_team_designer', table_name='clarity_project')
    op.drop_index('idx_clarity_project_team_id', table_name='clarity_project')
    op.drop_table('clarity_project')
    op.drop_table('clarity_team')
