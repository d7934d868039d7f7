from sqlalchemy import Column, String, Date, DateTime, ForeignKey, Boolean, Text, Float, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from models.base_models import BaseModel, generate_id
from domain.records import ProjectStatus


class Team(BaseModel):
    __tablename__ = 'clarity_team'

    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String(200), nullable=False)

    projects = relationship('Project', back_populates='team', cascade='all, delete-orphan')
    capacities = relationship('DesignerCapacity', back_populates='team', cascade='all, delete-orphan')


class Project(BaseModel):
    __tablename__ = 'clarity_project'
    __table_args__ = (
        Index('idx_clarity_project_team_id', 'team_id'),
        Index('idx_clarity_project_team_designer', 'team_id', 'instructional_designer'),
        Index('idx_clarity_project_due_date', 'due_date'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    team_id = Column(String(36), ForeignKey('clarity_team.id'), nullable=False)
    team = relationship('Team', back_populates='projects')

    title = Column(String(200), nullable=False)
    client = Column(String(200), nullable=False)
    # free-text join key against DesignerCapacity.designer_name
    instructional_designer = Column(String(200), nullable=False)
    status = Column(String(20), nullable=False, default=ProjectStatus.PLANNING.value)
    priority = Column(String(1), nullable=True)
    due_date = Column(Date, nullable=False)
    early_reminder_date = Column(Date, nullable=True)
    estimated_scoped_hours = Column(Float, nullable=False)
    hours_worked = Column(Float, nullable=False, default=0.0)
    media_budget = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)

    tasks = relationship('Task', back_populates='project', cascade='all, delete-orphan')
    time_entries = relationship(
        'TimeEntry', back_populates='project', cascade='all, delete-orphan',
        order_by='TimeEntry.date.desc()'
    )


class Task(BaseModel):
    __tablename__ = 'clarity_task'

    id = Column(String(36), primary_key=True, default=generate_id)
    project_id = Column(String(36), ForeignKey('clarity_project.id'), nullable=False, index=True)
    project = relationship('Project', back_populates='tasks')
    name = Column(String(500), nullable=False)
    estimated_hours = Column(Float, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)


class TimeEntry(BaseModel):
    __tablename__ = 'clarity_time_entry'
    __table_args__ = (
        Index('idx_clarity_time_entry_designer_timer', 'designer_name', 'is_timer_entry'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    project_id = Column(String(36), ForeignKey('clarity_project.id'), nullable=False, index=True)
    project = relationship('Project', back_populates='time_entries')
    designer_name = Column(String(200), nullable=False)
    hours = Column(Float, nullable=False, default=0.0)
    date = Column(DateTime, nullable=False)
    description = Column(Text, nullable=True)
    is_timer_entry = Column(Boolean, nullable=False, default=False)
    timer_started_at = Column(DateTime, nullable=True)
    timer_ended_at = Column(DateTime, nullable=True)


class DesignerCapacity(BaseModel):
    __tablename__ = 'clarity_designer_capacity'
    __table_args__ = (
        UniqueConstraint('team_id', 'designer_name', name='uix_team_designer'),
    )

    id = Column(String(36), primary_key=True, default=generate_id)
    team_id = Column(String(36), ForeignKey('clarity_team.id'), nullable=False)
    team = relationship('Team', back_populates='capacities')
    designer_name = Column(String(200), nullable=False)
    weekly_available_hours = Column(Float, nullable=False)
