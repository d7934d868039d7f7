from models.planning import Team, Project, Task, TimeEntry, DesignerCapacity

__all__ = [
    'Team', 'Project', 'Task', 'TimeEntry', 'DesignerCapacity'
]
