from typing import Any, Dict, Iterable, List

from domain.records import TeamWorkloadSummary, WorkloadSummary, is_active

DEFAULT_CAPACITY_HOURS = 40


def aggregate_workload(
    projects: Iterable[Any],
    capacities: Iterable[Any],
    default_capacity: float = DEFAULT_CAPACITY_HOURS,
) -> TeamWorkloadSummary:
    """
    Roll active projects up into per-designer and team-wide workload.

    Projects are grouped by ``instructional_designer`` in order of first
    appearance. Capacity is matched on the exact designer name; designers
    without a capacity record get ``default_capacity``. Designers that only
    appear in ``capacities`` are not reported.

    Remaining hours can go negative; that is how over-allocation shows up.
    """
    capacity_by_name: Dict[str, float] = {}
    for record in capacities:
        # first record wins, matching a find() over the list
        capacity_by_name.setdefault(record.designer_name, record.weekly_available_hours)

    grouped: Dict[str, List[Any]] = {}
    for project in projects:
        if not is_active(project):
            continue
        grouped.setdefault(project.instructional_designer, []).append(project)

    designers = []
    for name, active_projects in grouped.items():
        capacity = capacity_by_name.get(name, default_capacity)
        estimated_hours = sum(p.estimated_scoped_hours for p in active_projects)
        designers.append(
            WorkloadSummary(
                designer_name=name,
                capacity=capacity,
                estimated_hours=estimated_hours,
                hours_remaining=capacity - estimated_hours,
                active_projects=active_projects,
            )
        )

    total_capacity = sum(d.capacity for d in designers)
    total_estimated_hours = sum(d.estimated_hours for d in designers)

    # sorted() is stable, so equal loads keep their grouping order
    designers = sorted(designers, key=lambda d: d.estimated_hours, reverse=True)

    return TeamWorkloadSummary(
        designers=designers,
        total_capacity=total_capacity,
        total_estimated_hours=total_estimated_hours,
        total_hours_remaining=total_capacity - total_estimated_hours,
    )
