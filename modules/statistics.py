"""
Report Statistics.

Elementary aggregation for the intern summary report: status counts,
completion percentages and per-intern tallies.
No drawing here - only numbers.
"""
import logging
import math
from typing import List, Optional

import pandas as pd

from models import Dataset, PersonDetail, ReportStats, TaskStatus

logger = logging.getLogger("InternReport.Statistics")

NOT_AVAILABLE = "N/A"

# Conclusion thresholds (strictly greater than)
EXCELLENT_ACTIVE_RATIO = 0.8
ON_TRACK_PROJECT_RATIO = 0.7


def round_half_up(value: float) -> int:
    """Round .5 upwards like Math.round (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def completion_percentage(completed: int, total: int) -> Optional[int]:
    """Completed share of total as a rounded percentage.

    Args:
        completed: Number of completed items
        total: Number of items

    Returns:
        Integer percentage, or None when total is 0
    """
    if total <= 0:
        return None
    return round_half_up(completed / total * 100)


def format_percentage(value: Optional[int]) -> str:
    """Format a percentage for the PDF, 'N/A' when undefined."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value}%"


def _tasks_frame(dataset: Dataset) -> pd.DataFrame:
    return pd.DataFrame(
        [(t.id, t.status.value, t.assigned_to) for t in dataset.tasks],
        columns=["id", "status", "assigned_to"],
    )


def compute_report_stats(dataset: Dataset) -> ReportStats:
    """Compute every aggregate shown in the summary and conclusion.

    Args:
        dataset: Report input collections

    Returns:
        ReportStats
    """
    people = pd.DataFrame(
        [(p.id, p.is_active) for p in dataset.people], columns=["id", "active"]
    )
    projects = pd.DataFrame(
        [(p.id, p.is_done) for p in dataset.projects], columns=["id", "done"]
    )
    task_counts = _tasks_frame(dataset)["status"].value_counts()

    def tasks_with(status: TaskStatus) -> int:
        return int(task_counts.get(status.value, 0))

    total_projects = len(projects)
    completed_projects = int(projects["done"].sum())
    total_tasks = len(dataset.tasks)
    completed_tasks = tasks_with(TaskStatus.DONE)

    stats = ReportStats(
        total_people=len(people),
        active_people=int(people["active"].sum()),
        total_projects=total_projects,
        completed_projects=completed_projects,
        project_completion_pct=completion_percentage(completed_projects, total_projects),
        total_tasks=total_tasks,
        completed_tasks=completed_tasks,
        pending_tasks=tasks_with(TaskStatus.TODO),
        in_progress_tasks=tasks_with(TaskStatus.IN_PROGRESS),
        bug_tasks=tasks_with(TaskStatus.BUG),
        task_completion_pct=completion_percentage(completed_tasks, total_tasks),
    )

    if total_tasks == 0 or total_projects == 0 or stats.total_people == 0:
        logger.warning("Empty collection in dataset, some percentages will read %s", NOT_AVAILABLE)
    logger.debug("Report stats: %s", stats.to_dict())
    return stats


def person_details(dataset: Dataset) -> List[PersonDetail]:
    """Per-intern task tally and project count, in dataset order."""
    tasks = _tasks_frame(dataset)
    tasks["done"] = tasks["status"] == TaskStatus.DONE.value
    per_person = tasks.groupby("assigned_to")["done"].agg(["count", "sum"])

    details = []
    for person in dataset.people:
        if person.id in per_person.index:
            total = int(per_person.at[person.id, "count"])
            done = int(per_person.at[person.id, "sum"])
        else:
            total, done = 0, 0
        project_count = sum(1 for p in dataset.projects if person.id in p.assigned_person_ids)
        details.append(PersonDetail(
            person_id=person.id,
            total_tasks=total,
            completed_tasks=done,
            project_count=project_count,
        ))
    return details


def performance_label(stats: ReportStats) -> str:
    """Qualitative intern performance from the active ratio."""
    ratio = stats.active_ratio
    if ratio is None:
        return NOT_AVAILABLE
    return "Excellente" if ratio > EXCELLENT_ACTIVE_RATIO else "Bonne"


def recommendation_label(stats: ReportStats) -> str:
    """Qualitative recommendation from the project completion ratio."""
    ratio = stats.project_completion_ratio
    if ratio is None:
        return NOT_AVAILABLE
    if ratio > ON_TRACK_PROJECT_RATIO:
        return "Maintenir le rythme actuel"
    return "Améliorer le suivi des projets"
