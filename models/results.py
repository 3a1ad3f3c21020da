"""
Report Result Objects.

Derived values recomputed on every report run and never persisted.
"""
from dataclasses import dataclass
from typing import Dict, Optional


# ============================================================
# AGGREGATE STATISTICS
# ============================================================

@dataclass(frozen=True)
class ReportStats:
    """
    Aggregate counts shown in "RÉSUMÉ GLOBAL" and "CONCLUSION".

    Percentages are None when their denominator is zero; the PDF layer
    renders that as "N/A".
    """
    # Interns
    total_people: int = 0
    active_people: int = 0

    # Projects
    total_projects: int = 0
    completed_projects: int = 0
    project_completion_pct: Optional[int] = None

    # Tasks (the four statuses are mutually exclusive)
    total_tasks: int = 0
    completed_tasks: int = 0
    pending_tasks: int = 0
    in_progress_tasks: int = 0
    bug_tasks: int = 0
    task_completion_pct: Optional[int] = None

    @property
    def inactive_people(self) -> int:
        return self.total_people - self.active_people

    @property
    def open_projects(self) -> int:
        return self.total_projects - self.completed_projects

    @property
    def active_ratio(self) -> Optional[float]:
        """Share of active interns, None without interns."""
        if self.total_people == 0:
            return None
        return self.active_people / self.total_people

    @property
    def project_completion_ratio(self) -> Optional[float]:
        if self.total_projects == 0:
            return None
        return self.completed_projects / self.total_projects

    def to_dict(self) -> Dict:
        """Serialize to dict for logging/JSON export."""
        return {
            "total_people": self.total_people,
            "active_people": self.active_people,
            "inactive_people": self.inactive_people,
            "total_projects": self.total_projects,
            "completed_projects": self.completed_projects,
            "project_completion_pct": self.project_completion_pct,
            "total_tasks": self.total_tasks,
            "completed_tasks": self.completed_tasks,
            "pending_tasks": self.pending_tasks,
            "in_progress_tasks": self.in_progress_tasks,
            "bug_tasks": self.bug_tasks,
            "task_completion_pct": self.task_completion_pct,
        }


@dataclass(frozen=True)
class PersonDetail:
    """Per-intern tallies for one detail panel."""
    person_id: str
    total_tasks: int = 0
    completed_tasks: int = 0
    project_count: int = 0

    def format_tasks(self) -> str:
        """Format the task tally as 'completed/total'."""
        return f"{self.completed_tasks}/{self.total_tasks}"
