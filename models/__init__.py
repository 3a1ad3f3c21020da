"""
Models Module - Report Entities and Derived Results

This module contains the read-only dataset records and the derived
result objects of the intern summary report.
NO REPORTLAB OR MATPLOTLIB DEPENDENCIES ALLOWED.

Sub-modules:
- entities: Person, Project, Task, series inputs, Dataset
- results: ReportStats, PersonDetail
"""

from .entities import (
    PersonStatus,
    ProjectStatus,
    TaskStatus,
    Person,
    Project,
    Task,
    TimeSeriesPoint,
    CategoryShare,
    Dataset,
)
from .results import ReportStats, PersonDetail


__all__ = [
    # Enums
    "PersonStatus",
    "ProjectStatus",
    "TaskStatus",
    # Entities
    "Person",
    "Project",
    "Task",
    "TimeSeriesPoint",
    "CategoryShare",
    "Dataset",
    # Results
    "ReportStats",
    "PersonDetail",
]
