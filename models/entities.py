"""
Report Entities.

Read-only records consumed by the intern summary report.
The report never creates or mutates them - it reads each collection once
per generation run.

NO REPORTLAB OR MATPLOTLIB DEPENDENCIES ALLOWED.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class PersonStatus(str, Enum):
    """Intern status."""
    ACTIVE = "active"       # Actif
    INACTIVE = "inactive"   # Inactif

    @property
    def label(self) -> str:
        return "Actif" if self is PersonStatus.ACTIVE else "Inactif"


class ProjectStatus(str, Enum):
    """Project status. Only DONE counts as completed, any other value is OTHER."""
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER


class TaskStatus(str, Enum):
    """Task status - the four buckets are mutually exclusive."""
    TODO = "todo"                 # En attente
    IN_PROGRESS = "in-progress"   # En cours
    DONE = "done"                 # Terminée
    BUG = "bug"


def _parse_status(enum_cls, raw: Any):
    """Coerce a raw string into a status enum, rejecting unknown values."""
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in enum_cls)
        raise ValueError(f"Unknown {enum_cls.__name__} '{raw}' (expected one of: {allowed})")


# ============================================================
# PEOPLE / PROJECTS / TASKS
# ============================================================

@dataclass(frozen=True)
class Person:
    """
    One intern.

    Report connection:
    - Counted in "STAGIAIRES" (total / actifs / inactifs)
    - Gets one shaded panel in "DÉTAILS PAR STAGIAIRE"
    """
    id: str
    name: str
    email: str
    department: str
    status: PersonStatus = PersonStatus.ACTIVE
    progress: int = 0                   # 0 – 100 %

    def __post_init__(self):
        object.__setattr__(self, "status", _parse_status(PersonStatus, self.status))
        if not 0 <= self.progress <= 100:
            raise ValueError(f"Progress for {self.id} out of range: {self.progress}")

    @property
    def is_active(self) -> bool:
        return self.status is PersonStatus.ACTIVE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Person":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            email=data.get("email", ""),
            department=data.get("department", ""),
            status=data.get("status", PersonStatus.ACTIVE.value),
            progress=int(data.get("progress") or 0),
        )


@dataclass(frozen=True)
class Project:
    """A project with the interns assigned to it."""
    id: str
    name: str = ""
    status: ProjectStatus = ProjectStatus.TODO
    assigned_person_ids: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "status", _parse_status(ProjectStatus, self.status))
        object.__setattr__(self, "assigned_person_ids", tuple(str(p) for p in self.assigned_person_ids))

    @property
    def is_done(self) -> bool:
        return self.status is ProjectStatus.DONE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        assigned = data.get("assigned_person_ids", data.get("assignedInterns", []))
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            status=data.get("status", ProjectStatus.TODO.value),
            assigned_person_ids=tuple(assigned),
        )


@dataclass(frozen=True)
class Task:
    """A task assigned to a single intern."""
    id: str
    title: str = ""
    status: TaskStatus = TaskStatus.TODO
    assigned_to: str = ""

    def __post_init__(self):
        object.__setattr__(self, "status", _parse_status(TaskStatus, self.status))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            status=data.get("status", TaskStatus.TODO.value),
            assigned_to=str(data.get("assigned_to", data.get("assignedTo", ""))),
        )


# ============================================================
# SERIES INPUTS
# ============================================================

@dataclass(frozen=True)
class TimeSeriesPoint:
    """One chronological point, e.g. month -> progress %."""
    label: str
    value: float


@dataclass(frozen=True)
class CategoryShare:
    """One slice of a whole, e.g. department -> number of interns."""
    label: str
    value: float


# ============================================================
# DATASET
# ============================================================

@dataclass(frozen=True)
class Dataset:
    """Everything one report run reads."""
    people: List[Person] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    tasks: List[Task] = field(default_factory=list)
    progress: List[TimeSeriesPoint] = field(default_factory=list)
    departments: List[CategoryShare] = field(default_factory=list)
