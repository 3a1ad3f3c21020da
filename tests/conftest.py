# Tests configuration for the intern summary report
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import (
    CategoryShare,
    Dataset,
    Person,
    Project,
    Task,
    TimeSeriesPoint,
)


@pytest.fixture
def reference_dataset():
    """5 interns (4 active), 10 projects (7 done), 20 tasks (12 done, 3 todo, 4 in-progress, 1 bug)."""
    people = [
        Person(id=str(i), name=f"Stagiaire {i}", email=f"s{i}@example.com",
               department="Développement" if i % 2 else "Design",
               status="inactive" if i == 5 else "active", progress=i * 15)
        for i in range(1, 6)
    ]
    projects = [
        Project(id=f"p{i}", name=f"Projet {i}",
                status="done" if i <= 7 else "in-progress",
                assigned_person_ids=(str((i % 5) + 1),))
        for i in range(1, 11)
    ]
    statuses = ["done"] * 12 + ["todo"] * 3 + ["in-progress"] * 4 + ["bug"]
    tasks = [
        Task(id=f"t{i}", title=f"Tâche {i}", status=status, assigned_to=str((i % 5) + 1))
        for i, status in enumerate(statuses)
    ]
    return Dataset(
        people=people,
        projects=projects,
        tasks=tasks,
        progress=[TimeSeriesPoint(m, v) for m, v in [("Jan", 20), ("Fév", 40), ("Mar", 65)]],
        departments=[CategoryShare("Développement", 3), CategoryShare("Design", 2)],
    )


@pytest.fixture
def empty_dataset():
    """No interns, no projects, no tasks, no series."""
    return Dataset()


@pytest.fixture
def small_dataset():
    """Two interns with a handful of tasks and projects."""
    return Dataset(
        people=[
            Person(id="a", name="Alice Durand", email="alice@example.com",
                   department="Data", status="active", progress=80),
            Person(id="b", name="Benoît Roux", email="benoit@example.com",
                   department="Design", status="inactive", progress=30),
        ],
        projects=[
            Project(id="p1", status="done", assigned_person_ids=("a", "b")),
            Project(id="p2", status="todo", assigned_person_ids=("a",)),
        ],
        tasks=[
            Task(id="t1", status="done", assigned_to="a"),
            Task(id="t2", status="done", assigned_to="a"),
            Task(id="t3", status="bug", assigned_to="a"),
            Task(id="t4", status="todo", assigned_to="b"),
        ],
        progress=[TimeSeriesPoint("Jan", 10), TimeSeriesPoint("Fév", 30)],
        departments=[CategoryShare("Data", 1), CategoryShare("Design", 1)],
    )
