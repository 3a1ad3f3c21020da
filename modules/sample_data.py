"""
Sample dataset for the intern summary report.

Demo interns, projects, tasks and series used when no dataset file
is supplied (see generate_report.py).
"""
from models import (
    CategoryShare,
    Dataset,
    Person,
    Project,
    Task,
    TimeSeriesPoint,
)


INTERNS = [
    {"id": "1", "name": "Marie Dubois", "email": "marie.dubois@example.com",
     "department": "Développement", "status": "active", "progress": 85},
    {"id": "2", "name": "Thomas Martin", "email": "thomas.martin@example.com",
     "department": "Design", "status": "active", "progress": 72},
    {"id": "3", "name": "Sophie Bernard", "email": "sophie.bernard@example.com",
     "department": "Marketing", "status": "active", "progress": 90},
    {"id": "4", "name": "Lucas Petit", "email": "lucas.petit@example.com",
     "department": "Développement", "status": "inactive", "progress": 45},
    {"id": "5", "name": "Emma Moreau", "email": "emma.moreau@example.com",
     "department": "Data", "status": "active", "progress": 68},
]

PROJECTS = [
    {"id": "p1", "name": "Refonte du site vitrine", "status": "done", "assignedInterns": ["1", "2"]},
    {"id": "p2", "name": "Application mobile RH", "status": "in-progress", "assignedInterns": ["1", "4"]},
    {"id": "p3", "name": "Campagne réseaux sociaux", "status": "done", "assignedInterns": ["3"]},
    {"id": "p4", "name": "Tableau de bord ventes", "status": "in-progress", "assignedInterns": ["5"]},
    {"id": "p5", "name": "Charte graphique", "status": "todo", "assignedInterns": ["2", "3"]},
]

TASKS = [
    {"id": "t1", "title": "Maquettes page d'accueil", "status": "done", "assignedTo": "2"},
    {"id": "t2", "title": "Intégration HTML/CSS", "status": "done", "assignedTo": "1"},
    {"id": "t3", "title": "API d'authentification", "status": "in-progress", "assignedTo": "1"},
    {"id": "t4", "title": "Écran de connexion mobile", "status": "bug", "assignedTo": "4"},
    {"id": "t5", "title": "Calendrier éditorial", "status": "done", "assignedTo": "3"},
    {"id": "t6", "title": "Visuels Instagram", "status": "in-progress", "assignedTo": "3"},
    {"id": "t7", "title": "Modèle de données ventes", "status": "done", "assignedTo": "5"},
    {"id": "t8", "title": "Graphiques du tableau de bord", "status": "todo", "assignedTo": "5"},
    {"id": "t9", "title": "Palette de couleurs", "status": "todo", "assignedTo": "2"},
    {"id": "t10", "title": "Tests unitaires API", "status": "todo", "assignedTo": "1"},
]

PROGRESS = [
    ("Jan", 20), ("Fév", 35), ("Mar", 48), ("Avr", 60), ("Mai", 71), ("Jun", 82),
]

DEPARTMENTS = [
    ("Développement", 2), ("Design", 1), ("Marketing", 1), ("Data", 1),
]


def load_sample_dataset() -> Dataset:
    """Build the demo Dataset."""
    return Dataset(
        people=[Person.from_dict(d) for d in INTERNS],
        projects=[Project.from_dict(d) for d in PROJECTS],
        tasks=[Task.from_dict(d) for d in TASKS],
        progress=[TimeSeriesPoint(label, value) for label, value in PROGRESS],
        departments=[CategoryShare(label, value) for label, value in DEPARTMENTS],
    )
