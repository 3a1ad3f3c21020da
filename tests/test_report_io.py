"""Tests for dataset loading and report file output."""
import json
from datetime import date, datetime, timedelta, timezone

import pytest

from models import PersonStatus, ProjectStatus, TaskStatus
from modules.reporting.report_io import (
    dataset_from_dict,
    load_dataset,
    report_day,
    report_filename,
    write_report,
)
from modules.sample_data import load_sample_dataset
from modules.statistics import compute_report_stats


RAW_DATASET = {
    "interns": [
        {"id": 1, "name": "Marie Dubois", "email": "marie@example.com",
         "department": "Développement", "status": "active", "progress": 85},
        {"id": 2, "name": "Lucas Petit", "email": "lucas@example.com",
         "department": "Design", "status": "inactive", "progress": 40},
    ],
    "projects": [
        {"id": "p1", "name": "Site", "status": "done", "assignedInterns": [1, 2]},
    ],
    "tasks": [
        {"id": "t1", "title": "Maquettes", "status": "in-progress", "assignedTo": 2},
    ],
    "progress": [{"month": "Jan", "progress": 20}, {"month": "Fév", "progress": 35}],
    "departments": [{"name": "Développement", "value": 1}, {"name": "Design", "value": 1}],
}


class TestDatasetFromDict:
    """Tests for dataset_from_dict."""

    def test_entities(self):
        dataset = dataset_from_dict(RAW_DATASET)

        assert [p.id for p in dataset.people] == ["1", "2"]
        assert dataset.people[1].status is PersonStatus.INACTIVE
        assert dataset.projects[0].status is ProjectStatus.DONE
        assert dataset.projects[0].assigned_person_ids == ("1", "2")
        assert dataset.tasks[0].status is TaskStatus.IN_PROGRESS
        assert dataset.tasks[0].assigned_to == "2"

    def test_series_aliases(self):
        dataset = dataset_from_dict(RAW_DATASET)

        assert [(p.label, p.value) for p in dataset.progress] == [("Jan", 20.0), ("Fév", 35.0)]
        assert [(d.label, d.value) for d in dataset.departments] == [
            ("Développement", 1.0), ("Design", 1.0)
        ]

    def test_missing_keys_are_empty(self):
        dataset = dataset_from_dict({})
        assert dataset.people == []
        assert dataset.tasks == []

    def test_open_project_status(self):
        raw = {"projects": [{"id": "p1", "status": "done"}, {"id": "p2", "status": "planning"}]}
        stats = compute_report_stats(dataset_from_dict(raw))

        assert stats.completed_projects == 1
        assert stats.open_projects == 1

    def test_unknown_status_rejected(self):
        raw = {"tasks": [{"id": "t1", "status": "blocked", "assignedTo": "1"}]}
        with pytest.raises(ValueError, match="TaskStatus"):
            dataset_from_dict(raw)


class TestLoadDataset:
    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "dataset.json"
        path.write_text(json.dumps(RAW_DATASET, ensure_ascii=False), encoding="utf-8")

        dataset = load_dataset(path)

        assert len(dataset.people) == 2
        assert dataset.people[0].department == "Développement"


class TestReportFilename:
    def test_iso_date(self):
        assert report_filename(date(2024, 6, 1)) == "Rapport_Global_2024-06-01.pdf"

    def test_day_is_taken_in_utc(self):
        evening = datetime(2024, 6, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert report_day(evening) == date(2024, 6, 2)


class TestWriteReport:
    def test_creates_directory(self, tmp_path):
        path = write_report(tmp_path / "a" / "b", "r.pdf", b"%PDF-1.4")
        assert path.read_bytes() == b"%PDF-1.4"


class TestSampleDataset:
    def test_consistent_references(self):
        dataset = load_sample_dataset()
        ids = {p.id for p in dataset.people}

        assert all(t.assigned_to in ids for t in dataset.tasks)
        assert all(set(p.assigned_person_ids) <= ids for p in dataset.projects)
        assert dataset.progress and dataset.departments


class TestGenerateReportScript:
    def test_main_with_json_dataset(self, tmp_path, capsys):
        from generate_report import main

        data_path = tmp_path / "dataset.json"
        data_path.write_text(json.dumps(RAW_DATASET, ensure_ascii=False), encoding="utf-8")

        assert main(["--data", str(data_path), "--output-dir", str(tmp_path / "out")]) == 0

        files = list((tmp_path / "out").glob("Rapport_Global_*.pdf"))
        assert len(files) == 1
        assert "Report saved to" in capsys.readouterr().out
