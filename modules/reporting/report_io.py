"""
Report I/O: dataset loading and PDF file output.
"""

import json
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, Union

from models import (
    CategoryShare,
    Dataset,
    Person,
    Project,
    Task,
    TimeSeriesPoint,
)
from modules.config import Config

logger = logging.getLogger(__name__)


def _series_point(item: Dict, value_keys) -> tuple:
    label = item.get("label", item.get("month", item.get("name", "")))
    for key in value_keys:
        if item.get(key) is not None:
            return label, float(item[key])
    return label, 0.0


def dataset_from_dict(data: Dict) -> Dataset:
    """
    Build a Dataset from a plain dict.

    Expected keys: interns (or people), projects, tasks, progress, departments.
    Series items may use 'label'/'month'/'name' for the label and
    'value'/'progress' for the number.

    Args:
        data: Parsed JSON dictionary

    Returns:
        Dataset
    """
    people = data.get("interns", data.get("people", []))
    return Dataset(
        people=[Person.from_dict(p) for p in people],
        projects=[Project.from_dict(p) for p in data.get("projects", [])],
        tasks=[Task.from_dict(t) for t in data.get("tasks", [])],
        progress=[
            TimeSeriesPoint(*_series_point(item, ("value", "progress")))
            for item in data.get("progress", [])
        ],
        departments=[
            CategoryShare(*_series_point(item, ("value",)))
            for item in data.get("departments", [])
        ],
    )


def load_dataset(file_path: Union[str, Path]) -> Dataset:
    """
    Load a report dataset from JSON.

    Args:
        file_path: Path to JSON file

    Returns:
        Dataset
    """
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    dataset = dataset_from_dict(data)
    logger.info(
        "Dataset loaded from %s: %d interns, %d projects, %d tasks",
        file_path, len(dataset.people), len(dataset.projects), len(dataset.tasks),
    )
    return dataset


def report_day(moment: datetime) -> date:
    """UTC calendar day of a timestamp; naive timestamps are read as local time."""
    return moment.astimezone(timezone.utc).date()


def report_filename(day: date) -> str:
    """File name of the report for a given day, e.g. Rapport_Global_2024-06-01.pdf."""
    return f"{Config.REPORT_FILE_PREFIX}_{day.isoformat()}.pdf"


def write_report(output_dir: Union[str, Path], filename: str, pdf_bytes: bytes) -> Path:
    """
    Write finished PDF bytes to disk.

    Args:
        output_dir: Target directory (created if missing)
        filename: File name inside output_dir
        pdf_bytes: Complete PDF document

    Returns:
        Path of the written file
    """
    path = Path(output_dir) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        path.write_bytes(pdf_bytes)
    except OSError:
        logger.exception("Failed to write report to %s", path)
        raise
    logger.info("Report written: %s (%d bytes)", path, len(pdf_bytes))
    return path
