"""Tests for the PDF layout cursor and section writers."""
import math
from io import BytesIO

import pytest
from reportlab.pdfgen.canvas import Canvas

from models import Dataset, Person, ReportStats
from modules.reporting.pdf import PDFConfig, PageGeometry
from modules.reporting.pdf.layout import (
    CHART_SPACE,
    LayoutState,
    build_charts_section,
    build_details_section,
    build_summary_section,
    conclusion_lines,
    count_pages,
    ensure_space,
    summary_groups,
)
from modules.reporting.figures import LabeledValue, render_chart
from modules.statistics import compute_report_stats, person_details


@pytest.fixture
def geometry():
    return PageGeometry()


@pytest.fixture
def canvas(geometry):
    return Canvas(BytesIO(), pagesize=PDFConfig(geometry=geometry).page_size)


class TestEnsureSpace:
    """Tests for ensure_space."""

    def test_fits_keeps_state(self, canvas, geometry):
        state = LayoutState(y=100)
        assert ensure_space(canvas, state, 50, geometry) is state
        assert canvas.getPageNumber() == 1

    def test_overflow_starts_new_page(self, canvas, geometry):
        state = LayoutState(y=250, page=1)
        new_state = ensure_space(canvas, state, 35, geometry)

        assert new_state == LayoutState(y=geometry.top, page=2)
        assert canvas.getPageNumber() == 2

    def test_exact_fit_does_not_break(self, canvas, geometry):
        state = LayoutState(y=geometry.limit - 25)
        assert ensure_space(canvas, state, 25, geometry).page == 1

    def test_advance_is_pure(self):
        state = LayoutState(y=20)
        moved = state.advance(15)
        assert state.y == 20
        assert moved.y == 35


class TestCountPages:
    """Pagination of fixed-height blocks that are never split."""

    @pytest.mark.parametrize("n_blocks,block,capacity", [
        (10, 25, 100),
        (4, 25, 100),
        (1, 10, 100),
        (12, 20, 60),
    ])
    def test_matches_ceiling(self, n_blocks, block, capacity):
        geometry = PageGeometry(height=capacity, top=0, bottom=0)
        pages = count_pages([block] * n_blocks, geometry)
        assert pages == math.ceil(n_blocks * block / capacity)

    def test_a4_capacity(self, geometry):
        """An A4 page holds a 15mm header and seven 33mm blocks."""
        assert count_pages([15] + [33] * 7, geometry) == 1
        assert count_pages([15] + [33] * 8, geometry) == 2


class TestSummaryGroups:
    """Text content of the summary block."""

    def test_reference_values(self, reference_dataset):
        groups = dict(summary_groups(compute_report_stats(reference_dataset)))

        assert "Actifs: 4" in groups["STAGIAIRES"]
        assert "Taux de complétion: 70%" in groups["PROJETS"]
        assert "Taux de complétion: 60%" in groups["TÂCHES"]
        assert "Bugs: 1" in groups["TÂCHES"]

    def test_group_order(self):
        labels = [label for label, _ in summary_groups(ReportStats())]
        assert labels == ["STAGIAIRES", "PROJETS", "TÂCHES"]

    def test_empty_reads_na(self, empty_dataset):
        groups = dict(summary_groups(compute_report_stats(empty_dataset)))
        assert "Taux de complétion: N/A" in groups["TÂCHES"]
        assert "Taux de complétion: N/A" in groups["PROJETS"]


class TestConclusionLines:
    def test_reference(self, reference_dataset):
        lines = conclusion_lines(compute_report_stats(reference_dataset))

        assert lines[0] == "Taux de réussite global: 60%"
        assert lines[1] == "Performance des stagiaires: Bonne"
        assert lines[2] == "Recommandations: Améliorer le suivi des projets"
        assert lines[3] == ""
        assert len(lines) == 6


class TestSectionWriters:
    """Section writers return the advanced cursor."""

    def test_summary_advances_cursor(self, canvas, geometry, reference_dataset):
        stats = compute_report_stats(reference_dataset)
        state = build_summary_section(canvas, LayoutState(y=45), stats, geometry)
        # header 15 + groups (6 + 3*5 + 3) + (6 + 4*5 + 3) + (6 + 6*5 + 3)
        assert state == LayoutState(y=45 + 15 + 24 + 29 + 39, page=1)

    def test_summary_breaks_when_group_does_not_fit(self, canvas, geometry):
        state = build_summary_section(canvas, LayoutState(y=250), ReportStats(), geometry)
        assert state.page >= 2

    def test_charts_skip_missing_images(self, canvas, geometry):
        png = render_chart([LabeledValue("A", 1), LabeledValue("B", 2)], "bar", "Test", 400, 200)
        state = build_charts_section(canvas, LayoutState(y=45), [None, png, None], geometry)
        assert state == LayoutState(y=45 + 15 + CHART_SPACE, page=1)

    def test_details_start_on_new_page(self, canvas, geometry, small_dataset):
        details = person_details(small_dataset)
        state = build_details_section(canvas, LayoutState(y=100), small_dataset.people, details, geometry)

        assert state.page == 2
        assert state.y == geometry.top + 15 + 2 * 33

    def test_details_paginate_seven_panels_per_page(self, canvas, geometry):
        people = [Person(id=str(i), name=f"Stagiaire {i}", email="", department="Design") for i in range(15)]
        details = person_details(Dataset(people=people))

        state = build_details_section(canvas, LayoutState(y=100), people, details, geometry)

        # header + 7 panels, then 7 panels, then the last one
        assert state.page == 4
        assert state.y == geometry.top + 33
