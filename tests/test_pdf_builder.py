"""End-to-end tests for the intern summary PDF."""
import logging
import re
from datetime import datetime, timezone

import pytest

from modules.reporting.figures import ChartRenderError
from modules.reporting.pdf import PDFConfig, build_global_report, generate_global_report
from modules.reporting.pdf import builder
from modules.reporting.pdf.builder import format_timestamp, render_report_charts
from modules.sample_data import load_sample_dataset


GENERATED_AT = datetime(2024, 6, 1, 14, 5, 9, tzinfo=timezone.utc)


def _page_count(pdf: bytes) -> int:
    return len(re.findall(rb"/Type /Page\b", pdf))


class TestFormatTimestamp:
    def test_french_order(self):
        assert format_timestamp(GENERATED_AT) == "01/06/2024 14:05:09"


class TestRenderReportCharts:
    """Tests for render_report_charts."""

    def test_three_charts_in_order(self, reference_dataset):
        charts = render_report_charts(reference_dataset, PDFConfig(chart_width_px=400, chart_height_px=200))
        assert len(charts) == 3
        assert all(png.startswith(b"\x89PNG") for png in charts)

    def test_empty_series_are_skipped(self, empty_dataset):
        charts = render_report_charts(empty_dataset, PDFConfig())
        # progress and departments are empty, the monthly bar chart is fixed
        assert charts[0] is None
        assert charts[1] is None
        assert charts[2].startswith(b"\x89PNG")

    def test_disabled(self, reference_dataset):
        assert render_report_charts(reference_dataset, PDFConfig(include_charts=False)) == []


class TestBuildGlobalReport:
    """Tests for build_global_report."""

    def test_returns_pdf(self, reference_dataset):
        pdf = build_global_report(reference_dataset, generated_at=GENERATED_AT)
        assert pdf.startswith(b"%PDF")
        assert pdf.rstrip().endswith(b"%%EOF")

    def test_page_layout_with_charts(self, reference_dataset):
        """Summary + first chart, overflow charts, details, conclusion."""
        pdf = build_global_report(reference_dataset, generated_at=GENERATED_AT)
        assert _page_count(pdf) == 4

    def test_page_layout_without_charts(self, reference_dataset):
        pdf = build_global_report(
            reference_dataset, PDFConfig(include_charts=False), generated_at=GENERATED_AT
        )
        assert _page_count(pdf) == 3

    def test_sample_dataset(self):
        pdf = build_global_report(load_sample_dataset(), generated_at=GENERATED_AT)
        assert _page_count(pdf) == 4

    def test_empty_dataset_does_not_crash(self, empty_dataset):
        pdf = build_global_report(empty_dataset, generated_at=GENERATED_AT)
        assert pdf.startswith(b"%PDF")

    def test_chart_failure_is_skipped(self, reference_dataset, monkeypatch, caplog):
        def broken_chart(*args, **kwargs):
            raise ChartRenderError("canvas unavailable")

        monkeypatch.setattr(builder, "render_chart", broken_chart)
        with caplog.at_level(logging.WARNING, logger="InternReport.PDFBuilder"):
            pdf = build_global_report(reference_dataset, generated_at=GENERATED_AT)

        assert pdf.startswith(b"%PDF")
        assert "Skipping" in caplog.text
        # no images: summary + charts header fit on page 1
        assert _page_count(pdf) == 3


class TestGenerateGlobalReport:
    """Tests for generate_global_report (file output)."""

    def test_writes_dated_file(self, small_dataset, tmp_path):
        path = generate_global_report(
            small_dataset, tmp_path / "out", PDFConfig(include_charts=False), generated_at=GENERATED_AT
        )

        assert path.name == "Rapport_Global_2024-06-01.pdf"
        assert path.parent == tmp_path / "out"
        assert path.read_bytes().startswith(b"%PDF")

    def test_failure_writes_nothing(self, small_dataset, tmp_path, monkeypatch):
        def broken_section(*args, **kwargs):
            raise RuntimeError("layout failure")

        monkeypatch.setattr(builder, "build_details_section", broken_section)
        with pytest.raises(RuntimeError):
            generate_global_report(small_dataset, tmp_path, generated_at=GENERATED_AT)

        assert list(tmp_path.iterdir()) == []
