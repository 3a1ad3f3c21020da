"""
PDF Generator Module for the intern summary report.

Generates the "Rapport Global des Stagiaires" PDF from a Dataset.
Uses ReportLab canvas drawing.

Module Structure:
- styles.py: Page geometry, typography, colors
- layout.py: Layout cursor and section writers
- builder.py: Document orchestration and file output

Usage:
    from modules.reporting.pdf import generate_global_report

    pdf_path = generate_global_report(dataset, output_dir)
"""
from .styles import PDFConfig, PageGeometry, COLORS, PAGE_SIZE
from .layout import LayoutState, ensure_space, count_pages
from .builder import build_global_report, generate_global_report, render_report_charts


__all__ = [
    # Main API
    "build_global_report",
    "generate_global_report",
    "render_report_charts",
    # Configuration
    "PDFConfig",
    "PageGeometry",
    # Layout (for advanced usage)
    "LayoutState",
    "ensure_space",
    "count_pages",
    "COLORS",
    "PAGE_SIZE",
]
