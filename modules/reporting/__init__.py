"""
Reporting Module.

Contains the intern summary report: chart rasterizer, PDF builder and I/O.
"""
from .report_io import load_dataset, dataset_from_dict, report_day, report_filename, write_report
from .pdf import build_global_report, generate_global_report, PDFConfig
from .figures import render_chart, ChartKind, ChartRenderError, LabeledValue

__all__ = [
    # I/O
    "load_dataset",
    "dataset_from_dict",
    "report_day",
    "report_filename",
    "write_report",
    # PDF
    "build_global_report",
    "generate_global_report",
    "PDFConfig",
    # Figures
    "render_chart",
    "ChartKind",
    "ChartRenderError",
    "LabeledValue",
]
