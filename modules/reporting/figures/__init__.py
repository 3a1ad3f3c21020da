"""
Chart Rasterizer for the intern summary report.
Turns a labelled series into a PNG bar, line or pie chart.
"""
from .common import (
    DPI,
    ChartKind,
    ChartRenderError,
    FigureConfig,
    LabeledValue,
    to_series,
)
from .geometry import bar_geometry, line_geometry, pie_geometry, legend_geometry
from .charts import render_chart


__all__ = [
    "render_chart",
    "ChartKind",
    "ChartRenderError",
    "FigureConfig",
    "LabeledValue",
    "to_series",
    "bar_geometry",
    "line_geometry",
    "pie_geometry",
    "legend_geometry",
    "DPI",
]
