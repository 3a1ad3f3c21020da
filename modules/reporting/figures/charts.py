"""
Chart Rasterizer.

Draws bar, line and pie charts onto a pixel canvas and returns PNG bytes.
Input: series of LabeledValue
Output: PNG bytes

Every chart:
- White background, bold title at (20, 30)
- Bar: vertical gradient bars, value above, category below the axis
- Line: straight segments in input order, round markers, category labels
- Pie: clockwise slices from 12 o'clock, % labels, swatch legend
"""
import logging
from typing import Optional, Sequence

import numpy as np
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.patches import Circle, Rectangle, Wedge

from .common import (
    COLORS,
    LABEL_OFFSET_BOTTOM,
    ChartKind,
    ChartRenderError,
    FigureConfig,
    LabeledValue,
    create_canvas,
    draw_text,
    draw_title,
    format_value,
    save_figure,
)
from .geometry import (
    LEGEND_SWATCH,
    MARKER_RADIUS,
    bar_geometry,
    legend_geometry,
    line_geometry,
    pie_geometry,
)

logger = logging.getLogger("InternReport.Charts")

_BAR_GRADIENT = LinearSegmentedColormap.from_list(
    "bar_gradient", [COLORS["primary"], COLORS["primary_light"]]
)
_GRADIENT_STEPS = np.linspace(0, 1, 256).reshape(-1, 1)


def _draw_bar(ax, series, width, height, config):
    for bar in bar_geometry(series, width, height):
        if bar.height > 0 and bar.width > 0:
            # Row 0 lands on the bar top: primary at the top, lighter at the baseline
            ax.imshow(
                _GRADIENT_STEPS,
                cmap=_BAR_GRADIENT,
                extent=(bar.x, bar.x + bar.width, bar.baseline, bar.y),
                origin="upper",
                aspect="auto",
                interpolation="bilinear",
            )
        draw_text(ax, bar.x, height - LABEL_OFFSET_BOTTOM, bar.label, config)
        draw_text(ax, bar.x, bar.y - 5, format_value(bar.value), config)


def _draw_line(ax, series, width, height, config):
    points = line_geometry(series, width, height)
    ax.plot(
        [p.x for p in points],
        [p.y for p in points],
        color=COLORS["primary"],
        linewidth=config.px_to_pt(3),
        solid_joinstyle="miter",
    )
    for point in points:
        ax.add_patch(Circle((point.x, point.y), MARKER_RADIUS, color=COLORS["primary"], zorder=3))
        draw_text(ax, point.x - 10, height - LABEL_OFFSET_BOTTOM, point.label, config)


def _draw_pie(ax, series, width, height, config):
    layout = pie_geometry(series, width, height)
    if not layout.slices:
        logger.warning("Pie chart total is zero, drawing legend only")

    for pie_slice in layout.slices:
        # y axis points down, so increasing angles run clockwise on screen
        ax.add_patch(Wedge(
            (layout.center_x, layout.center_y),
            layout.radius,
            np.degrees(pie_slice.start_angle),
            np.degrees(pie_slice.end_angle),
            facecolor=pie_slice.color,
            edgecolor="none",
        ))
        draw_text(
            ax, pie_slice.label_x, pie_slice.label_y, f"{pie_slice.percent}%", config,
            color=COLORS["slice_label"], bold=True, ha="center",
        )

    for entry in legend_geometry(series, height):
        ax.add_patch(Rectangle(
            (entry.x, entry.y), LEGEND_SWATCH, LEGEND_SWATCH,
            facecolor=entry.color, edgecolor="none",
        ))
        draw_text(ax, entry.x + 20, entry.y + 12, entry.label, config, color=COLORS["title"])


_DRAWERS = {
    ChartKind.BAR: _draw_bar,
    ChartKind.LINE: _draw_line,
    ChartKind.PIE: _draw_pie,
}


def render_chart(
    series: Sequence[LabeledValue],
    kind,
    title: str,
    width: int,
    height: int,
    config: Optional[FigureConfig] = None,
) -> bytes:
    """Rasterize one chart.

    Args:
        series: Data points in display order
        kind: ChartKind or its string value ("bar", "line", "pie")
        title: Chart title drawn top-left
        width: Canvas width in pixels
        height: Canvas height in pixels
        config: Figure configuration

    Returns:
        PNG bytes

    Raises:
        ChartRenderError: Empty series, bad dimensions or backend failure
    """
    config = config or FigureConfig()
    try:
        kind = ChartKind(kind)
    except ValueError as e:
        raise ChartRenderError(f"Unknown chart kind: {kind}") from e
    if width <= 0 or height <= 0:
        raise ChartRenderError(f"Invalid canvas size {width}x{height}")
    if not series:
        raise ChartRenderError(f"No data for chart '{title}'")

    try:
        fig, ax = create_canvas(width, height, config)
    except (ValueError, RuntimeError, MemoryError) as e:
        raise ChartRenderError(f"Canvas unavailable for '{title}': {e}") from e

    try:
        draw_title(ax, title, config)
        _DRAWERS[kind](ax, series, width, height, config)
        png = save_figure(fig, config)
    except (ValueError, RuntimeError, OSError) as e:
        raise ChartRenderError(f"Failed to render '{title}': {e}") from e

    logger.debug("[Charts] Rendered %s chart '%s' (%d points, %d bytes)",
                 kind.value, title, len(series), len(png))
    return png
