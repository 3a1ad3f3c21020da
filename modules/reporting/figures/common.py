"""
Common utilities and configuration for report figure generation.

Shared by all chart modules - single source of truth for styling.
Charts are drawn on a pixel canvas: origin top-left, y growing down,
exactly width x height pixels.
"""
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple
from io import BytesIO

from modules.config import Config


# Force non-interactive backend
plt.switch_backend('Agg')


# ============================================================================
# CONFIGURATION
# ============================================================================

DPI = Config.CHART_DPI

FONT_FAMILY = "DejaVu Sans"
TITLE_SIZE_PX = 16
LABEL_SIZE_PX = 12

# Fixed canvas offsets (pixels)
TITLE_POS: Tuple[int, int] = (20, 30)
PLOT_MARGIN_X = 40        # left margin, also half the horizontal padding
PLOT_MARGIN_BOTTOM = 40   # baseline distance from the bottom edge
PLOT_PADDING_Y = 100      # height minus usable vertical span
LABEL_OFFSET_BOTTOM = 20  # category labels sit 20px above the bottom edge

COLORS = {
    "background": "#ffffff",
    "title": Config.COLOR_TEXT,
    "label": Config.COLOR_MUTED,
    "primary": Config.COLOR_PRIMARY,
    "primary_light": "#fb923c",
    "slice_label": "#ffffff",
}

# Pie slices cycle through this palette by index
PIE_PALETTE = ["#f97316", "#fb923c", "#fdba74", "#fed7aa", "#ffedd5"]


class ChartKind(str, Enum):
    """Supported chart kinds."""
    BAR = "bar"
    LINE = "line"
    PIE = "pie"


class ChartRenderError(Exception):
    """Raised when a chart cannot be rasterized; callers skip the chart."""


@dataclass(frozen=True)
class LabeledValue:
    """One labelled number of a chart series."""
    label: str
    value: float


def to_series(items: Iterable) -> List[LabeledValue]:
    """Convert records exposing label/value, or (label, value) pairs, to a series.

    Args:
        items: TimeSeriesPoint / CategoryShare / LabeledValue objects or tuples

    Returns:
        List of LabeledValue in input order
    """
    series = []
    for item in items:
        if isinstance(item, tuple):
            label, value = item
        else:
            label, value = item.label, item.value
        series.append(LabeledValue(str(label), float(value)))
    return series


@dataclass
class FigureConfig:
    """Configuration for chart generation."""
    dpi: int = DPI
    format: str = "png"

    font_family: str = FONT_FAMILY
    title_size_px: int = TITLE_SIZE_PX
    label_size_px: int = LABEL_SIZE_PX

    def px_to_pt(self, px: float) -> float:
        """Convert a pixel size on the canvas to matplotlib points."""
        return px * 72.0 / self.dpi


def format_value(value: float) -> str:
    """Format a data value like a plain number label: 12.0 -> '12'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def create_canvas(width: int, height: int, config: FigureConfig):
    """Create a figure whose data coordinates are canvas pixels.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        config: Figure configuration

    Returns:
        (fig, ax) with a white background already filled
    """
    fig = plt.figure(figsize=(width / config.dpi, height / config.dpi), dpi=config.dpi)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_autoscale_on(False)
    ax.axis("off")
    fig.patch.set_facecolor(COLORS["background"])
    ax.set_facecolor(COLORS["background"])
    return fig, ax


def draw_text(ax, x: float, y: float, text: str, config: FigureConfig,
              size_px: int = LABEL_SIZE_PX, color: str = COLORS["label"],
              bold: bool = False, ha: str = "left", va: str = "baseline") -> None:
    """Draw text at a canvas position (baseline-left by default, like fillText)."""
    ax.text(
        x, y, text,
        fontsize=config.px_to_pt(size_px),
        fontfamily=config.font_family,
        fontweight="bold" if bold else "normal",
        color=color, ha=ha, va=va,
    )


def draw_title(ax, title: str, config: FigureConfig) -> None:
    """Draw the chart title at the fixed top-left offset."""
    draw_text(ax, TITLE_POS[0], TITLE_POS[1], title, config,
              size_px=config.title_size_px, color=COLORS["title"], bold=True)


def save_figure(fig: Figure, config: FigureConfig) -> bytes:
    """Encode figure as bytes and close it.

    Args:
        fig: Matplotlib figure to save
        config: Figure configuration

    Returns:
        Figure bytes (PNG)
    """
    buf = BytesIO()
    try:
        fig.savefig(
            buf,
            format=config.format,
            dpi=config.dpi,
            facecolor=COLORS["background"],
            edgecolor="none",
        )
    finally:
        plt.close(fig)
    buf.seek(0)
    return buf.read()
