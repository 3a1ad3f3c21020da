"""
Chart Geometry.

Maps a series to canvas pixel coordinates for bar, line and pie charts.
Pure functions - no matplotlib - so the layout can be checked directly.

Degenerate inputs never produce non-finite coordinates:
- max value of 0 -> zero-height bars, line points on the baseline
- pie total of 0 -> no slices
- single line point -> drawn at the left margin
"""
import math
from dataclasses import dataclass
from typing import List, Sequence

from modules.statistics import round_half_up

from .common import (
    LabeledValue,
    PIE_PALETTE,
    PLOT_MARGIN_BOTTOM,
    PLOT_MARGIN_X,
    PLOT_PADDING_Y,
)

BAR_GAP = 10              # px between neighbouring bars
MARKER_RADIUS = 5
PIE_LABEL_RADIUS = 0.7    # share of the radius where % labels sit
LEGEND_OFFSET = 80        # legend starts this far above the bottom edge
LEGEND_STEP = 20
LEGEND_SWATCH = 15


@dataclass(frozen=True)
class BarRect:
    x: float
    y: float              # top edge
    width: float
    height: float
    baseline: float
    label: str
    value: float


@dataclass(frozen=True)
class LinePoint:
    x: float
    y: float
    label: str
    value: float


@dataclass(frozen=True)
class PieSlice:
    start_angle: float    # radians, -pi/2 is 12 o'clock
    sweep: float          # radians, clockwise on screen
    color: str
    label_x: float
    label_y: float
    percent: int
    label: str

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep


@dataclass(frozen=True)
class PieLayout:
    center_x: float
    center_y: float
    radius: float
    slices: List[PieSlice]


@dataclass(frozen=True)
class LegendEntry:
    x: float
    y: float
    color: str
    label: str


def _max_value(series: Sequence[LabeledValue]) -> float:
    return max((item.value for item in series), default=0.0)


def _scaled_height(value: float, max_value: float, height: int) -> float:
    if max_value <= 0:
        return 0.0
    return value / max_value * (height - PLOT_PADDING_Y)


def bar_geometry(series: Sequence[LabeledValue], width: int, height: int) -> List[BarRect]:
    """Lay out one bar per entry, evenly across the plot width.

    Bar height scales linearly with value / max over (height - 100) px.
    """
    if not series:
        return []
    slot = (width - 2 * PLOT_MARGIN_X) / len(series)
    max_value = _max_value(series)
    baseline = height - PLOT_MARGIN_BOTTOM

    bars = []
    for index, item in enumerate(series):
        bar_height = _scaled_height(item.value, max_value, height)
        bars.append(BarRect(
            x=PLOT_MARGIN_X + index * slot,
            y=baseline - bar_height,
            width=max(slot - BAR_GAP, 0.0),
            height=bar_height,
            baseline=baseline,
            label=item.label,
            value=item.value,
        ))
    return bars


def line_geometry(series: Sequence[LabeledValue], width: int, height: int) -> List[LinePoint]:
    """Place points at even horizontal spacing, y scaled by value / max."""
    if not series:
        return []
    spacing = (width - 2 * PLOT_MARGIN_X) / (len(series) - 1) if len(series) > 1 else 0.0
    max_value = _max_value(series)
    baseline = height - PLOT_MARGIN_BOTTOM

    return [
        LinePoint(
            x=PLOT_MARGIN_X + index * spacing,
            y=baseline - _scaled_height(item.value, max_value, height),
            label=item.label,
            value=item.value,
        )
        for index, item in enumerate(series)
    ]


def pie_geometry(series: Sequence[LabeledValue], width: int, height: int) -> PieLayout:
    """Compute pie slices clockwise from 12 o'clock in input order.

    Each slice spans value / total * 2*pi; the % label sits at 70% of the
    radius along the bisecting angle.
    """
    center_x = width / 2
    center_y = height / 2
    radius = min(width, height) / 3
    total = sum(item.value for item in series)
    if total <= 0:
        return PieLayout(center_x, center_y, radius, [])

    slices = []
    current = -math.pi / 2
    for index, item in enumerate(series):
        sweep = item.value / total * 2 * math.pi
        mid = current + sweep / 2
        slices.append(PieSlice(
            start_angle=current,
            sweep=sweep,
            color=PIE_PALETTE[index % len(PIE_PALETTE)],
            label_x=center_x + math.cos(mid) * radius * PIE_LABEL_RADIUS,
            label_y=center_y + math.sin(mid) * radius * PIE_LABEL_RADIUS,
            percent=round_half_up(item.value / total * 100),
            label=item.label,
        ))
        current += sweep
    return PieLayout(center_x, center_y, radius, slices)


def legend_geometry(series: Sequence[LabeledValue], height: int) -> List[LegendEntry]:
    """Left-aligned swatch legend listing every entry below the pie."""
    top = height - LEGEND_OFFSET
    return [
        LegendEntry(
            x=20,
            y=top + index * LEGEND_STEP,
            color=PIE_PALETTE[index % len(PIE_PALETTE)],
            label=item.label,
        )
        for index, item in enumerate(series)
    ]
