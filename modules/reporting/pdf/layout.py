"""
PDF Layout Module.

Running-cursor layout for the intern summary PDF, drawn straight onto a
ReportLab canvas. Each section is a separate function that receives the
current LayoutState and returns the advanced one, so no writer shares a
mutable cursor with another.

Coordinates are millimetres from the top-left corner of the page;
ReportLab's bottom-left origin is only used inside the draw helpers.
"""
from dataclasses import dataclass, replace
from io import BytesIO
from typing import List, Optional, Sequence, Tuple

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader

from models import Person, PersonDetail, ReportStats
from modules.statistics import (
    format_percentage,
    performance_label,
    recommendation_label,
)

from .styles import (
    COLORS,
    FONT_FAMILY,
    FONT_FAMILY_BOLD,
    FONT_SIZE_BODY,
    FONT_SIZE_GROUP,
    FONT_SIZE_HEADING,
    FONT_SIZE_PANEL_NAME,
    FONT_SIZE_SMALL,
    FONT_SIZE_TITLE,
    SIDE_MARGIN_MM,
    TEXT_INDENT_MM,
    PageGeometry,
)


# Block heights reserved before drawing (mm)
SUMMARY_GROUP_SPACE = 25
CHARTS_SECTION_SPACE = 80
CHART_SPACE = 70
CHART_HEIGHT = 60
PANEL_SPACE = 35
PANEL_HEIGHT = 28
PANEL_STEP = 33
HEADER_BAR_HEIGHT = 8
HEADER_STEP = 15
CONCLUSION_LINE_STEP = 7

CLOSING_SENTENCES = (
    "Ce rapport démontre une progression positive dans la gestion des stagiaires.",
    "Continuer le suivi régulier des tâches et projets pour maintenir la qualité.",
)


# ============================================================================
# CURSOR
# ============================================================================

@dataclass(frozen=True)
class LayoutState:
    """Vertical cursor (mm from the top) and current page number."""
    y: float
    page: int = 1

    def advance(self, delta: float) -> "LayoutState":
        return replace(self, y=self.y + delta)


def initial_state(geometry: PageGeometry) -> LayoutState:
    return LayoutState(y=geometry.top, page=1)


def needs_break(state: LayoutState, required: float, geometry: PageGeometry) -> bool:
    """True when a block of `required` mm would overflow the current page."""
    return state.y + required > geometry.limit


def new_page(canvas, state: LayoutState, geometry: PageGeometry) -> LayoutState:
    """Finish the current page and put the cursor at the top margin of the next."""
    canvas.showPage()
    return LayoutState(y=geometry.top, page=state.page + 1)


def ensure_space(canvas, state: LayoutState, required: float, geometry: PageGeometry) -> LayoutState:
    """Start a new page only if the next block does not fit."""
    if needs_break(state, required, geometry):
        return new_page(canvas, state, geometry)
    return state


def count_pages(heights: Sequence[float], geometry: PageGeometry) -> int:
    """Replay ensure_space over unsplittable blocks without drawing."""
    state = initial_state(geometry)
    for height in heights:
        if needs_break(state, height, geometry):
            state = LayoutState(y=geometry.top, page=state.page + 1)
        state = state.advance(height)
    return state.page


# ============================================================================
# DRAW HELPERS
# ============================================================================

def _baseline(geometry: PageGeometry, y: float) -> float:
    return (geometry.height - y) * mm


def draw_text(canvas, geometry: PageGeometry, x: float, y: float, text: str,
              size: int = FONT_SIZE_BODY, color=COLORS["text"],
              bold: bool = False, centered: bool = False) -> None:
    """Draw one line of text with its baseline at y (mm from the top)."""
    canvas.setFont(FONT_FAMILY_BOLD if bold else FONT_FAMILY, size)
    canvas.setFillColor(color)
    if centered:
        canvas.drawCentredString(x * mm, _baseline(geometry, y), text)
    else:
        canvas.drawString(x * mm, _baseline(geometry, y), text)


def draw_box(canvas, geometry: PageGeometry, x: float, y: float,
             width: float, height: float, color) -> None:
    """Filled rectangle whose top-left corner is (x, y) in mm."""
    canvas.setFillColor(color)
    canvas.rect(x * mm, _baseline(geometry, y + height), width * mm, height * mm, stroke=0, fill=1)


def draw_section_header(canvas, state: LayoutState, title: str,
                        geometry: PageGeometry) -> LayoutState:
    """Orange bar with white title text."""
    draw_box(canvas, geometry, SIDE_MARGIN_MM, state.y,
             geometry.width - 2 * SIDE_MARGIN_MM, HEADER_BAR_HEIGHT, COLORS["primary"])
    draw_text(canvas, geometry, TEXT_INDENT_MM, state.y + 5.5, title,
              size=FONT_SIZE_HEADING, color=COLORS["white"])
    return state.advance(HEADER_STEP)


# ============================================================================
# SECTION 1: TITLE BLOCK
# ============================================================================

def build_title_block(canvas, state: LayoutState, title: str, generated_at: str,
                      geometry: PageGeometry) -> LayoutState:
    """Report title and generation timestamp, centred."""
    center = geometry.width / 2
    draw_text(canvas, geometry, center, state.y, title,
              size=FONT_SIZE_TITLE, color=COLORS["primary"], centered=True)
    state = state.advance(10)
    draw_text(canvas, geometry, center, state.y, f"Généré le: {generated_at}",
              size=FONT_SIZE_BODY, color=COLORS["text_light"], centered=True)
    return state.advance(15)


# ============================================================================
# SECTION 2: RÉSUMÉ GLOBAL
# ============================================================================

def summary_groups(stats: ReportStats) -> List[Tuple[str, List[str]]]:
    """Labelled groups of the summary block, in display order."""
    return [
        ("STAGIAIRES", [
            f"Total: {stats.total_people}",
            f"Actifs: {stats.active_people}",
            f"Inactifs: {stats.inactive_people}",
        ]),
        ("PROJETS", [
            f"Total: {stats.total_projects}",
            f"Terminés: {stats.completed_projects}",
            f"En cours: {stats.open_projects}",
            f"Taux de complétion: {format_percentage(stats.project_completion_pct)}",
        ]),
        ("TÂCHES", [
            f"Total: {stats.total_tasks}",
            f"Terminées: {stats.completed_tasks}",
            f"En cours: {stats.in_progress_tasks}",
            f"En attente: {stats.pending_tasks}",
            f"Bugs: {stats.bug_tasks}",
            f"Taux de complétion: {format_percentage(stats.task_completion_pct)}",
        ]),
    ]


def build_summary_section(canvas, state: LayoutState, stats: ReportStats,
                          geometry: PageGeometry) -> LayoutState:
    """Header bar plus one bulleted group per entity type."""
    state = draw_section_header(canvas, state, "RÉSUMÉ GLOBAL", geometry)

    for label, items in summary_groups(stats):
        state = ensure_space(canvas, state, SUMMARY_GROUP_SPACE, geometry)
        draw_text(canvas, geometry, TEXT_INDENT_MM, state.y, label,
                  size=FONT_SIZE_GROUP, bold=True)
        state = state.advance(6)
        for item in items:
            draw_text(canvas, geometry, TEXT_INDENT_MM, state.y, f"  • {item}")
            state = state.advance(5)
        state = state.advance(3)
    return state


# ============================================================================
# SECTION 3: GRAPHIQUES DE PERFORMANCE
# ============================================================================

def draw_chart_image(canvas, state: LayoutState, png: bytes,
                     geometry: PageGeometry) -> LayoutState:
    """Embed one chart image across the content width."""
    canvas.drawImage(
        ImageReader(BytesIO(png)),
        SIDE_MARGIN_MM * mm,
        _baseline(geometry, state.y + CHART_HEIGHT),
        width=(geometry.width - 2 * SIDE_MARGIN_MM) * mm,
        height=CHART_HEIGHT * mm,
    )
    return state.advance(CHART_SPACE)


def build_charts_section(canvas, state: LayoutState, charts: Sequence[Optional[bytes]],
                         geometry: PageGeometry) -> LayoutState:
    """Header bar then each rendered chart; None entries are skipped."""
    state = ensure_space(canvas, state, CHARTS_SECTION_SPACE, geometry)
    state = draw_section_header(canvas, state, "GRAPHIQUES DE PERFORMANCE", geometry)

    for png in charts:
        if not png:
            continue
        state = ensure_space(canvas, state, CHART_SPACE, geometry)
        state = draw_chart_image(canvas, state, png, geometry)
    return state


# ============================================================================
# SECTION 4: DÉTAILS PAR STAGIAIRE
# ============================================================================

def draw_person_panel(canvas, state: LayoutState, person: Person, detail: PersonDetail,
                      geometry: PageGeometry) -> LayoutState:
    """Shaded fixed-height panel with one intern's record."""
    y = state.y
    right = geometry.width - 60
    draw_box(canvas, geometry, SIDE_MARGIN_MM, y,
             geometry.width - 2 * SIDE_MARGIN_MM, PANEL_HEIGHT, COLORS["panel"])

    draw_text(canvas, geometry, TEXT_INDENT_MM, y + 6, person.name,
              size=FONT_SIZE_PANEL_NAME, bold=True)

    muted = {"size": FONT_SIZE_SMALL, "color": COLORS["text_light"]}
    draw_text(canvas, geometry, TEXT_INDENT_MM, y + 11, f"Email: {person.email}", **muted)
    draw_text(canvas, geometry, TEXT_INDENT_MM, y + 16, f"Département: {person.department}", **muted)
    draw_text(canvas, geometry, TEXT_INDENT_MM, y + 21, f"Statut: {person.status.label}", **muted)
    draw_text(canvas, geometry, right, y + 6, f"Progression: {person.progress}%", **muted)
    draw_text(canvas, geometry, right, y + 11, f"Tâches: {detail.format_tasks()}", **muted)
    draw_text(canvas, geometry, right, y + 16, f"Projets: {detail.project_count}", **muted)

    return state.advance(PANEL_STEP)


def build_details_section(canvas, state: LayoutState, people: Sequence[Person],
                          details: Sequence[PersonDetail], geometry: PageGeometry) -> LayoutState:
    """One panel per intern on a fresh page, paginating as needed."""
    state = new_page(canvas, state, geometry)
    state = draw_section_header(canvas, state, "DÉTAILS PAR STAGIAIRE", geometry)

    for person, detail in zip(people, details):
        state = ensure_space(canvas, state, PANEL_SPACE, geometry)
        state = draw_person_panel(canvas, state, person, detail, geometry)
    return state


# ============================================================================
# SECTION 5: CONCLUSION
# ============================================================================

def conclusion_lines(stats: ReportStats) -> List[str]:
    """Headline figures, qualitative labels and the closing sentences."""
    return [
        f"Taux de réussite global: {format_percentage(stats.task_completion_pct)}",
        f"Performance des stagiaires: {performance_label(stats)}",
        f"Recommandations: {recommendation_label(stats)}",
        "",
        *CLOSING_SENTENCES,
    ]


def build_conclusion_section(canvas, state: LayoutState, stats: ReportStats,
                             geometry: PageGeometry) -> LayoutState:
    """Conclusion on its own page."""
    state = new_page(canvas, state, geometry)
    state = draw_section_header(canvas, state, "CONCLUSION", geometry)

    for line in conclusion_lines(stats):
        if line:
            draw_text(canvas, geometry, TEXT_INDENT_MM, state.y, line, size=FONT_SIZE_PANEL_NAME)
        state = state.advance(CONCLUSION_LINE_STEP)
    return state
