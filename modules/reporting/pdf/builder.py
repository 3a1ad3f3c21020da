"""
PDF Builder Module.

Orchestrates the construction of the intern summary PDF report.
Single forward pass over five fixed sections:

1. Titre et horodatage
2. Résumé global
3. Graphiques de performance
4. Détails par stagiaire
5. Conclusion

The document is assembled in memory; the file is only written once the
whole build succeeded, so a failure never leaves a partial report.
"""
from io import BytesIO
from pathlib import Path
from datetime import datetime
import logging
from typing import List, Optional, Union

from reportlab.pdfgen.canvas import Canvas

from models import Dataset
from modules.config import Config
from modules.statistics import compute_report_stats, person_details

from ..figures import ChartKind, ChartRenderError, FigureConfig, render_chart, to_series
from ..report_io import report_day, report_filename, write_report
from .styles import PDFConfig
from .layout import (
    initial_state,
    build_title_block,
    build_summary_section,
    build_charts_section,
    build_details_section,
    build_conclusion_section,
)


# Setup logger
logger = logging.getLogger("InternReport.PDFBuilder")


# Illustrative monthly report counts shown in the bar chart
MONTHLY_REPORTS = [
    ("Jan", 12),
    ("Fév", 18),
    ("Mar", 15),
    ("Avr", 22),
    ("Mai", 19),
    ("Jun", 25),
]


def format_timestamp(moment: datetime) -> str:
    """French locale date-time, e.g. 01/06/2024 14:05:09."""
    return moment.strftime("%d/%m/%Y %H:%M:%S")


def _render_or_skip(series, kind: ChartKind, title: str, config: PDFConfig,
                    fig_config: FigureConfig) -> Optional[bytes]:
    try:
        return render_chart(series, kind, title, config.chart_width_px,
                            config.chart_height_px, fig_config)
    except ChartRenderError as e:
        logger.warning("[Charts] Skipping '%s': %s", title, e)
        return None


def render_report_charts(dataset: Dataset, config: PDFConfig,
                         fig_config: Optional[FigureConfig] = None) -> List[Optional[bytes]]:
    """Render the three report charts one after another.

    Returns:
        PNG bytes per chart in display order, None for a chart that failed
    """
    fig_config = fig_config or FigureConfig()
    if not config.include_charts:
        return []

    return [
        _render_or_skip(to_series(dataset.progress), ChartKind.LINE,
                        "Évolution de la progression", config, fig_config),
        _render_or_skip(to_series(dataset.departments), ChartKind.PIE,
                        "Répartition par département", config, fig_config),
        _render_or_skip(to_series(MONTHLY_REPORTS), ChartKind.BAR,
                        "Rapports mensuels", config, fig_config),
    ]


def build_global_report(
    dataset: Dataset,
    config: Optional[PDFConfig] = None,
    generated_at: Optional[datetime] = None,
    fig_config: Optional[FigureConfig] = None,
) -> bytes:
    """Build the complete intern summary PDF.

    Args:
        dataset: Interns, projects, tasks and chart series
        config: PDF configuration
        generated_at: Timestamp printed under the title (defaults to now)
        fig_config: Chart configuration

    Returns:
        PDF bytes
    """
    config = config or PDFConfig()
    generated_at = generated_at or datetime.now()
    geometry = config.geometry

    stats = compute_report_stats(dataset)
    details = person_details(dataset)

    buffer = BytesIO()
    canvas = Canvas(buffer, pagesize=config.page_size)
    canvas.setTitle(config.title)
    canvas.setAuthor(config.author)

    state = initial_state(geometry)
    state = build_title_block(canvas, state, config.title, format_timestamp(generated_at), geometry)
    state = build_summary_section(canvas, state, stats, geometry)
    state = build_charts_section(canvas, state, render_report_charts(dataset, config, fig_config), geometry)
    state = build_details_section(canvas, state, dataset.people, details, geometry)
    state = build_conclusion_section(canvas, state, stats, geometry)

    canvas.showPage()
    canvas.save()

    pdf_bytes = buffer.getvalue()
    buffer.close()

    logger.info("Report built: %d pages, %d interns, %d bytes",
                state.page, len(dataset.people), len(pdf_bytes))
    return pdf_bytes


def generate_global_report(
    dataset: Dataset,
    output_dir: Optional[Union[str, Path]] = None,
    config: Optional[PDFConfig] = None,
    generated_at: Optional[datetime] = None,
) -> Path:
    """Build the report and save it as Rapport_Global_<ISO date>.pdf.

    The file name carries the UTC day of generated_at.

    Args:
        dataset: Report input collections
        output_dir: Target directory (defaults to Config.REPORT_OUTPUT_DIR)
        config: PDF configuration
        generated_at: Report timestamp (defaults to now)

    Returns:
        Path of the saved PDF
    """
    generated_at = generated_at or datetime.now()
    pdf_bytes = build_global_report(dataset, config, generated_at)
    return write_report(
        output_dir or Config.REPORT_OUTPUT_DIR,
        report_filename(report_day(generated_at)),
        pdf_bytes,
    )
