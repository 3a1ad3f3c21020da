"""
PDF Styles Module.

Defines page geometry, typography and colors for the intern summary PDF.
Uses ReportLab library. No statistics here.
"""
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.colors import HexColor, white
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
import logging
import os
from dataclasses import dataclass, field

from modules.config import Config

logger = logging.getLogger("InternReport.PDFStyles")


# ============================================================================
# PAGE CONFIGURATION (millimetres, measured from the top-left corner)
# ============================================================================

PAGE_SIZE = A4
PAGE_WIDTH_MM = PAGE_SIZE[0] / mm    # 210
PAGE_HEIGHT_MM = PAGE_SIZE[1] / mm   # 297
TOP_MARGIN_MM = 20
BOTTOM_MARGIN_MM = 20
SIDE_MARGIN_MM = 15                  # header bars, panels and charts
TEXT_INDENT_MM = 20                  # body text


# ============================================================================
# COLOR PALETTE
# ============================================================================

COLORS = {
    "primary": HexColor(Config.COLOR_PRIMARY),   # orange titles and header bars
    "text": HexColor(Config.COLOR_TEXT),         # neutral dark body text
    "text_light": HexColor(Config.COLOR_MUTED),  # captions, panel details
    "panel": HexColor(Config.COLOR_PANEL),       # shaded detail panels
    "white": white,
}


# ============================================================================
# TYPOGRAPHY (UTF-8 Support)
# ============================================================================

# NOTE: The standard Helvetica font only covers WinAnsi. DejaVuSans bundled
# with matplotlib covers every French accent and the bullet glyph.

def register_fonts():
    """Register TrueType fonts for PDF generation."""
    try:
        import matplotlib
        font_dir = os.path.join(matplotlib.get_data_path(), "fonts", "ttf")

        pdfmetrics.registerFont(TTFont("DejaVuSans", os.path.join(font_dir, "DejaVuSans.ttf")))
        pdfmetrics.registerFont(TTFont("DejaVuSans-Bold", os.path.join(font_dir, "DejaVuSans-Bold.ttf")))

        return "DejaVuSans", "DejaVuSans-Bold"
    except Exception as e:
        # Fallback to standard fonts if registration fails
        logger.warning("DejaVuSans unavailable, falling back to Helvetica: %s", e)
        return "Helvetica", "Helvetica-Bold"

FONT_FAMILY, FONT_FAMILY_BOLD = register_fonts()

# title > section header > group header > body > caption
FONT_SIZE_TITLE = 24
FONT_SIZE_HEADING = 14
FONT_SIZE_GROUP = 12
FONT_SIZE_PANEL_NAME = 11
FONT_SIZE_BODY = 10
FONT_SIZE_SMALL = 9


@dataclass(frozen=True)
class PageGeometry:
    """Printable area used by the layout cursor, in millimetres."""
    width: float = PAGE_WIDTH_MM
    height: float = PAGE_HEIGHT_MM
    top: float = TOP_MARGIN_MM
    bottom: float = BOTTOM_MARGIN_MM

    @property
    def limit(self) -> float:
        """Lowest y a block may reach before a page break."""
        return self.height - self.bottom


@dataclass
class PDFConfig:
    """Configuration for PDF generation."""
    geometry: PageGeometry = field(default_factory=PageGeometry)
    title: str = "RAPPORT GLOBAL DES STAGIAIRES"
    author: str = Config.APP_TITLE
    include_charts: bool = True
    chart_width_px: int = Config.CHART_WIDTH
    chart_height_px: int = Config.CHART_HEIGHT

    @property
    def page_size(self):
        return (self.geometry.width * mm, self.geometry.height * mm)


