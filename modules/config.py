import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# Base directory
BASE_DIR = Path(__file__).parent.parent

class Config:
    # --- Application Settings ---
    APP_TITLE = os.getenv("APP_TITLE", "Rapport Global des Stagiaires")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- Output ---
    REPORT_OUTPUT_DIR = Path(os.getenv("REPORT_OUTPUT_DIR", str(BASE_DIR / "reports")))
    REPORT_FILE_PREFIX = os.getenv("REPORT_FILE_PREFIX", "Rapport_Global")

    # --- Charts ---
    CHART_WIDTH = int(os.getenv("CHART_WIDTH", "800"))
    CHART_HEIGHT = int(os.getenv("CHART_HEIGHT", "400"))
    CHART_DPI = int(os.getenv("CHART_DPI", "100"))

    # --- Colors ---
    COLOR_PRIMARY = os.getenv("COLOR_PRIMARY", "#f97316")
    COLOR_TEXT = os.getenv("COLOR_TEXT", "#1f2937")
    COLOR_MUTED = os.getenv("COLOR_MUTED", "#6b7280")
    COLOR_PANEL = os.getenv("COLOR_PANEL", "#f9fafb")
