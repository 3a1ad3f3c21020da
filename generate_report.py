#!/usr/bin/env python3
"""
Intern Summary Report Script.

Usage:
    python generate_report.py                       # Sample dataset, default output dir
    python generate_report.py --data dataset.json   # Dataset loaded from JSON
    python generate_report.py --output-dir out/     # Custom output directory
"""
import sys
import argparse
import logging

from modules.config import Config
from modules.sample_data import load_sample_dataset
from modules.reporting import generate_global_report, load_dataset


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate the Rapport Global des Stagiaires PDF")
    parser.add_argument("--data", help="JSON dataset (interns, projects, tasks, progress, departments)")
    parser.add_argument("--output-dir", default=str(Config.REPORT_OUTPUT_DIR), help="Directory for the PDF")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    dataset = load_dataset(args.data) if args.data else load_sample_dataset()
    pdf_path = generate_global_report(dataset, args.output_dir)
    print(f"✅ Report saved to: {pdf_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
