"""Translation preview pipeline.

Loads translated records from a CSV export and renders their tabbed
translation forms into a standalone HTML page.
"""

from .data_loader import build_records, read_translations_csv, record_class_for
from .page import generate_preview_html, render_record_form, write_html_output
from .runner import RunSummary, run_from_config, run_preview

__all__ = [
    "RunSummary",
    "build_records",
    "generate_preview_html",
    "read_translations_csv",
    "record_class_for",
    "render_record_form",
    "run_from_config",
    "run_preview",
    "write_html_output",
]
