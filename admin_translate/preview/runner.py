"""Render the translation preview page from a CSV export.

This module provides a headless runner that loads translated records from a
CSV file and writes the rendered preview page. It is intended for
programmatic invocation and is what the CLI calls.

Usage Examples
--------------
Typical programmatic usage with config defaults::

    from admin_translate.preview.runner import run_from_config
    ok = run_from_config(csv_path=Path("data/translations.csv"))

Explicit settings::

    run_from_config(
        csv_path=Path("data/translations.csv"),
        output_file=Path("site/translations.html"),
        fields=[FieldSpec("title"), FieldSpec("body", {"as_": "text"})],
        settings=LocaleSettings(("en", "fr"), "en"),
    )
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple, Sequence

from admin_translate.config import DEFAULT_PREVIEW_FIELDS, OUTPUT_HTML_FILE
from admin_translate.exceptions import AppError
from admin_translate.forms.records import FieldSpec
from admin_translate.locales import LocaleSettings, load_locale_settings

from .data_loader import build_records, read_translations_csv
from .page import generate_preview_html, write_html_output
from .templating import load_template_and_placeholders

logger = logging.getLogger(__name__)


class RunSummary(NamedTuple):
    ok: bool
    record_count: int
    output_file: Path


def run_preview(
    csv_path: Path,
    output_file: Path | None = None,
    fields: Sequence[FieldSpec] | None = None,
    settings: LocaleSettings | None = None,
    template_path: Path | None = None,
) -> RunSummary:
    r"""Load records, render the preview page and write it.

    Parameters
    ----------
    csv_path : Path
        Translations CSV.
    output_file : Path | None, optional
        Destination; ``OUTPUT_HTML_FILE`` when ``None``.
    fields : Sequence[FieldSpec] | None, optional
        Inputs per locale; ``DEFAULT_PREVIEW_FIELDS`` when ``None``.
    settings : LocaleSettings | None, optional
        Locales; loaded from the environment when ``None``.
    template_path : Path | None, optional
        Page template file; the built-in template when ``None``.

    Returns
    -------
    RunSummary
        ``ok`` is false when rendering or writing failed (the error is
        logged).
    """
    output_file = Path(output_file) if output_file is not None else OUTPUT_HTML_FILE
    field_specs = list(fields) if fields else [FieldSpec(name) for name in DEFAULT_PREVIEW_FIELDS]
    try:
        settings = settings or load_locale_settings()
        records = build_records(read_translations_csv(Path(csv_path)))
        logger.info("Loaded %d translated record(s) from %s", len(records), csv_path)
        if template_path is not None:
            template_content, _ = load_template_and_placeholders(Path(template_path))
            html = generate_preview_html(records, settings, field_specs, template_content)
        else:
            html = generate_preview_html(records, settings, field_specs)
        write_html_output(html, output_file)
    except AppError as exc:
        logger.error("Preview rendering failed: %s", exc, extra={"error": exc.to_dict()})
        return RunSummary(False, 0, output_file)
    except Exception:
        logger.exception("Failed to render translation preview")
        return RunSummary(False, 0, output_file)
    logger.info("Wrote translation preview to %s", output_file)
    return RunSummary(True, len(records), output_file)


def run_from_config(
    csv_path: Path,
    output_file: Path | None = None,
    fields: Sequence[FieldSpec] | None = None,
    settings: LocaleSettings | None = None,
) -> bool:
    """Render the preview page; ``True`` on success, ``False`` if an error was logged."""
    return run_preview(csv_path, output_file, fields, settings).ok


__all__ = ["RunSummary", "run_from_config", "run_preview"]
