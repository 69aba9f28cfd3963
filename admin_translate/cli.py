"""CLI entrypoint and logging/argument utilities for the translation preview.

This module implements the command-line interface: argument parsing, logging
setup and locale configuration, then delegates to
:func:`admin_translate.preview.runner.run_preview`. Errors from the
centralized taxonomy (see :mod:`admin_translate.exceptions`) are reported
and mapped to exit code 2; any other failure exits with 1.

Examples
--------
CLI usage:

>>> # In shell
>>> python -m admin_translate --csv data/translations.csv --field title --field body:text --locales en,fr
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from admin_translate import i18n
from admin_translate.config import LOG_DIR, LOG_FILENAME_CLI, LOG_FORMAT, OUTPUT_HTML_FILE
from admin_translate.console_helpers import rprint, summary_panel
from admin_translate.exceptions import AppError
from admin_translate.forms.records import FieldSpec
from admin_translate.locales import load_locale_settings, parse_locale_list
from admin_translate.preview.runner import run_preview

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def configure_logging(level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure logging output for the CLI.

    All root handlers are replaced by a stream handler and, unless disabled
    (or ``DISABLE_FILE_LOGS=1`` is set), a file handler under ``LOG_DIR``.
    File handler creation failures are swallowed so a read-only checkout
    still gets console logging.

    Parameters
    ----------
    level : str, optional
        Logging level name, e.g. ``"DEBUG"``. Defaults to ``"INFO"``.
    enable_file : bool, optional
        Whether to add the file handler.
    """
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file and os.environ.get("DISABLE_FILE_LOGS") != "1":
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(0, logging.FileHandler(LOG_DIR / LOG_FILENAME_CLI, mode="a"))
        except OSError:
            pass
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for the preview renderer."""
    parser = argparse.ArgumentParser(
        prog="admin-translate",
        description="Render tabbed translation forms for records in a CSV export.",
    )
    parser.add_argument("--csv", type=Path, required=True, help="Semicolon-delimited translations CSV")
    parser.add_argument("--output", type=Path, default=OUTPUT_HTML_FILE, help="Output HTML file")
    parser.add_argument(
        "--field",
        dest="fields",
        action="append",
        type=FieldSpec.parse,
        help="Field to render per locale, as name or name:type (repeatable)",
    )
    parser.add_argument("--locales", help="Comma separated locales in display order, e.g. en,fr")
    parser.add_argument("--default-locale", help="Locale that shows the record's errors")
    parser.add_argument("--template", type=Path, help="Page template with {title} and {forms_html}")
    parser.add_argument("--ui-lang", choices=sorted(i18n.TEXTS), default=i18n.LANG)
    parser.add_argument("--log-level", default=os.environ.get("LOG_LEVEL", "INFO"))
    parser.add_argument("--no-file-log", action="store_true", help="Log to the console only")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = parse_cli_args(argv)
    configure_logging(args.log_level, enable_file=not args.no_file_log)
    try:
        i18n.set_language(args.ui_lang)
        settings = load_locale_settings(parse_locale_list(args.locales), args.default_locale)
    except AppError as exc:
        logger.error("Invalid configuration: %s", exc)
        rprint(summary_panel(str(exc), ok=False), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    summary = run_preview(args.csv, args.output, args.fields, settings, args.template)
    if not summary.ok:
        rprint(summary_panel(i18n.translate("summary_failed"), ok=False), file=sys.stderr)
        return EXIT_FAILURE
    if summary.record_count == 0:
        rprint(summary_panel(i18n.translate("summary_no_records").format(path=args.csv)))
    else:
        message = i18n.translate("summary_rendered").format(
            count=summary.record_count, path=summary.output_file
        )
        rprint(summary_panel(message))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
