"""Global configuration constants for the project.

Defines the markup class names, i18n key namespace, locale defaults and the
paths used by the preview pipeline and CLI.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
LOG_DIR: Path = PROJECT_ROOT / "logs"
ENV_FILE: Path = PROJECT_ROOT / ".env"

# Locale defaults (overridable through the environment, see locales.py)
DEFAULT_AVAILABLE_LOCALES: tuple[str, ...] = ("en",)
DEFAULT_LOCALE: str = "en"
ENV_AVAILABLE_LOCALES: str = "ADMIN_TRANSLATE_LOCALES"
ENV_DEFAULT_LOCALE: str = "ADMIN_TRANSLATE_DEFAULT_LOCALE"

# Markup conventions shared with the admin stylesheet and tab script
TRANSLATE_CONTAINER_CLASS: str = "activeadmin-translate"
TRANSLATE_INPUT_CLASS: str = "activeadmin-translate-input"
LOCALE_TABS_CLASS: str = "locales"
LOCALE_FIELDSET_CLASS: str = "inputs locale"
HAS_MANY_FIELDSET_CLASS: str = "has_many_fields"
TAB_SCRIPT_TEMPLATE: str = "$('.{container_class}.{translate_id}').tabs();"

# Association and i18n keys
DEFAULT_TRANSLATIONS_ASSOCIATION: str = "translations"
LOCALE_ATTRIBUTE: str = "locale"
INPUT_TYPES: tuple[str, ...] = ("string", "text", "hidden", "email", "number", "boolean")
LOCALE_LABEL_NAMESPACE: str = "active_admin.translate"

# UI defaults
LANG: str = "en"

# Preview pipeline defaults
CSV_DELIMITER: str = ";"
REQUIRED_CSV_COLUMNS: tuple[str, ...] = ("record_type", "record_id", "locale")
DEFAULT_PREVIEW_FIELDS: tuple[str, ...] = ("title",)
OUTPUT_HTML_FILE: Path = PROJECT_ROOT / "output" / "translations.html"
PREVIEW_PAGE_TEMPLATE: str = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head><meta charset=\"utf-8\"><title>{title}</title></head>\n"
    "<body>\n"
    "<h1>{title}</h1>\n"
    "{forms_html}\n"
    "</body>\n"
    "</html>\n"
)
NO_RECORDS_HTML: str = "<p>No translated records found.</p>"

# CLI defaults and logging
LOG_FILENAME_CLI: str = "admin_translate.log"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
