"""data_loader.py: Load translated records from a CSV export.

Each CSV row is one translation: the record it belongs to
(``record_type``, ``record_id``), its ``locale`` and one column per translated
attribute. Rows are grouped into ``TranslatedRecord`` instances, one class per
record type, so the renderer sees the same shape as a live record.

Usage
-----
>>> from pathlib import Path
>>> records = build_records(read_translations_csv(Path("translations.csv")))
>>> assert isinstance(records, list)
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from admin_translate.config import CSV_DELIMITER, REQUIRED_CSV_COLUMNS
from admin_translate.exceptions import DataValidationError
from admin_translate.forms.records import TranslatedRecord, Translation, camelize

logger = logging.getLogger(__name__)

_RECORD_CLASSES: dict[str, type[TranslatedRecord]] = {}
# translation_id becomes the persisted id; the others clash with Translation fields
_RESERVED_COLUMNS = ("translation_id", "id", "errors")


def record_class_for(record_type: str) -> type[TranslatedRecord]:
    """Return the ``TranslatedRecord`` subclass for ``record_type``, creating it once.

    ``"blog_post"`` maps to a class named ``BlogPost``.
    """
    class_name = camelize(record_type)
    if not class_name.isidentifier():
        raise DataValidationError(
            f"Invalid record type: {record_type!r}", context={"record_type": record_type}
        )
    if class_name not in _RECORD_CLASSES:
        _RECORD_CLASSES[class_name] = type(class_name, (TranslatedRecord,), {})
    return _RECORD_CLASSES[class_name]


def read_translations_csv(csv_path: Path) -> pd.DataFrame:
    r"""Read a semicolon-delimited translations CSV into a DataFrame.

    Parameters
    ----------
    csv_path : Path
        CSV with columns ``record_type``, ``record_id``, ``locale`` plus one
        column per translated attribute.

    Returns
    -------
    pd.DataFrame
        All columns as strings, missing values as empty strings. Empty when the
        file does not exist.

    Raises
    ------
    DataValidationError
        If the file cannot be parsed or a required column is missing.
    """
    if not csv_path.exists():
        logger.warning("Translations CSV not found: %s", csv_path)
        return pd.DataFrame()
    try:
        dataframe = pd.read_csv(csv_path, delimiter=CSV_DELIMITER, dtype=str).fillna("")
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DataValidationError(
            f"Could not parse translations CSV: {exc}", context={"path": str(csv_path)}
        ) from exc
    dataframe.columns = [str(column).strip() for column in dataframe.columns]
    missing = [column for column in REQUIRED_CSV_COLUMNS if column not in dataframe.columns]
    if missing:
        raise DataValidationError(
            "Translations CSV is missing required columns",
            context={"path": str(csv_path), "missing": missing},
        )
    return dataframe


def build_records(dataframe: pd.DataFrame) -> list[TranslatedRecord]:
    r"""Group translation rows into records.

    Rows without a record type, record id or locale are skipped. A repeated
    (record, locale) pair keeps its first row. Records keep the order in which
    they first appear.

    Parameters
    ----------
    dataframe : pd.DataFrame
        Output of ``read_translations_csv``.

    Returns
    -------
    list[TranslatedRecord]
        One record per (record_type, record_id).
    """
    if dataframe.empty:
        return []
    attribute_columns = [
        c for c in dataframe.columns if c not in REQUIRED_CSV_COLUMNS and c not in _RESERVED_COLUMNS
    ]
    records: dict[tuple[str, str], TranslatedRecord] = {}
    skipped = 0
    for _, row in dataframe.iterrows():
        record_type = str(row.get("record_type", "")).strip()
        record_id = str(row.get("record_id", "")).strip()
        locale = str(row.get("locale", "")).strip()
        if not (record_type and record_id and locale):
            skipped += 1
            continue
        key = (record_type, record_id)
        record = records.get(key)
        if record is None:
            record = record_class_for(record_type)(id=record_id)
            records[key] = record
        if locale in record.locales:
            skipped += 1
            continue
        values = {column: row[column] for column in attribute_columns}
        translation_id = str(row.get("translation_id", "")).strip() or None
        record.translations.append(Translation(locale, id=translation_id, **values))
    if skipped:
        logger.info("Skipped %d incomplete or duplicate translation row(s)", skipped)
    return list(records.values())
