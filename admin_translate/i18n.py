"""Internationalization helpers for the form renderer and CLI.

Provide the localized strings used by the renderer (locale tab labels under
``active_admin.translate.<locale>``) and by the command line summary, plus
utilities to select the current UI language.

Typical usage::

    from admin_translate.i18n import translate, set_language, LANG

"""

from __future__ import annotations

from admin_translate.config import LANG as _DEFAULT_LANG
from admin_translate.config import LOCALE_LABEL_NAMESPACE
from admin_translate.exceptions import UserInputError

LANG: str = _DEFAULT_LANG
TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "active_admin.translate.en": "English",
        "active_admin.translate.de": "German",
        "active_admin.translate.es": "Spanish",
        "active_admin.translate.fr": "French",
        "active_admin.translate.it": "Italian",
        "active_admin.translate.nl": "Dutch",
        "active_admin.translate.sv": "Swedish",
        "preview_title": "Translations",
        "summary_rendered": "Rendered {count} translated record form(s) to {path}",
        "summary_failed": "Rendering failed, see the log for details.",
        "summary_no_records": "No translated records found in {path}",
    },
    "fr": {
        "active_admin.translate.en": "Anglais",
        "active_admin.translate.de": "Allemand",
        "active_admin.translate.es": "Espagnol",
        "active_admin.translate.fr": "Français",
        "active_admin.translate.it": "Italien",
        "active_admin.translate.nl": "Néerlandais",
        "active_admin.translate.sv": "Suédois",
        "preview_title": "Traductions",
        "summary_rendered": "{count} formulaire(s) traduit(s) écrit(s) dans {path}",
        "summary_failed": "Le rendu a échoué, voir le journal.",
        "summary_no_records": "Aucun enregistrement traduit trouvé dans {path}",
    },
    "sv": {
        "active_admin.translate.en": "Engelska",
        "active_admin.translate.de": "Tyska",
        "active_admin.translate.es": "Spanska",
        "active_admin.translate.fr": "Franska",
        "active_admin.translate.it": "Italienska",
        "active_admin.translate.nl": "Nederländska",
        "active_admin.translate.sv": "Svenska",
        "preview_title": "Översättningar",
        "summary_rendered": "Skrev {count} översatta formulär till {path}",
        "summary_failed": "Renderingen misslyckades, se loggen.",
        "summary_no_records": "Inga översatta poster hittades i {path}",
    },
}


def translate(key: str, lang: str | None = None) -> str:
    r"""Translate a UI key to the requested or current language.

    Looks the key up in the requested language (``LANG`` when ``lang`` is
    ``None``), then in English. If the key is missing everywhere the key itself
    is returned for graceful fallback.

    Parameters
    ----------
    key : str
        The string key to translate, e.g. ``"active_admin.translate.fr"``.
    lang : str | None, optional
        UI language to translate into. Defaults to the module level ``LANG``.

    Returns
    -------
    str
        The translated string if available, or the key itself as fallback.

    Examples
    --------
    >>> translate("active_admin.translate.fr")
    'French'
    >>> translate("active_admin.translate.fr", "sv")
    'Franska'
    >>> translate("UNKNOWN_KEY")
    'UNKNOWN_KEY'
    """
    texts = TEXTS.get(lang or LANG, TEXTS["en"])
    if key in texts:
        return texts[key]
    return TEXTS["en"].get(key, key)


_ = translate


def locale_label(locale: str, lang: str | None = None) -> str:
    """Return the localized display name of ``locale``."""
    return translate(f"{LOCALE_LABEL_NAMESPACE}.{locale}", lang)


def set_language(lang: str) -> None:
    """Set the module level UI language.

    Raises
    ------
    UserInputError
        If ``lang`` has no string table.
    """
    if lang not in TEXTS:
        raise UserInputError(
            f"Unsupported UI language: {lang}",
            context={"supported": sorted(TEXTS)},
        )
    globals()["LANG"] = lang
