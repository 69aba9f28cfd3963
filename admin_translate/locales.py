"""Locale configuration for the translation form renderer.

This module provides ``LocaleSettings``, the explicit ordered locale list and
default locale handed to the renderer, and ``load_locale_settings`` which
builds one from the process environment and an optional project ``.env``.

Role in Architecture
--------------------
- Forms the boundary between the process environment and the renderer's
  strongly-typed locale configuration.
- The renderer never reads global locale state; it only sees the settings
  object it was given.

Examples
--------
>>> from admin_translate.locales import LocaleSettings
>>> settings = LocaleSettings(("en", "fr"), "en")
>>> settings.available_locales
('en', 'fr')
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from dotenv import load_dotenv

import admin_translate.config as _project_config
from admin_translate.config import (
    DEFAULT_AVAILABLE_LOCALES,
    DEFAULT_LOCALE,
    ENV_AVAILABLE_LOCALES,
    ENV_DEFAULT_LOCALE,
)
from admin_translate.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocaleSettings:
    r"""Ordered set of available locales plus the default locale.

    Attributes
    ----------
    available_locales : tuple[str, ...]
        Locales in display order. Duplicates are removed, keeping the first
        occurrence.
    default_locale : str
        The locale whose translation receives the record's errors. Must be one
        of ``available_locales``.

    Raises
    ------
    ConfigurationError
        If no locales are configured, a locale is blank, or the default locale
        is not available.
    """

    available_locales: tuple[str, ...]
    default_locale: str

    def __post_init__(self) -> None:
        locales = normalize_locales(self.available_locales)
        if not locales:
            raise ConfigurationError("At least one locale must be configured")
        if self.default_locale not in locales:
            raise ConfigurationError(
                f"Default locale {self.default_locale!r} is not available",
                context={"available_locales": list(locales)},
            )
        object.__setattr__(self, "available_locales", locales)

    def __iter__(self):
        return iter(self.available_locales)

    def __len__(self) -> int:
        return len(self.available_locales)

    def is_default(self, locale: str) -> bool:
        return locale == self.default_locale


def normalize_locales(locales: Iterable[str]) -> tuple[str, ...]:
    """Strip, validate and de-duplicate locales preserving their order.

    Raises
    ------
    ConfigurationError
        If a locale is empty after stripping.
    """
    seen: list[str] = []
    for raw in locales:
        locale = str(raw).strip()
        if not locale:
            raise ConfigurationError("Blank locale in locale configuration")
        if locale not in seen:
            seen.append(locale)
    return tuple(seen)


def parse_locale_list(value: str | None) -> tuple[str, ...] | None:
    """Split a comma separated locale list; ``None`` for an unset or blank value."""
    if value is None or not value.strip():
        return None
    return tuple(item.strip() for item in value.split(",") if item.strip())


def load_locale_settings(
    locales: Iterable[str] | None = None,
    default_locale: str | None = None,
    *,
    env_path: Path | None = None,
) -> LocaleSettings:
    r"""Build ``LocaleSettings`` from explicit values, the environment and ``.env``.

    Explicit arguments win over ``ADMIN_TRANSLATE_LOCALES`` /
    ``ADMIN_TRANSLATE_DEFAULT_LOCALE``, which win over the project defaults in
    ``admin_translate.config``. When no default locale is given anywhere the
    configured default is used if available, otherwise the first locale.

    Parameters
    ----------
    locales : Iterable[str] | None, optional
        Explicit ordered locales.
    default_locale : str | None, optional
        Explicit default locale.
    env_path : Path | None, optional
        ``.env`` file to load. Defaults to ``ENV_FILE`` under the project root.

    Returns
    -------
    LocaleSettings
        Validated settings.

    Raises
    ------
    ConfigurationError
        If the resulting settings are invalid.

    Examples
    --------
    >>> load_locale_settings(["en", "fr"]).default_locale
    'en'
    >>> load_locale_settings(["fr", "de"]).default_locale
    'fr'
    """
    env_file = Path(env_path) if env_path is not None else Path(_project_config.ENV_FILE)
    if env_file.exists():
        load_dotenv(env_file, override=False)
        logger.debug("Loaded locale environment from %s", env_file)

    resolved_locales: tuple[str, ...]
    if locales is not None:
        resolved_locales = normalize_locales(locales)
    else:
        resolved_locales = (
            parse_locale_list(os.getenv(ENV_AVAILABLE_LOCALES))
            or DEFAULT_AVAILABLE_LOCALES
        )

    resolved_default = default_locale or os.getenv(ENV_DEFAULT_LOCALE)
    if not resolved_default:
        if DEFAULT_LOCALE in resolved_locales or not resolved_locales:
            resolved_default = DEFAULT_LOCALE
        else:
            resolved_default = resolved_locales[0]

    settings = LocaleSettings(tuple(resolved_locales), resolved_default.strip())
    logger.debug(
        "Locale settings: locales=%s default=%s",
        ",".join(settings.available_locales),
        settings.default_locale,
    )
    return settings
