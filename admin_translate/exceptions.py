"""Error taxonomy for locale settings, form rendering and the preview run.

Every failure the package raises on purpose derives from ``AppError``, which
carries a stable code and a small context mapping. The CLI reports any
``AppError`` raised while loading locale settings with exit code 2, and the
preview runner logs ``to_dict()`` when a render fails.

Codes
-----
``CONFIGURATION_ERROR``
    Locale settings that cannot be used (empty list, unknown default).
``DATA_VALIDATION_ERROR``
    Translations CSV or input declarations the renderer cannot handle.
``USER_INPUT_ERROR``
    Command line values such as an unsupported UI language.
``TRANSLATION_NOT_FOUND``
    A record lacks a translation for a locale and may not build one.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base error with a machine-readable ``code`` and log ``context``.

    Examples
    --------
    >>> err = AppError("CONFIGURATION_ERROR", "no locales", context={"available_locales": []})
    >>> str(err)
    'CONFIGURATION_ERROR: no locales'
    """

    __slots__ = ("code", "message", "context")

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Mapping passed to the logger as ``extra={"error": ...}``."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
        }


class ConfigurationError(AppError):
    """Locale settings are empty, blank or name a default that is not available."""

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("CONFIGURATION_ERROR", message, context=context)


class DataValidationError(AppError):
    """A CSV row set, record type or input type cannot be rendered."""

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("DATA_VALIDATION_ERROR", message, context=context)


class UserInputError(AppError):
    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("USER_INPUT_ERROR", message, context=context)


class TranslationNotFoundError(AppError):
    """``translation_for(locale, build_if_missing=False)`` found nothing for ``locale``."""

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__("TRANSLATION_NOT_FOUND", message, context=context)
