"""In-memory records, translations and inflection helpers.

A ``TranslatedRecord`` is the parent entity being edited; it owns one
``Translation`` per locale. Both are ``Model`` objects: plain attribute bags
with an ``errors`` collection and an optional persisted ``id``. The renderer
only reads them, apart from handing the record's errors to the default-locale
translation for the duration of a render.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Mapping

from admin_translate.config import INPUT_TYPES
from admin_translate.exceptions import TranslationNotFoundError

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def underscore(word: str) -> str:
    """``"BlogPost"`` -> ``"blog_post"``."""
    return _CAMEL_BOUNDARY.sub("_", word).replace("-", "_").lower()


def dasherize(word: str) -> str:
    return word.replace("_", "-")


def camelize(word: str) -> str:
    """``"blog_post"`` -> ``"BlogPost"``."""
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[_\-\s]+", word) if part)


def titleize(word: str) -> str:
    """Human readable attribute name: ``"meta_description"`` -> ``"Meta Description"``.

    A trailing ``_id`` is dropped the way foreign keys are humanized.
    """
    word = underscore(str(word))
    if word.endswith("_id") and word != "_id":
        word = word[: -len("_id")]
    return " ".join(part.capitalize() for part in word.split("_") if part)


class Errors:
    """Attribute name -> error messages."""

    def __init__(self, messages: Mapping[str, list[str]] | None = None) -> None:
        self._messages: dict[str, list[str]] = {}
        for attribute, values in (messages or {}).items():
            for value in values:
                self.add(attribute, value)

    def add(self, attribute: str, message: str) -> None:
        self._messages.setdefault(str(attribute), []).append(message)

    def get(self, attribute: str) -> list[str]:
        return list(self._messages.get(str(attribute), []))

    __getitem__ = get

    def full_messages(self) -> list[str]:
        return [
            f"{titleize(attribute)} {message}"
            for attribute, messages in self._messages.items()
            for message in messages
        ]

    def clear(self) -> None:
        self._messages.clear()

    def __contains__(self, attribute: object) -> bool:
        return bool(self._messages.get(str(attribute)))

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"Errors({self._messages!r})"


class Model:
    """Attribute bag with errors and an optional persisted id.

    Subclasses may declare ``ATTRIBUTE_NAMES`` to override the human readable
    names returned by ``human_attribute_name``.
    """

    ATTRIBUTE_NAMES: ClassVar[dict[str, str]] = {}

    def __init__(self, id: Any = None, errors: Errors | None = None, **attributes: Any) -> None:
        self.id = id
        self.errors = errors if errors is not None else Errors()
        self.attributes: dict[str, Any] = dict(attributes)

    @property
    def persisted(self) -> bool:
        return self.id is not None

    def value_for(self, attribute: str) -> Any:
        if attribute == "id":
            return self.id
        return self.attributes.get(attribute)

    @classmethod
    def human_attribute_name(cls, attribute: str, default: str | None = None) -> str:
        name = cls.ATTRIBUTE_NAMES.get(str(attribute))
        if name:
            return name
        return default if default is not None else titleize(attribute)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, {self.attributes!r})"


class Translation(Model):
    """Per-locale sub-record holding the localized attribute values."""

    def __init__(self, locale: str, id: Any = None, errors: Errors | None = None, **attributes: Any) -> None:
        super().__init__(id=id, errors=errors, **attributes)
        self.locale = locale

    def value_for(self, attribute: str) -> Any:
        if attribute == "locale":
            return self.locale
        return super().value_for(attribute)


class TranslatedRecord(Model):
    r"""Parent record owning one ``Translation`` per locale.

    Parameters
    ----------
    translations : list[Translation] | None
        Existing translations. At most one per locale is kept; later
        duplicates are ignored.

    Examples
    --------
    >>> class Post(TranslatedRecord):
    ...     pass
    >>> post = Post(id=7, translations=[Translation("en", title="Hello")])
    >>> post.translation_for("en").value_for("title")
    'Hello'
    >>> post.translation_for("fr").locale
    'fr'
    """

    translation_class: ClassVar[type[Translation]] = Translation

    def __init__(
        self,
        id: Any = None,
        errors: Errors | None = None,
        translations: list[Translation] | None = None,
        **attributes: Any,
    ) -> None:
        super().__init__(id=id, errors=errors, **attributes)
        self.translations: list[Translation] = []
        for translation in translations or []:
            if self._find_translation(translation.locale) is None:
                self.translations.append(translation)

    def _find_translation(self, locale: str) -> Translation | None:
        for translation in self.translations:
            if translation.locale == str(locale):
                return translation
        return None

    def translation_for(self, locale: str, build_if_missing: bool = True) -> Translation:
        """Return the translation for ``locale``, building it when missing.

        Raises
        ------
        TranslationNotFoundError
            If no translation exists and ``build_if_missing`` is false.
        """
        translation = self._find_translation(locale)
        if translation is not None:
            return translation
        if not build_if_missing:
            raise TranslationNotFoundError(
                f"{type(self).__name__} has no translation for {locale!r}",
                context={"record_id": self.id, "locale": str(locale)},
            )
        translation = self.translation_class(str(locale))
        self.translations.append(translation)
        return translation

    @property
    def locales(self) -> list[str]:
        return [translation.locale for translation in self.translations]


@dataclass
class FieldSpec:
    """A field name plus its rendering options (``label``, ``as_``, ``hint`` ...)."""

    name: str
    options: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def parse(cls, value: str) -> "FieldSpec":
        """Parse ``"name"`` or ``"name:type"`` as given on the command line."""
        name, _, input_type = value.partition(":")
        name = name.strip()
        if not name:
            raise ValueError(f"Invalid field spec: {value!r}")
        input_type = input_type.strip()
        if input_type and input_type not in INPUT_TYPES:
            raise ValueError(f"Unsupported input type in field spec: {value!r}")
        options: dict[str, Any] = {}
        if input_type:
            options["as_"] = input_type
        return cls(name, options)
