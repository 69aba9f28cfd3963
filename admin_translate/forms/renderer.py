"""Locale-tab rendering for translated records.

``LocaleFormRenderer`` renders the per-locale inputs of a record that keeps
its localized attributes in one translation sub-record per locale. Given a
form builder bound to the record and the configured locales it emits:

- a tab navigation (``<ul class="locales">``) with one link per locale,
- one field group per locale, scoped to that locale's translation and
  carrying a DOM id that is unique per record instance,
- a script that activates tab switching on the container.

The locale set is handed in explicitly as ``LocaleSettings``. The record's
errors are given to the default locale's translation so inline errors show
up next to the default-locale inputs; every other locale renders against its
own errors.

Examples
--------
>>> from admin_translate.forms.builder import FormBuilder
>>> from admin_translate.forms.records import TranslatedRecord
>>> from admin_translate.locales import LocaleSettings
>>> class Post(TranslatedRecord):
...     pass
>>> renderer = LocaleFormRenderer(
...     FormBuilder(Post()), LocaleSettings(("en", "fr"), "en"), identity=lambda r: 7
... )
>>> renderer.field_id("fr")
'locale-fr-post-7'
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, NamedTuple

from markupsafe import Markup

from admin_translate import i18n
from admin_translate.config import (
    DEFAULT_TRANSLATIONS_ASSOCIATION,
    HAS_MANY_FIELDSET_CLASS,
    LOCALE_ATTRIBUTE,
    LOCALE_FIELDSET_CLASS,
    LOCALE_LABEL_NAMESPACE,
    LOCALE_TABS_CLASS,
    TAB_SCRIPT_TEMPLATE,
    TRANSLATE_CONTAINER_CLASS,
    TRANSLATE_INPUT_CLASS,
)
from admin_translate.forms.builder import FieldBlock, FormBuilder, capture
from admin_translate.forms.markup import SafeBuffer, safe_join
from admin_translate.forms.records import Errors, FieldSpec, dasherize, titleize, underscore
from admin_translate.locales import LocaleSettings

logger = logging.getLogger(__name__)


class TranslationInput(NamedTuple):
    """Result of ``render_translation_input``.

    ``locale_field_emitted`` is the flag to thread into the next call for the
    same form.
    """

    html: Markup
    locale_field_emitted: bool


def translate_id(record: Any, identity: Callable[[Any], Any] = id) -> str:
    """``"<dasherized class name>-<identity>"``, e.g. ``"blog-post-7"``."""
    return f"{dasherize(underscore(type(record).__name__))}-{identity(record)}"


def field_id(locale: str, record_translate_id: str) -> str:
    return f"locale-{locale}-{record_translate_id}"


def fields_block(specs: list[FieldSpec]) -> FieldBlock:
    """Build a field block that renders one input per ``FieldSpec``."""

    def block(form: FormBuilder) -> Markup:
        return safe_join(form.input(spec.name, **spec.options) for spec in specs)

    return block


class LocaleFormRenderer:
    r"""Render translated inputs for the record bound to ``builder``.

    Parameters
    ----------
    builder : FormBuilder
        Builder of the parent form; ``builder.object`` is the record.
    settings : LocaleSettings
        Ordered locales and default locale.
    translate : Callable[[str], str], optional
        Localized string lookup used for locale labels.
    identity : Callable[[Any], Any], optional
        Instance identity used in DOM ids. Defaults to ``id``.
    """

    def __init__(
        self,
        builder: FormBuilder,
        settings: LocaleSettings,
        *,
        translate: Callable[[str], str] = i18n.translate,
        identity: Callable[[Any], Any] = id,
    ) -> None:
        self.builder = builder
        self.settings = settings
        self.translate = translate
        self.identity = identity

    @property
    def record(self) -> Any:
        return self.builder.object

    @property
    def template(self):
        return self.builder.template

    def translate_id(self) -> str:
        return translate_id(self.record, self.identity)

    def field_id(self, locale: str) -> str:
        return field_id(locale, self.translate_id())

    def locale_label(self, locale: str) -> str:
        return self.translate(f"{LOCALE_LABEL_NAMESPACE}.{locale}")

    def human_attribute_name(self, method: str) -> str:
        hook = getattr(self.record, "human_attribute_name", None)
        if callable(hook):
            return hook(method, default=titleize(method))
        return titleize(method)

    def translation_with_errors(self, locale: str) -> tuple[Any, Errors]:
        """Resolve the translation for ``locale`` and its error context.

        The default locale's translation is given the record's errors.
        """
        translation = self.record.translation_for(locale)
        if self.settings.is_default(locale):
            translation.errors = self.record.errors
        return translation, translation.errors

    def error_contexts(self) -> dict[str, Errors]:
        """Error context per locale, attaching the record errors as a render pass does."""
        return {locale: self.translation_with_errors(locale)[1] for locale in self.settings}

    def tab_script(self) -> Markup:
        script = TAB_SCRIPT_TEMPLATE.format(
            container_class=TRANSLATE_CONTAINER_CLASS, translate_id=self.translate_id()
        )
        return self.template.content_tag("script", Markup(script))

    def locale_tabs(self) -> Markup:
        """Tab navigation: one ``<li><a href="#field_id">label</a></li>`` per locale."""
        items = (
            self.template.content_tag(
                "li",
                self.template.content_tag(
                    "a", self.locale_label(locale), href=f"#{self.field_id(locale)}"
                ),
            )
            for locale in self.settings
        )
        return self.template.content_tag("ul", safe_join(items), class_=LOCALE_TABS_CLASS)

    def locale_fields(self, name: str, block: FieldBlock | None) -> Markup:
        """One nested field group per locale, hidden locale input first.

        Child indices follow the locale position.
        """
        groups = SafeBuffer()
        for position, locale in enumerate(self.settings):
            translation, errors = self.translation_with_errors(locale)

            def fields(form: FormBuilder) -> Markup:
                out = SafeBuffer(form.input(LOCALE_ATTRIBUTE, as_="hidden"))
                if block is not None:
                    out.append(capture(block(form)))
                return Markup(out)

            groups.append(
                self.builder.inputs_for_nested_attributes(
                    for_=(name, translation),
                    id=self.field_id(locale),
                    class_=f"{LOCALE_FIELDSET_CLASS} locale-{locale}",
                    block=fields,
                    errors=errors,
                    child_index=position,
                )
            )
        return Markup(groups)

    def render_translation_block(
        self,
        name: str = DEFAULT_TRANSLATIONS_ASSOCIATION,
        field_block: FieldBlock | None = None,
        sink: SafeBuffer | None = None,
    ) -> Markup:
        r"""Render the tabbed translation block.

        Parameters
        ----------
        name : str
            Name of the translations association.
        field_block : FieldBlock | None
            Called with each locale's nested builder to declare the inputs.
        sink : SafeBuffer | None
            Active output buffer; the fragment is appended to it when given.

        Returns
        -------
        Markup
            ``<div class="activeadmin-translate <translate_id>">`` holding the
            tabs, the per-locale field groups and the activation script.
        """
        logger.debug(
            "Rendering translation block %s for %s across %d locale(s)",
            name,
            self.translate_id(),
            len(self.settings),
        )
        html = self.template.content_tag(
            "div",
            lambda: safe_join(
                [self.locale_tabs(), self.locale_fields(name, field_block), self.tab_script()]
            ),
            class_=f"{TRANSLATE_CONTAINER_CLASS} {self.translate_id()}",
        )
        if sink is not None:
            sink.append(html)
        return html

    def render_translation_input(
        self,
        method: str,
        options: Mapping[str, Any] | None = None,
        *,
        sink: SafeBuffer | None = None,
        locale_field_emitted: bool = False,
    ) -> TranslationInput:
        r"""Render one attribute once per locale inside a has-many fieldset.

        The hidden locale input is emitted for every locale unless
        ``locale_field_emitted`` is set; the returned flag is always set, so
        threading it into the next call for the same form suppresses the
        hidden inputs there.

        Parameters
        ----------
        method : str
            Attribute to render.
        options : Mapping[str, Any] | None
            ``FormBuilder.input`` options. Without an explicit ``label`` each
            locale is labelled ``"<Attribute>: <Locale label>"``.
        sink : SafeBuffer | None
            Active output buffer; the fragment is appended to it when given.
        locale_field_emitted : bool
            Whether an earlier call already emitted the hidden locale inputs.

        Returns
        -------
        TranslationInput
            The fragment and the updated flag.
        """
        human_attr = self.human_attribute_name(method)
        groups = SafeBuffer()
        for locale in self.settings:
            translation, errors = self.translation_with_errors(locale)
            opts = dict(options or {})
            if opts.get("label") is None:
                opts["label"] = f"{human_attr}: {self.locale_label(locale)}"

            def fields(form: FormBuilder, opts: dict[str, Any] = opts) -> Markup:
                out = SafeBuffer()
                if not locale_field_emitted:
                    out.append(form.input(LOCALE_ATTRIBUTE, as_="hidden"))
                out.append(form.input(method, **opts))
                return Markup(out)

            groups.append(
                self.builder.fields_for(DEFAULT_TRANSLATIONS_ASSOCIATION, translation, fields, errors=errors)
            )

        html = self.template.content_tag(
            "li",
            self.template.content_tag(
                "fieldset",
                self.template.content_tag("ol", groups),
                class_=HAS_MANY_FIELDSET_CLASS,
            ),
            class_=TRANSLATE_INPUT_CLASS,
        )
        if sink is not None:
            sink.append(html)
        logger.debug("Rendered %s across %d locale(s)", method, len(self.settings))
        return TranslationInput(html, True)
