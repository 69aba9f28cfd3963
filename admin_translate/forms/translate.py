"""Form builder with inputs arranged by locale in tabs.

``TranslateFormBuilder`` adds ``translate_inputs`` and ``translate_input`` to
the nested-attributes ``FormBuilder``. Both delegate the rendering to
``LocaleFormRenderer`` and take care of the form-level plumbing: picking the
active output sink, flagging the template as rendering a has-many block,
remembering whether the hidden locale inputs were already emitted and
concatenating into the template's output buffer when a render is active.

Typical usage::

    f = TranslateFormBuilder(post, settings=load_locale_settings())
    html = f.translate_inputs(block=lambda t: [t.input("title"), t.input("body", as_="text")])
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from admin_translate.config import DEFAULT_TRANSLATIONS_ASSOCIATION
from admin_translate.forms.builder import FieldBlock, FormBuilder
from admin_translate.forms.markup import SafeBuffer, Template
from admin_translate.forms.records import Errors
from admin_translate.forms.renderer import LocaleFormRenderer
from admin_translate.locales import LocaleSettings, load_locale_settings


class TranslateFormBuilder(FormBuilder):
    r"""Form builder exposing ``translate_inputs`` / ``translate_input``.

    Parameters
    ----------
    object, object_name, template, errors
        See ``FormBuilder``.
    settings : LocaleSettings | None
        Locales to render. Loaded with ``load_locale_settings()`` when omitted.
    renderer_options : dict | None
        Extra keyword arguments for ``LocaleFormRenderer`` (``translate``,
        ``identity``).
    """

    def __init__(
        self,
        object: Any,
        object_name: str | None = None,
        template: Template | None = None,
        *,
        errors: Errors | None = None,
        settings: LocaleSettings | None = None,
        renderer_options: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(object, object_name, template, errors=errors)
        self._settings = settings
        self.renderer_options = dict(renderer_options or {})
        self.has_locale_field = False

    @property
    def settings(self) -> LocaleSettings:
        if self._settings is None:
            self._settings = load_locale_settings()
        return self._settings

    @property
    def renderer(self) -> LocaleFormRenderer:
        return LocaleFormRenderer(self, self.settings, **self.renderer_options)

    def _active_sink(self) -> SafeBuffer:
        if self.form_buffers:
            return self.form_buffers[-1]
        return SafeBuffer()

    def _emit(self, html: Markup) -> Markup:
        if self.template.output_buffer is not None:
            self.template.concat(html)
        return html

    def translate_inputs(
        self,
        name: str = DEFAULT_TRANSLATIONS_ASSOCIATION,
        block: FieldBlock | None = None,
    ) -> Markup:
        """Create the locale field sets, one tab per locale.

        Parameters
        ----------
        name : str
            Name of the translations association.
        block : FieldBlock | None
            Declares the inputs of each locale's nested builder.
        """
        self.template.assign(has_many_block=True)
        html = self.renderer.render_translation_block(name, block, sink=self._active_sink())
        return self._emit(html)

    def translate_input(self, method: str, **options: Any) -> Markup:
        """Create one raw input per locale for ``method``."""
        self.template.assign(has_many_block=True)
        result = self.renderer.render_translation_input(
            method,
            options,
            sink=self._active_sink(),
            locale_field_emitted=self.has_locale_field,
        )
        self.has_locale_field = result.locale_field_emitted
        return self._emit(result.html)
