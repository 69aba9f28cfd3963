"""Preview page rendering for translated records.

Turns a list of translated records into a standalone HTML page: one
``<form>`` per record holding the tabbed per-locale inputs, injected into a
page template. It is the outermost rendering layer and is agnostic of where
the records come from.

Example
-------
>>> from admin_translate.preview import page
>>> html = page.generate_preview_html(records, settings, [FieldSpec("title")])
>>> page.write_html_output(html, Path("/tmp/translations.html"))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Sequence

from markupsafe import Markup, escape

from admin_translate import i18n
from admin_translate.config import NO_RECORDS_HTML, PREVIEW_PAGE_TEMPLATE
from admin_translate.forms.markup import SafeBuffer, Template
from admin_translate.forms.records import FieldSpec, TranslatedRecord, underscore
from admin_translate.forms.renderer import fields_block
from admin_translate.forms.translate import TranslateFormBuilder
from admin_translate.locales import LocaleSettings

from .templating import render_template

logger = logging.getLogger(__name__)


def render_record_form(
    record: TranslatedRecord,
    settings: LocaleSettings,
    fields: Sequence[FieldSpec],
    *,
    identity: Callable[[Any], Any] = id,
) -> Markup:
    r"""Render one record's translation form.

    The form body is written through a template output buffer, the way the
    inputs end up in an enclosing form render.

    Parameters
    ----------
    record : TranslatedRecord
        Record to render.
    settings : LocaleSettings
        Locales to render.
    fields : Sequence[FieldSpec]
        Inputs declared for every locale.
    identity : Callable, optional
        Instance identity used in DOM ids.

    Returns
    -------
    Markup
        ``<form>`` holding the translation block.
    """
    object_name = underscore(type(record).__name__)
    template = Template(output_buffer=SafeBuffer())
    builder = TranslateFormBuilder(
        record,
        object_name,
        template,
        settings=settings,
        renderer_options={"translate": i18n.translate, "identity": identity},
    )
    builder.translate_inputs(block=fields_block(list(fields)))
    return template.content_tag(
        "form",
        template.output_buffer,
        class_="formtastic",
        id=f"edit_{object_name}_{record.id}",
        method="post",
    )


def generate_preview_html(
    records: Sequence[TranslatedRecord],
    settings: LocaleSettings,
    fields: Sequence[FieldSpec],
    template_content: str = PREVIEW_PAGE_TEMPLATE,
    *,
    identity: Callable[[Any], Any] = id,
) -> str:
    r"""Render the full preview page.

    Parameters
    ----------
    records : Sequence[TranslatedRecord]
        Records to render, in order.
    settings : LocaleSettings
        Locales to render.
    fields : Sequence[FieldSpec]
        Inputs per locale.
    template_content : str, optional
        Page template with ``{title}`` and ``{forms_html}`` placeholders.

    Returns
    -------
    str
        Rendered page. ``NO_RECORDS_HTML`` stands in for the forms when there
        are no records.
    """
    if records:
        forms_html = Markup("\n").join(
            render_record_form(record, settings, fields, identity=identity) for record in records
        )
    else:
        forms_html = Markup(NO_RECORDS_HTML)
    logger.info("Rendered %d record form(s)", len(records))
    return render_template(
        template_content,
        {"title": str(escape(i18n.translate("preview_title"))), "forms_html": str(forms_html)},
    )


def write_html_output(html_content: str, output_file: Path) -> None:
    r"""Write the provided HTML content to disk, creating parent directories.

    Parameters
    ----------
    html_content : str
        Full HTML string to be written.
    output_file : Path
        Output file path.

    Raises
    ------
    OSError
        If the directory or file cannot be written.
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(html_content, encoding="utf-8")
