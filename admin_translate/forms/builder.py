"""Nested-attributes form builder.

``FormBuilder`` renders Formtastic-style inputs for one object and opens
nested builders for associated records (``fields_for``), naming their inputs
``<object>[<association>_attributes][<n>][<attribute>]`` so a submitted form
maps back onto the association.

Examples
--------
>>> from admin_translate.forms.builder import FormBuilder
>>> from admin_translate.forms.records import TranslatedRecord
>>> class Post(TranslatedRecord):
...     pass
>>> f = FormBuilder(Post(id=1, title="Hi"))
>>> "post[title]" in f.input("title")
True
"""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Mapping

from markupsafe import Markup, escape

from admin_translate.config import INPUT_TYPES
from admin_translate.exceptions import DataValidationError
from admin_translate.forms.markup import SafeBuffer, Template, safe_join
from admin_translate.forms.records import Errors, titleize, underscore

FieldBlock = Callable[["FormBuilder"], Any]

_DOM_ID_UNSAFE = re.compile(r"\]\[|[^-a-zA-Z0-9:.]")
_STRINGISH = ("string", "email", "number")


def sanitized_dom_id(name: str) -> str:
    """``"post[translations_attributes][0][title]"`` -> ``"post_translations_attributes_0_title"``."""
    return _DOM_ID_UNSAFE.sub("_", name).rstrip("_")


def capture(value: Any) -> Markup:
    """Turn a block's return value into markup.

    Blocks may return a single fragment, ``None`` or an iterable of fragments.
    """
    if value is None:
        return Markup("")
    if isinstance(value, (str, Markup, SafeBuffer)) or hasattr(value, "__html__"):
        return escape(value)
    if isinstance(value, Iterable):
        return safe_join(value)
    return escape(value)


class FormBuilder:
    r"""Render inputs for ``object`` against a ``Template``.

    Parameters
    ----------
    object : Any
        The model being edited. Must provide ``value_for(attribute)``.
    object_name : str | None
        Prefix for input names. Defaults to the underscored class name.
    template : Template | None
        View context; a fresh one is created when omitted.
    errors : Errors | None
        Error context used for inline errors. Defaults to ``object.errors``.

    Attributes
    ----------
    form_buffers : list[SafeBuffer] | None
        Stack of active form buffers; the last one is the active output sink
        for helpers that append to the form being built.
    """

    def __init__(
        self,
        object: Any,
        object_name: str | None = None,
        template: Template | None = None,
        *,
        errors: Errors | None = None,
    ) -> None:
        self.object = object
        self.object_name = object_name or underscore(type(object).__name__)
        self.template = template if template is not None else Template()
        if errors is None:
            errors = getattr(object, "errors", None)
        self.errors: Errors = errors if errors is not None else Errors()
        self.form_buffers: list[SafeBuffer] | None = None
        self._child_index: dict[str, int] = {}

    def field_name(self, method: str) -> str:
        return f"{self.object_name}[{method}]"

    def dom_id(self, method: str) -> str:
        return sanitized_dom_id(self.field_name(method))

    def value_for(self, method: str) -> Any:
        return self.object.value_for(method)

    def human_attribute_name(self, method: str) -> str:
        hook = getattr(self.object, "human_attribute_name", None)
        if callable(hook):
            return hook(method, default=titleize(method))
        return titleize(method)

    def input(
        self,
        method: str,
        as_: str | None = None,
        label: str | bool | None = None,
        hint: str | None = None,
        required: bool = False,
        input_html: Mapping[str, Any] | None = None,
        wrapper_html: Mapping[str, Any] | None = None,
    ) -> Markup:
        r"""Render one input wrapped in its ``<li>``.

        Parameters
        ----------
        method : str
            Attribute to render.
        as_ : str | None
            Input type, one of ``INPUT_TYPES``. Defaults to ``"string"``.
        label : str | bool | None
            Label text; ``False`` suppresses the label, ``None`` uses the human
            attribute name.
        hint : str | None
            Inline hint rendered below the control.
        required : bool
            Marks the wrapper and control as required.
        input_html, wrapper_html : Mapping | None
            Extra attributes for the control and the wrapper.

        Returns
        -------
        Markup
            The rendered ``<li>``.

        Raises
        ------
        DataValidationError
            If ``as_`` is not a supported input type.
        """
        input_type = as_ or "string"
        if input_type not in INPUT_TYPES:
            raise DataValidationError(
                f"Unsupported input type: {input_type}",
                context={"attribute": method, "supported": list(INPUT_TYPES)},
            )
        dom_id = self.dom_id(method)
        control_attrs: dict[str, Any] = {"id": dom_id, "name": self.field_name(method)}
        value = self.value_for(method)

        if input_type == "hidden":
            control_attrs.update(input_html or {})
            control = self.template.tag("input", {"type": "hidden", **control_attrs, "value": value})
            return self.template.content_tag(
                "li", control, class_="hidden input optional", id=f"{dom_id}_input"
            )

        messages = self.errors.get(method)
        classes = [input_type, "input", "required" if required else "optional"]
        if input_type in _STRINGISH:
            classes.append("stringish")
        if messages:
            classes.append("error")
        wrapper = dict(wrapper_html or {})
        extra_class = wrapper.pop("class_", None) or wrapper.pop("class", None)
        if extra_class:
            classes.append(extra_class)

        control_attrs["required"] = required
        control_attrs.update(input_html or {})
        if label is None:
            label = self.human_attribute_name(method)

        body = SafeBuffer()
        if input_type == "boolean":
            checkbox = SafeBuffer(
                self.template.tag("input", type="hidden", name=control_attrs["name"], value="0"),
                self.template.tag(
                    "input", {"type": "checkbox", **control_attrs, "value": "1", "checked": bool(value)}
                ),
                label or "",
            )
            body.append(self.template.content_tag("label", checkbox, for_=dom_id))
        else:
            if label is not False:
                body.append(self._label(dom_id, label, required))
            if input_type == "text":
                body.append(self.template.content_tag("textarea", "" if value is None else value, control_attrs))
            else:
                html_type = "text" if input_type == "string" else input_type
                body.append(self.template.tag("input", {"type": html_type, **control_attrs, "value": value}))
        if messages:
            body.append(self.template.content_tag("p", ", ".join(messages), class_="inline-errors"))
        if hint:
            body.append(self.template.content_tag("p", hint, class_="inline-hints"))
        return self.template.content_tag(
            "li", body, wrapper, class_=" ".join(classes), id=f"{dom_id}_input"
        )

    def _label(self, dom_id: str, text: str, required: bool) -> Markup:
        content = SafeBuffer(text)
        if required:
            content.append(self.template.content_tag("abbr", "*", title="required"))
        return self.template.content_tag("label", content, for_=dom_id, class_="label")

    def fields_for(
        self,
        association: str,
        record: Any,
        block: FieldBlock | None = None,
        *,
        errors: Errors | None = None,
        child_index: int | None = None,
    ) -> Markup:
        r"""Render ``block`` against a nested builder for ``record``.

        Without ``child_index`` each call takes the next child index for
        ``association``; an explicit index leaves that counter untouched. A
        persisted record gets a trailing hidden ``id`` input so it is updated
        rather than created on submit.
        """
        if child_index is None:
            index = self._child_index.get(association, 0)
            self._child_index[association] = index + 1
        else:
            index = child_index
        child = type(self)(
            record,
            f"{self.object_name}[{association}_attributes][{index}]",
            self.template,
            errors=errors,
        )
        body = SafeBuffer()
        if block is not None:
            body.append(capture(block(child)))
        if getattr(record, "persisted", False):
            body.append(
                self.template.tag(
                    "input",
                    type="hidden",
                    id=child.dom_id("id"),
                    name=child.field_name("id"),
                    value=record.id,
                )
            )
        return Markup(body)

    def inputs_for_nested_attributes(
        self,
        for_: tuple[str, Any],
        id: str | None = None,
        class_: str | None = None,
        block: FieldBlock | None = None,
        *,
        errors: Errors | None = None,
        child_index: int | None = None,
    ) -> Markup:
        """Render a nested ``fields_for`` inside ``<fieldset><ol>``."""
        association, record = for_
        fields = self.fields_for(association, record, block, errors=errors, child_index=child_index)
        return self.template.content_tag(
            "fieldset",
            self.template.content_tag("ol", fields),
            id=id,
            class_=class_ or "inputs",
        )
