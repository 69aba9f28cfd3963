"""HTML-safe buffers and tag helpers for form rendering.

``SafeBuffer`` is a mutable, append-only buffer of ``markupsafe.Markup``
fragments: plain strings appended to it are escaped, fragments that are
already safe are kept as they are. ``Template`` is the view context a form
builder renders against: it knows how to build tags, may carry an output
buffer that rendered fragments are concatenated into, and holds the
template assigns.

Examples
--------
>>> from admin_translate.forms.markup import Template
>>> t = Template()
>>> str(t.content_tag("a", "Fish & Chips", href="#menu"))
'<a href="#menu">Fish &amp; Chips</a>'
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Union

from markupsafe import Markup, escape

Content = Union[str, Markup, "SafeBuffer", None]

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "hr", "img", "input", "link", "meta", "source"}
)


class SafeBuffer:
    """Mutable sequence of escaped markup fragments."""

    def __init__(self, *fragments: Any) -> None:
        self._parts: list[Markup] = []
        for fragment in fragments:
            self.append(fragment)

    def append(self, fragment: Any) -> "SafeBuffer":
        if fragment is None:
            return self
        self._parts.append(escape(fragment))
        return self

    __lshift__ = append

    def __html__(self) -> Markup:
        return Markup("").join(self._parts)

    def __str__(self) -> str:
        return str(self.__html__())

    def __len__(self) -> int:
        return len(self._parts)

    def __repr__(self) -> str:
        return f"SafeBuffer({str(self)!r})"


def safe_join(fragments: Iterable[Any]) -> Markup:
    """Join fragments into one ``Markup``, escaping the unsafe ones."""
    return Markup("").join(escape(f) for f in fragments if f is not None)


def attribute_name(key: str) -> str:
    # class_ / for_ / id_ are spelled with a trailing underscore by callers
    return key[:-1] if key.endswith("_") else key


def tag_attributes(attrs: Mapping[str, Any] | None) -> Markup:
    r"""Render a mapping as an escaped HTML attribute string.

    ``None`` and ``False`` values are dropped, ``True`` renders a bare
    attribute and lists are joined with spaces.

    Examples
    --------
    >>> str(tag_attributes({"class_": ["a", "b"], "disabled": True, "title": None}))
    ' class="a b" disabled'
    """
    rendered = Markup("")
    for key, value in (attrs or {}).items():
        if value is None or value is False:
            continue
        name = attribute_name(key)
        if value is True:
            rendered += Markup(" %s") % name
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value if v)
        rendered += Markup(' %s="%s"') % (name, value)
    return rendered


class Template:
    r"""View context used by form builders.

    Parameters
    ----------
    output_buffer : SafeBuffer | None, optional
        Buffer of the enclosing template render. When ``None`` there is no
        active render and ``concat`` is a no-op for callers that check
        ``output_buffer`` first.

    Attributes
    ----------
    assigns : dict
        Template assigns set by helpers (e.g. ``has_many_block``).
    """

    def __init__(self, output_buffer: SafeBuffer | None = None) -> None:
        self.output_buffer = output_buffer
        self.assigns: dict[str, Any] = {}

    def assign(self, **values: Any) -> None:
        self.assigns.update(values)

    def concat(self, fragment: Any) -> None:
        if self.output_buffer is None:
            raise RuntimeError("Template has no output buffer to concatenate into")
        self.output_buffer.append(fragment)

    def tag(
        self, tag_name: str, attrs: Mapping[str, Any] | None = None, /, **kwargs: Any
    ) -> Markup:
        """Render a void element such as ``<input>``."""
        merged = dict(attrs or {})
        merged.update(kwargs)
        return Markup("<%s%s>") % (tag_name, tag_attributes(merged))

    def content_tag(
        self,
        tag_name: str,
        content: Content | Callable[[], Content] = None,
        attrs: Mapping[str, Any] | None = None,
        /,
        **kwargs: Any,
    ) -> Markup:
        r"""Render ``<tag_name attrs>content</tag_name>``.

        The element name, content and attribute mapping are positional-only,
        so ``name=`` passes through as an HTML attribute.

        Parameters
        ----------
        tag_name : str
            Element name.
        content : str | Markup | SafeBuffer | Callable | None
            Element body. Callables are invoked to produce the body, which is
            escaped unless already safe.
        attrs : Mapping[str, Any] | None
            Attributes; merged with ``kwargs``.

        Returns
        -------
        Markup
            The rendered element.
        """
        if tag_name in VOID_ELEMENTS:
            return self.tag(tag_name, attrs, **kwargs)
        if callable(content):
            content = content()
        merged = dict(attrs or {})
        merged.update(kwargs)
        body = escape(content) if content is not None else Markup("")
        return Markup("<%s%s>%s</%s>") % (tag_name, tag_attributes(merged), body, tag_name)
