"""Tests for the HTML-safe buffer and tag helpers."""

import pytest
from markupsafe import Markup

from admin_translate.forms.markup import SafeBuffer, Template, safe_join, tag_attributes


def test_content_tag_escapes_text_and_attributes():
    t = Template()
    html = t.content_tag("a", "Fish & Chips", href="#a<b>")
    assert str(html) == '<a href="#a&lt;b&gt;">Fish &amp; Chips</a>'


def test_content_tag_keeps_safe_content_and_calls_blocks():
    t = Template()
    inner = t.content_tag("li", "x")
    assert str(t.content_tag("ul", inner)) == "<ul><li>x</li></ul>"
    assert str(t.content_tag("ol", lambda: inner)) == "<ol><li>x</li></ol>"
    assert str(t.content_tag("p")) == "<p></p>"


def test_void_elements_render_without_closing_tag():
    t = Template()
    assert str(t.content_tag("input", type="hidden", value="en")) == '<input type="hidden" value="en">'
    assert str(t.tag("br")) == "<br>"


def test_name_and_content_attributes_pass_through_as_keywords():
    t = Template()
    assert str(t.tag("input", type="hidden", name="t[x]", value="0")) == '<input type="hidden" name="t[x]" value="0">'
    html = t.content_tag("meta", name="robots", content="noindex")
    assert str(html) == '<meta name="robots" content="noindex">'
    assert str(t.content_tag("select", "", name="locale")) == '<select name="locale"></select>'


def test_tag_attributes_rules():
    rendered = tag_attributes({"class_": ["a", "b"], "required": True, "title": None, "hidden": False})
    assert str(rendered) == ' class="a b" required'
    assert str(tag_attributes({"for_": "x", "value": 7})) == ' for="x" value="7"'
    assert str(tag_attributes(None)) == ""


def test_safe_buffer_escapes_plain_strings_only():
    buf = SafeBuffer(Markup("<b>ok</b>"))
    buf.append("<i>")
    buf << None
    assert str(buf) == "<b>ok</b>&lt;i&gt;"
    assert len(buf) == 2
    assert Markup(buf) == Markup("<b>ok</b>&lt;i&gt;")


def test_safe_join():
    assert safe_join([Markup("<br>"), "&", None]) == Markup("<br>&amp;")


def test_template_assign_and_concat():
    t = Template(output_buffer=SafeBuffer())
    t.assign(has_many_block=True)
    t.concat(Markup("<p>a</p>"))
    assert t.assigns == {"has_many_block": True}
    assert str(t.output_buffer) == "<p>a</p>"


def test_concat_without_output_buffer_raises():
    with pytest.raises(RuntimeError):
        Template().concat("x")
