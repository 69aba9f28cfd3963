"""Tests for the locale-tab renderer.

Covers DOM id derivation, the tab navigation, one field group per locale in
order, error context on the default locale only, the per-call hidden locale
input semantics of ``render_translation_input`` and render idempotence.
"""

import re

from markupsafe import Markup

from admin_translate.forms.builder import FormBuilder
from admin_translate.forms.markup import SafeBuffer
from admin_translate.forms.records import FieldSpec, TranslatedRecord, Translation
from admin_translate.forms.renderer import (
    LocaleFormRenderer,
    TranslationInput,
    field_id,
    fields_block,
    translate_id,
)
from admin_translate.locales import LocaleSettings


class BlogPost(TranslatedRecord):
    pass


def make_renderer(record, settings, identity=None):
    options = {"identity": identity} if identity else {}
    return LocaleFormRenderer(FormBuilder(record), settings, **options)


def test_translate_id_and_field_id_scenario(post, settings, identity):
    renderer = make_renderer(post, settings, identity)
    assert renderer.translate_id() == "post-7"
    assert renderer.field_id("en") == "locale-en-post-7"
    assert renderer.field_id("fr") == "locale-fr-post-7"
    assert translate_id(BlogPost(), lambda r: 3) == "blog-post-3"
    assert field_id("de", "blog-post-3") == "locale-de-blog-post-3"


def test_ids_are_unique_per_instance_and_stable(settings):
    first, second = BlogPost(), BlogPost()
    assert translate_id(first) != translate_id(second)
    assert translate_id(first) == translate_id(first)
    assert translate_id(first).startswith("blog-post-")


def test_locale_tabs_link_to_field_groups(post, settings, identity):
    html = str(make_renderer(post, settings, identity).locale_tabs())
    assert html == (
        '<ul class="locales">'
        '<li><a href="#locale-en-post-7">English</a></li>'
        '<li><a href="#locale-fr-post-7">French</a></li>'
        "</ul>"
    )


def test_locale_labels_come_from_translate(post, settings, identity):
    keys = []

    def fake_translate(key):
        keys.append(key)
        return key.upper()

    renderer = LocaleFormRenderer(FormBuilder(post), settings, translate=fake_translate, identity=identity)
    html = renderer.locale_tabs()
    assert keys == ["active_admin.translate.en", "active_admin.translate.fr"]
    assert "ACTIVE_ADMIN.TRANSLATE.FR" in html


def test_translation_block_structure(post, settings, identity):
    renderer = make_renderer(post, settings, identity)
    html = str(renderer.render_translation_block(field_block=lambda f: f.input("title")))

    assert html.startswith('<div class="activeadmin-translate post-7"><ul class="locales">')
    assert html.endswith("<script>$('.activeadmin-translate.post-7').tabs();</script></div>")
    assert html.index('<ul class="locales">') < html.index("<fieldset") < html.index("<script>")
    assert '<fieldset id="locale-en-post-7" class="inputs locale locale-en">' in html
    assert '<fieldset id="locale-fr-post-7" class="inputs locale locale-fr">' in html
    assert 'name="post[translations_attributes][0][title]" value="Hello"' in html
    assert 'name="post[translations_attributes][1][title]" value="Bonjour"' in html


def test_block_emits_one_group_per_locale_in_order(post, identity):
    settings = LocaleSettings(("fr", "de", "en"), "en")
    html = str(make_renderer(post, settings, identity).render_translation_block())
    groups = re.findall(r'<fieldset id="locale-(\w+)-post-7"', html)
    assert groups == ["fr", "de", "en"]
    assert html.count("<script>") == 1


def test_hidden_locale_field_precedes_block_fields(post, settings, identity):
    html = str(make_renderer(post, settings, identity).render_translation_block(field_block=lambda f: f.input("title")))
    group = html.split('<fieldset id="locale-fr-post-7"')[1]
    assert group.index('name="post[translations_attributes][1][locale]" value="fr"') < group.index("[title]")
    assert html.count("[locale]") == 2


def test_block_builds_missing_translations(settings, identity):
    record = BlogPost()
    html = make_renderer(record, settings, identity).render_translation_block()
    assert record.locales == ["en", "fr"]
    assert 'value="fr"' in html


def test_default_locale_translation_carries_record_errors(post, settings, identity):
    post.errors.add("title", "is required")
    html = str(make_renderer(post, settings, identity).render_translation_block(field_block=lambda f: f.input("title")))

    assert post.translation_for("en").errors is post.errors
    assert post.translation_for("fr").errors is not post.errors
    assert not post.translation_for("fr").errors
    assert html.count('<p class="inline-errors">is required</p>') == 1
    en_group = html.split('<fieldset id="locale-fr-post-7"')[0]
    assert '<p class="inline-errors">is required</p>' in en_group


def test_error_contexts_map(post, settings, identity):
    post.translation_for("fr").errors.add("title", "is too long")
    contexts = make_renderer(post, settings, identity).error_contexts()
    assert set(contexts) == {"en", "fr"}
    assert contexts["en"] is post.errors
    assert contexts["fr"]["title"] == ["is too long"]


def test_block_appends_to_sink(post, settings, identity):
    sink = SafeBuffer(Markup("<p>before</p>"))
    html = make_renderer(post, settings, identity).render_translation_block(sink=sink)
    assert str(sink) == "<p>before</p>" + str(html)


def test_block_rendering_is_idempotent(settings, identity):
    record = BlogPost()
    record.errors.add("title", "is required")
    renderer = make_renderer(record, settings, identity)
    block = fields_block([FieldSpec("title"), FieldSpec("body", {"as_": "text"})])

    first = str(renderer.render_translation_block(field_block=block))
    second = str(renderer.render_translation_block(field_block=block))
    assert first == second
    assert "[translations_attributes][2]" not in second
    assert record.translation_for("en").errors is record.errors


def test_block_renders_persisted_translations(settings, identity):
    record = BlogPost(
        id=7,
        translations=[
            Translation("en", id=1, title="Hello"),
            Translation("fr", id=2, title="Bonjour"),
        ],
    )
    html = str(make_renderer(record, settings, identity).render_translation_block(field_block=lambda f: f.input("title")))
    assert (
        '<input type="hidden" id="blog_post_translations_attributes_0_id" '
        'name="blog_post[translations_attributes][0][id]" value="1">'
    ) in html
    fr_group = html.split('<fieldset id="locale-fr-blog-post-7"')[1]
    assert 'name="blog_post[translations_attributes][1][id]" value="2"' in fr_group
    assert fr_group.index("[title]") < fr_group.index("[1][id]")


def test_translation_input_labels_and_hidden_locale_fields(post, settings, identity):
    result = make_renderer(post, settings, identity).render_translation_input("title")
    html = str(result.html)

    assert isinstance(result, TranslationInput)
    assert result.locale_field_emitted is True
    assert html.startswith(
        '<li class="activeadmin-translate-input"><fieldset class="has_many_fields"><ol>'
    )
    assert html.endswith("</ol></fieldset></li>")
    assert ">Title: English</label>" in html
    assert ">Title: French</label>" in html
    assert html.count('[locale]" value=') == 2


def test_translation_input_skips_locale_fields_once_emitted(post, settings, identity):
    renderer = make_renderer(post, settings, identity)
    first = renderer.render_translation_input("title")
    second = renderer.render_translation_input("body", locale_field_emitted=first.locale_field_emitted)
    assert "[locale]" not in second.html
    assert 'name="post[translations_attributes][2][body]" value="English body"' in second.html
    assert 'name="post[translations_attributes][3][body]" value="Corps"' in second.html


def test_translation_input_respects_explicit_label_and_options(post, settings, identity):
    renderer = make_renderer(post, settings, identity)
    html = str(renderer.render_translation_input("body", {"label": "Text", "as_": "text"}).html)
    assert html.count(">Text</label>") == 2
    assert html.count("<textarea") == 2


def test_translation_input_uses_human_attribute_name(settings, identity):
    class Page(TranslatedRecord):
        ATTRIBUTE_NAMES = {"title": "Headline"}

    html = make_renderer(Page(), settings, identity).render_translation_input("title").html
    assert ">Headline: English</label>" in html


def test_translation_input_surfaces_errors_on_default_locale_only(post, settings, identity):
    post.errors.add("title", "is required")
    html = str(make_renderer(post, settings, identity).render_translation_input("title").html)
    assert html.count("is required") == 1
    assert html.index("is required") < html.index("Title: French")


def test_translation_input_renders_persisted_translations(settings, identity):
    record = BlogPost(translations=[Translation("en", id=1, title="Hi"), Translation("fr", id=2, title="Salut")])
    html = str(make_renderer(record, settings, identity).render_translation_input("title").html)
    assert 'name="blog_post[translations_attributes][0][id]" value="1"' in html
    assert 'name="blog_post[translations_attributes][1][id]" value="2"' in html


def test_translation_input_treats_none_label_as_missing(post, settings, identity):
    html = str(make_renderer(post, settings, identity).render_translation_input("title", {"label": None}).html)
    assert ">Title: English</label>" in html
    assert ">Title: French</label>" in html
