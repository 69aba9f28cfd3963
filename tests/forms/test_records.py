"""Tests for records, translations, errors and inflection helpers."""

import pytest

from admin_translate.exceptions import TranslationNotFoundError
from admin_translate.forms.records import (
    Errors,
    FieldSpec,
    TranslatedRecord,
    Translation,
    camelize,
    dasherize,
    titleize,
    underscore,
)


class BlogPost(TranslatedRecord):
    ATTRIBUTE_NAMES = {"title": "Headline"}


@pytest.mark.parametrize(
    "word, expected",
    [("Post", "post"), ("BlogPost", "blog_post"), ("HTMLPage", "html_page"), ("blog-post", "blog_post")],
)
def test_underscore(word, expected):
    assert underscore(word) == expected


def test_dasherize_camelize_titleize():
    assert dasherize("blog_post") == "blog-post"
    assert camelize("blog_post") == "BlogPost"
    assert camelize("news-item") == "NewsItem"
    assert titleize("title") == "Title"
    assert titleize("meta_description") == "Meta Description"
    assert titleize("author_id") == "Author"


def test_errors_collection():
    errors = Errors({"title": ["is required"]})
    errors.add("title", "is too short")
    errors.add("body", "is empty")
    assert errors["title"] == ["is required", "is too short"]
    assert errors.get("missing") == []
    assert "title" in errors and "missing" not in errors
    assert len(errors) == 3 and bool(errors)
    assert errors.full_messages()[0] == "Title is required"
    errors.clear()
    assert not errors


def test_translation_for_returns_existing_and_builds_missing():
    post = BlogPost(id=3, translations=[Translation("en", title="Hi")])
    assert post.translation_for("en").value_for("title") == "Hi"
    built = post.translation_for("fr")
    assert built.locale == "fr" and not built.persisted
    assert post.translation_for("fr") is built
    assert post.locales == ["en", "fr"]


def test_translation_for_without_building_raises():
    post = BlogPost()
    with pytest.raises(TranslationNotFoundError) as excinfo:
        post.translation_for("de", build_if_missing=False)
    assert excinfo.value.context["locale"] == "de"


def test_duplicate_translations_keep_first():
    first = Translation("en", title="one")
    post = BlogPost(translations=[first, Translation("en", title="two")])
    assert post.translations == [first]


def test_value_for_and_human_attribute_name():
    translation = Translation("sv", id=5, title="Hej")
    assert translation.value_for("locale") == "sv"
    assert translation.value_for("id") == 5
    assert translation.persisted
    assert BlogPost.human_attribute_name("title") == "Headline"
    assert BlogPost.human_attribute_name("body", default="Text") == "Text"
    assert BlogPost.human_attribute_name("body") == "Body"


def test_field_spec_parse():
    assert FieldSpec.parse("title") == FieldSpec("title", {})
    assert FieldSpec.parse("body:text") == FieldSpec("body", {"as_": "text"})
    with pytest.raises(ValueError):
        FieldSpec.parse(":text")
    with pytest.raises(ValueError):
        FieldSpec.parse("body:wysiwyg")
