"""Tests for `admin_translate/i18n.py`."""

import pytest

import admin_translate.i18n as i18n
from admin_translate.exceptions import UserInputError


@pytest.fixture(autouse=True)
def restore_language(monkeypatch):
    monkeypatch.setattr(i18n, "LANG", "en")


def test_translate_locale_labels():
    assert i18n.translate("active_admin.translate.en") == "English"
    assert i18n.translate("active_admin.translate.fr", "sv") == "Franska"
    assert i18n.locale_label("de") == "German"
    assert i18n.locale_label("de", "fr") == "Allemand"


def test_translate_falls_back_to_english_then_key(monkeypatch):
    monkeypatch.setitem(i18n.TEXTS, "xx", {})
    assert i18n.translate("active_admin.translate.nl", "xx") == "Dutch"
    assert i18n.translate("active_admin.translate.pt") == "active_admin.translate.pt"
    assert i18n.translate("preview_title", "unknown") == "Translations"


def test_set_language_switches_current_language():
    i18n.set_language("sv")
    assert i18n.LANG == "sv"
    assert i18n._("active_admin.translate.en") == "Engelska"


def test_set_language_rejects_unknown_language():
    with pytest.raises(UserInputError) as excinfo:
        i18n.set_language("xx")
    assert "en" in excinfo.value.context["supported"]
    assert i18n.LANG == "en"
