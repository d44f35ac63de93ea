from __future__ import annotations

import json
import os

import pytest

from notes_i18n.config.settings import reload_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Run every test against default settings.

    Host environments may export NOTES_I18N_* variables; drop them so each
    test starts from the documented defaults, and reload after tests that
    change the environment themselves.
    """
    for key in list(os.environ):
        if key.upper().startswith("NOTES_I18N_"):
            monkeypatch.delenv(key, raising=False)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()


@pytest.fixture
def legacy_flat_blob() -> str:
    return json.dumps(
        {"originalText": "Herz", "sourceLanguage": "de", "translations": {"en": "Heart"}}
    )


@pytest.fixture
def legacy_titled_blob() -> str:
    return json.dumps(
        {
            "originalLanguage": "de",
            "originalText": {"title": "Das Herz", "text": "Das Herz pumpt Blut."},
            "translations": {
                "en": {"title": "The heart", "text": "The heart pumps blood."},
                "ru": {"title": "Сердце", "text": "Сердце качает кровь."},
            },
        },
        ensure_ascii=False,
    )


@pytest.fixture
def canonical_blob() -> str:
    return json.dumps(
        {
            "i18n": {
                "sourceLanguage": "ru",
                "versions": {
                    "ru": {"title": "Гигиена", "text": "Мойте руки.", "isManual": True},
                    "de": {"text": "Hände waschen.", "isManual": False},
                },
            }
        },
        ensure_ascii=False,
    )
