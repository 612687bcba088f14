import pytest

from bkgame.messages import message

KEYS = [
    "languages",
    "version",
    "description",
    "ERROR_SDL_initialize",
    "ERROR_window_renderer",
    "ERROR_create_surface",
    "ERROR_create_from_surface",
]


def test_english_error_strings():
    assert message("ERROR_SDL_initialize", "en") == "Couldn't initialize SDL"
    assert message("ERROR_create_surface", "en") == "Couldn't create surface from image"
    assert message("ERROR_window_renderer", "en") == "Couldn't create window and renderer"


def test_arabic_is_default():
    assert message("ERROR_SDL_initialize") == "لايمكن تهيئة SDL"
    assert message("description") == message("description", "ar")


def test_version_shared():
    assert message("version", "ar") == message("version", "en") == "1.0.0"


@pytest.mark.parametrize("key", KEYS)
def test_every_key_present_in_both_languages(key):
    assert isinstance(message(key, "ar"), str) and message(key, "ar")
    assert isinstance(message(key, "en"), str) and message(key, "en")


@pytest.mark.parametrize("key", KEYS[2:])
def test_languages_differ_for_text(key):
    assert message(key, "ar") != message(key, "en")
    assert len(message(key, "en")) > 0


def test_unknown_language():
    with pytest.raises(ValueError):
        message("version", "fr")


def test_unknown_key():
    with pytest.raises(KeyError):
        message("no_such_key", "en")