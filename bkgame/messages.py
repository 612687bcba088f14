"""User-facing error and description strings in Arabic and English."""

from __future__ import annotations

_ARABIC = {
    "languages": "ar",
    "version": "1.0.0",
    "description": " اللغة العربية",
    "ERROR_SDL_initialize": "لايمكن تهيئة SDL",
    "ERROR_window_renderer": "لايمكن انشاء النافذة  والريندر",
    "ERROR_create_surface": "لايمكن انشاء سسطح لرسم الصورة",
    "ERROR_create_from_surface": "لايمكن انشاء تخطيط للصورة",
}

_ENGLISH = {
    "languages": "ar",
    "version": "1.0.0",
    "description": "Language ENGLISH",
    "ERROR_SDL_initialize": "Couldn't initialize SDL",
    "ERROR_window_renderer": "Couldn't create window and renderer",
    "ERROR_create_surface": "Couldn't create surface from image",
    "ERROR_create_from_surface": "Couldn't create texture from surface",
}

_TABLES = {"ar": _ARABIC, "en": _ENGLISH}


def message(key: str, language: str = "ar") -> str:
    """Return the text stored under ``key`` for ``language`` ("ar" or "en")."""
    try:
        table = _TABLES[language]
    except KeyError:
        raise ValueError(f"unknown language: {language!r}") from None
    try:
        return table[key]
    except KeyError:
        raise KeyError(f"unknown message key: {key!r}") from None