"""Localized message lookup."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

_logger = logging.getLogger(__name__)

# Duration abbreviations plus the headings for the values UnitFormatter renders.
DEFAULT_CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "day": "d",
        "hour": "h",
        "minute": "min",
        "second": "s",
        "speed": "Speed",
        "distance": "Distance",
        "duration": "Duration",
    },
    "de": {
        "day": "T",
        "hour": "h",
        "minute": "min",
        "second": "s",
        "speed": "Geschwindigkeit",
        "distance": "Entfernung",
        "duration": "Dauer",
    },
    "ru": {
        "day": "д",
        "hour": "ч",
        "minute": "мин",
        "second": "с",
        "speed": "Скорость",
        "distance": "Расстояние",
        "duration": "Длительность",
    },
}


def normalize_locale(locale: str) -> str:
    """Turn ``"de-DE"``/``"de_de"`` into ``"de_DE"``."""
    language, _, territory = locale.strip().replace("-", "_").partition("_")
    language = language.lower()
    if territory:
        return f"{language}_{territory.upper()}"
    return language


class MessageSource(Protocol):
    """Looks up a localized string for a message key."""

    def message(self, locale: str, key: str) -> str: ...


class CatalogMessages:
    """Dictionary-backed :class:`MessageSource`.

    Lookup order for ``message("de_AT", key)``: ``de_AT``, ``de``, the
    default language, then the key itself.
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, str]] | None = None,
        *,
        default_language: str = "en",
    ) -> None:
        source = DEFAULT_CATALOGS if catalogs is None else catalogs
        self._catalogs = {normalize_locale(code): dict(entries) for code, entries in source.items()}
        self._default_language = normalize_locale(default_language)

    @property
    def languages(self) -> frozenset[str]:
        return frozenset(self._catalogs)

    def _candidates(self, locale: str) -> list[str]:
        normalized = normalize_locale(locale) if locale else ""
        candidates: list[str] = []
        if normalized:
            candidates.append(normalized)
            language = normalized.partition("_")[0]
            if language != normalized:
                candidates.append(language)
        candidates.append(self._default_language)
        return candidates

    def message(self, locale: str, key: str) -> str:
        for code in self._candidates(locale):
            catalog = self._catalogs.get(code)
            if catalog is not None and key in catalog:
                return catalog[key]
        _logger.debug("No message for key %r in locale %r", key, locale)
        return key
