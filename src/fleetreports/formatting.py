"""Unit- and locale-aware formatting of telemetry values.

Raw values arrive in canonical units: durations in milliseconds, speeds
in knots, distances in kilometers.  :class:`UnitFormatter` converts them
into the user's display units and renders them with the grouping and
decimal marks of the request locale (via Babel).

None of the ``format_*`` methods raise on bad telemetry: NaN (and
infinite) values and negative durations are normalized to zero.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal, get_decimal_symbol, get_minus_sign_symbol

from fleetreports.i18n import normalize_locale
from fleetreports.models.user import UserSettings

if TYPE_CHECKING:
    from fleetreports.context import ReportContext

_logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# At most two fraction digits. Babel always prints an integer digit, so speeds
# drop a lone leading zero afterwards; distances keep it.
_SPEED_PATTERN = "#,###.##"
_DISTANCE_PATTERN = "#,##0.##"

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE
_MS_PER_DAY = 24 * _MS_PER_HOUR

_DURATION_PARTS: tuple[tuple[str, int], ...] = (
    ("day", _MS_PER_DAY),
    ("hour", _MS_PER_HOUR),
    ("minute", _MS_PER_MINUTE),
    ("second", _MS_PER_SECOND),
)


def resolve_locale(locale: str | Locale | None, default: str = "en") -> Locale:
    """Parse *locale*, falling back to *default* and then to English."""
    if isinstance(locale, Locale):
        return locale
    for candidate in (locale, default):
        if not candidate:
            continue
        try:
            return Locale.parse(normalize_locale(candidate))
        except (UnknownLocaleError, ValueError):
            _logger.warning("Unknown locale %r, falling back", candidate)
    return Locale("en")


def _drop_leading_zero(text: str, locale: Locale) -> str:
    """Turn ``0.5``/``-0,5`` into ``.5``/``-,5``; a bare ``0`` stays."""
    sign = get_minus_sign_symbol(locale)
    prefix = sign if text.startswith(sign) else ""
    if text[len(prefix) :].startswith("0" + get_decimal_symbol(locale)):
        return prefix + text[len(prefix) + 1 :]
    return text


def _finite_or_zero(value: float | None) -> float:
    if value is None:
        return 0.0
    value = float(value)
    if not math.isfinite(value):
        return 0.0
    return value


class UnitFormatter:
    """Formats durations, speeds, distances and dates for one request.

    Parameters
    ----------
    settings : UserSettings
        Display preferences of the requesting user.
    message : callable
        Localized lookup for a message key (``"day"``, ``"hour"``, ...).
    locale : str or babel.Locale
        Locale for number grouping and decimal marks.
    default_language : str
        Fallback when *locale* is unknown.
    """

    def __init__(
        self,
        settings: UserSettings,
        message: Callable[[str], str],
        locale: str | Locale | None = None,
        *,
        default_language: str = "en",
    ) -> None:
        self._settings = settings
        self._message = message
        self._locale = resolve_locale(locale, default_language)

    @classmethod
    def for_context(cls, context: ReportContext) -> UnitFormatter:
        return cls(
            context.settings,
            context.message,
            context.locale,
            default_language=context.config.language,
        )

    @property
    def locale(self) -> Locale:
        return self._locale

    def format_duration(self, duration_ms: int) -> str:
        """Render a duration as ``"1d 2h 3min 4s "``, skipping zero parts.

        Exactly zero is rendered as the literal ``"0s"``.
        """
        remaining = max(int(duration_ms), 0)
        if remaining == 0:
            return "0s"

        text = ""
        for key, unit_ms in _DURATION_PARTS:
            value, remaining = divmod(remaining, unit_ms)
            if value:
                text += f"{value}{self._message(key)} "
        return text

    def format_speed(self, speed: float | None) -> str:
        unit = self._settings.speed_unit
        value = _finite_or_zero(speed) * unit.factor
        text = format_decimal(value, format=_SPEED_PATTERN, locale=self._locale)
        text = _drop_leading_zero(text, self._locale)
        return f"{text} {unit.symbol}"

    def format_distance(self, distance: float | None) -> str:
        unit = self._settings.speed_unit.distance_unit
        value = _finite_or_zero(distance) * unit.factor
        return f"{format_decimal(value, format=_DISTANCE_PATTERN, locale=self._locale)} {unit.symbol}"

    def format_date(self, date: datetime) -> str:
        """Fixed ``yyyy-MM-dd HH:mm:ss``; neither localized nor time-zone converted."""
        return date.strftime(DATE_FORMAT)
