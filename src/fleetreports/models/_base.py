"""Base model and enum for fleetreports value objects.

Every model inherits from :class:`ReportBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase keys from the web layer
  map automatically to snake_case fields.
* ``frozen=True``: models are read-only during report generation.

Setting enums inherit from :class:`ReportEnum`, a ``StrEnum`` whose
``_missing_`` hook matches names and values case-insensitively and,
when nothing matches, returns whatever the ``_fallback`` hook returns.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ReportEnum(enum.StrEnum):
    """Base for persisted setting enums.

    Stored values are matched against member values and names ignoring
    case, so both ``"googleNormal"`` and ``"GOOGLE_NORMAL"`` resolve.
    """

    @classmethod
    def _fallback(cls) -> ReportEnum | None:
        """Member used for values that match nothing. ``None`` rejects them."""
        return None

    @classmethod
    def _missing_(cls, value: object) -> ReportEnum | None:
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted or member.name.lower() == wanted:
                    return member
        return cls._fallback()


class ReportBaseModel(BaseModel):
    """Base for fleetreports value models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
