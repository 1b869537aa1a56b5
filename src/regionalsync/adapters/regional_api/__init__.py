"""Public interface for the regional source adapter."""

from __future__ import annotations

from .client import RegionalApiFetcher
from .schema import RegionalPayload
from .translator import RegionalPayloadError, parse_regional, parse_regionals

__all__ = [
    "RegionalApiFetcher",
    "RegionalPayload",
    "RegionalPayloadError",
    "parse_regional",
    "parse_regionals",
]
