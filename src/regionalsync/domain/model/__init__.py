"""Domain model for regionalsync."""

from __future__ import annotations

from .regional import NAME_MAX_LENGTH, Regional

__all__ = ["NAME_MAX_LENGTH", "Regional"]
