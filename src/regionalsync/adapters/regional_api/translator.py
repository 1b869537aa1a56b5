"""Translate regional source payloads into fetch results."""

from __future__ import annotations

from logging import getLogger
from typing import cast

from pydantic import ValidationError

from regionalsync.domain.ports.fetching import ExternalRegional, RegionalFetchResult

from .schema import RegionalPayload

log = getLogger(__name__)


class RegionalPayloadError(ValueError):
    """Raised when the payload as a whole is not a list of records."""


def parse_regional(item: object) -> ExternalRegional | None:
    """Return the record as a domain value, or ``None`` if it has no usable name."""

    try:
        payload = RegionalPayload.model_validate(item)
    except ValidationError as exc:
        log.debug("Discarding regional record %r: %s", item, exc.errors(include_url=False))
        return None
    return ExternalRegional(name=payload.name)


def parse_regionals(payload: object) -> RegionalFetchResult:
    if not isinstance(payload, list):
        raise RegionalPayloadError(
            f"Expected a JSON array of regionals, got {type(payload).__name__}"
        )

    regionals: list[ExternalRegional] = []
    discarded = 0
    for item in cast(list[object], payload):
        regional = parse_regional(item)
        if regional is None:
            discarded += 1
            continue
        regionals.append(regional)

    if discarded:
        log.debug("Discarded %s regional record(s) without a usable name", discarded)
    return RegionalFetchResult(regionals=tuple(regionals), discarded=discarded)
