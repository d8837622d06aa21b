"""Parse raw activity feed query parameters into a :class:`FeedFilter`."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date, datetime
from typing import Final

from volunteer_api.domain.entities import (
    SESSION_RATING_MAX,
    SESSION_RATING_MIN,
    FeedFilter,
    FeedType,
)
from volunteer_api.utils import ensure_app_timezone

DEFAULT_FEED_LIMIT: Final[int] = 20
MAX_FEED_LIMIT: Final[int] = 100
POOR_RATING_SENTINEL: Final[str] = "poor"
# Largest value a signed 64-bit INTEGER primary key can hold.
MAX_RECORD_ID: Final[int] = 2**63 - 1

_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?\d+$")


class FeedFilterError(ValueError):
    """Raised when a feed query parameter cannot be accepted."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def _parse_int(field: str, value: str | int | None) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise FeedFilterError(field, f"El parámetro '{field}' debe ser un número entero")
    if isinstance(value, int):
        return value
    candidate = str(value).strip()
    if not candidate:
        return None
    if not _INTEGER_PATTERN.match(candidate):
        raise FeedFilterError(field, f"El parámetro '{field}' debe ser un número entero")
    return int(candidate)


def _parse_limit(value: str | int | None, *, default_limit: int, max_limit: int) -> int:
    limit = _parse_int("limit", value)
    if limit is None:
        return min(default_limit, max_limit)
    if limit < 1:
        raise FeedFilterError("limit", "El parámetro 'limit' debe ser mayor que cero")
    return min(limit, max_limit)


def _parse_offset(value: str | int | None) -> int:
    offset = _parse_int("offset", value)
    if offset is None:
        return 0
    if offset < 0:
        raise FeedFilterError("offset", "El parámetro 'offset' no puede ser negativo")
    return offset


def _parse_feed_type(value: str | None) -> FeedType:
    if value is None or not value.strip():
        return FeedType.ALL
    try:
        return FeedType(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(item.value for item in FeedType)
        raise FeedFilterError(
            "type", f"El parámetro 'type' debe ser uno de: {allowed}"
        ) from exc


def _parse_animal(value: str | int | None) -> int | None:
    animal_id = _parse_int("animal", value)
    if animal_id is not None and not 1 <= animal_id <= MAX_RECORD_ID:
        raise FeedFilterError("animal", "El parámetro 'animal' debe ser un identificador válido")
    return animal_id


def _parse_tags(value: str | Iterable[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    raw_values = [value] if isinstance(value, str) else list(value)

    names: list[str] = []
    seen: set[str] = set()
    for raw in raw_values:
        for part in str(raw).split(","):
            name = part.strip()
            if name and name not in seen:
                seen.add(name)
                names.append(name)
    return tuple(names)


def _parse_rating(value: str | int | None) -> tuple[int | None, bool]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None, False
    if isinstance(value, str) and value.strip().lower() == POOR_RATING_SENTINEL:
        return None, True

    message = (
        f"El parámetro 'rating' debe ser un número entre {SESSION_RATING_MIN} y "
        f"{SESSION_RATING_MAX} o '{POOR_RATING_SENTINEL}'"
    )
    try:
        rating = _parse_int("rating", value)
    except FeedFilterError as exc:
        raise FeedFilterError("rating", message) from exc
    if rating is None or not SESSION_RATING_MIN <= rating <= SESSION_RATING_MAX:
        raise FeedFilterError("rating", message)
    return rating, False


def _parse_date(field: str, value: str | date | None) -> date | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_app_timezone(value).date()
    if isinstance(value, date):
        return value

    candidate = value.strip()
    if not candidate:
        return None
    try:
        return date.fromisoformat(candidate)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(candidate.replace("Z", "+00:00"))
    except ValueError as exc:
        raise FeedFilterError(
            field, f"El parámetro '{field}' debe tener el formato AAAA-MM-DD"
        ) from exc
    if parsed.tzinfo is not None:
        parsed = ensure_app_timezone(parsed)
    return parsed.date()


def parse_feed_filter(
    *,
    limit: str | int | None = None,
    offset: str | int | None = None,
    feed_type: str | None = None,
    animal: str | int | None = None,
    tags: str | Iterable[str] | None = None,
    rating: str | int | None = None,
    date_from: str | date | None = None,
    date_to: str | date | None = None,
    default_limit: int = DEFAULT_FEED_LIMIT,
    max_limit: int = MAX_FEED_LIMIT,
) -> FeedFilter:
    """Validate the raw query parameters of the activity feed.

    ``limit`` is clamped to ``max_limit`` instead of being rejected. Every
    other invalid value raises :class:`FeedFilterError` naming the field.
    """

    parsed_from = _parse_date("from", date_from)
    parsed_to = _parse_date("to", date_to)
    if parsed_from is not None and parsed_to is not None and parsed_from > parsed_to:
        raise FeedFilterError("from", "La fecha 'from' no puede ser posterior a 'to'")

    session_rating, poor_sessions_only = _parse_rating(rating)

    return FeedFilter(
        limit=_parse_limit(limit, default_limit=default_limit, max_limit=max_limit),
        offset=_parse_offset(offset),
        feed_type=_parse_feed_type(feed_type),
        animal_id=_parse_animal(animal),
        tags=_parse_tags(tags),
        session_rating=session_rating,
        poor_sessions_only=poor_sessions_only,
        date_from=parsed_from,
        date_to=parsed_to,
    )


__all__ = [
    "DEFAULT_FEED_LIMIT",
    "FeedFilterError",
    "MAX_FEED_LIMIT",
    "MAX_RECORD_ID",
    "POOR_RATING_SENTINEL",
    "parse_feed_filter",
]
