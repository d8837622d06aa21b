"""Validated filter applied when reading a group's activity feed."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from volunteer_api.utils import naive_day_range

from .session_metadata import POOR_SESSION_RATING_MAX, SESSION_RATING_MIN


class FeedType(str, Enum):
    """Record families requested by the caller."""

    ALL = "all"
    COMMENTS = "comments"
    ANNOUNCEMENTS = "announcements"


@dataclass(frozen=True)
class FeedFilter:
    """Typed activity feed filter.

    ``animal_id``, ``tags`` and the rating fields only apply to comments. When
    any of them is present no announcement can match.
    """

    limit: int
    offset: int = 0
    feed_type: FeedType = FeedType.ALL
    animal_id: int | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    session_rating: int | None = None
    poor_sessions_only: bool = False
    date_from: date | None = None
    date_to: date | None = None

    @property
    def includes_announcements(self) -> bool:
        return self.feed_type in (FeedType.ALL, FeedType.ANNOUNCEMENTS)

    @property
    def includes_comments(self) -> bool:
        return self.feed_type in (FeedType.ALL, FeedType.COMMENTS)

    @property
    def has_comment_only_filters(self) -> bool:
        """Return ``True`` when an attribute only comments have is filtered."""

        return (
            self.animal_id is not None
            or bool(self.tags)
            or self.rating_bounds is not None
        )

    @property
    def rating_bounds(self) -> tuple[int, int] | None:
        """Inclusive ``(min, max)`` session rating accepted, if any."""

        if self.poor_sessions_only:
            return (SESSION_RATING_MIN, POOR_SESSION_RATING_MAX)
        if self.session_rating is not None:
            return (self.session_rating, self.session_rating)
        return None

    def created_at_range(self) -> tuple[datetime | None, datetime | None]:
        """Naive ``[lower, upper)`` bounds derived from the inclusive dates."""

        return naive_day_range(self.date_from, self.date_to)


__all__ = ["FeedFilter", "FeedType"]
