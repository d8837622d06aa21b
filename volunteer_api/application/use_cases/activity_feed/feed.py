"""Use case assembling the activity feed of a volunteer group."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from volunteer_api.domain.entities import ActivityItem, FeedFilter
from volunteer_api.infrastructure.repositories import (
    AnimalCommentRepository,
    GroupUpdateRepository,
)

from .merge import FeedPage, paginate_activity
from .normalize import announcement_to_activity, comment_to_activity

logger = logging.getLogger(__name__)


class ActivityFeedUnavailableError(RuntimeError):
    """Raised when one of the feed sources cannot be read."""


@dataclass(frozen=True)
class ActivityFeedSummary:
    """Concern counters over every comment matching the filter."""

    behavior_concerns_count: int = 0
    medical_concerns_count: int = 0
    poor_sessions_count: int = 0


@dataclass(frozen=True)
class ActivityFeed:
    page: FeedPage
    summary: ActivityFeedSummary


def summarize_activity(items: Iterable[ActivityItem]) -> ActivityFeedSummary:
    """Count behavior notes, medical notes and poorly rated sessions."""

    behavior = medical = poor = 0
    for item in items:
        metadata = item.metadata
        if metadata is None:
            continue
        if metadata.behavior_notes:
            behavior += 1
        if metadata.medical_notes:
            medical += 1
        if metadata.is_poor_session:
            poor += 1
    return ActivityFeedSummary(
        behavior_concerns_count=behavior,
        medical_concerns_count=medical,
        poor_sessions_count=poor,
    )


def get_group_activity_feed(
    session: Session, *, group_id: int, feed_filter: FeedFilter
) -> ActivityFeed:
    """Return one page of the merged announcements and comments of a group.

    Access must be checked by the caller beforehand. If either source fails
    the whole request fails: a page built from a single source would
    under-report ``total``.
    """

    try:
        updates, update_count = GroupUpdateRepository(session).list_for_feed(
            group_id, feed_filter
        )
        comments, comment_count = AnimalCommentRepository(session).list_for_feed(
            group_id, feed_filter
        )
    except SQLAlchemyError as exc:
        logger.exception("Failed to read the activity feed of group %s", group_id)
        raise ActivityFeedUnavailableError(
            "No se pudo obtener la actividad del grupo"
        ) from exc

    announcement_items = [announcement_to_activity(update) for update in updates]
    comment_items = [comment_to_activity(comment) for comment in comments]

    page = paginate_activity(
        announcement_items,
        comment_items,
        limit=feed_filter.limit,
        offset=feed_filter.offset,
    )
    logger.debug(
        "Group %s feed: %s announcements, %s comments, returning %s items from offset %s",
        group_id,
        update_count,
        comment_count,
        len(page.items),
        feed_filter.offset,
    )
    return ActivityFeed(page=page, summary=summarize_activity(comment_items))


__all__ = [
    "ActivityFeed",
    "ActivityFeedSummary",
    "ActivityFeedUnavailableError",
    "get_group_activity_feed",
    "summarize_activity",
]
