"""Read path for group announcements shown in the activity feed."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import FeedFilter, GroupUpdate
from volunteer_api.infrastructure.models import GroupUpdateModel
from volunteer_api.utils import ensure_app_timezone

from .mappers import apply_created_at_range, user_reference

logger = logging.getLogger(__name__)


class GroupUpdateRepository:
    """Query announcements of a group under an activity feed filter."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_feed(
        self, group_id: int, feed_filter: FeedFilter
    ) -> tuple[list[GroupUpdate], int]:
        """Return the matching announcements, newest first, and their count.

        Announcements have no animal, tags or session rating, so any filter on
        those attributes yields an empty result.
        """

        if not feed_filter.includes_announcements:
            return [], 0
        if feed_filter.has_comment_only_filters:
            logger.debug(
                "Skipping announcements for group %s: comment-only filters requested",
                group_id,
            )
            return [], 0

        query = (
            self.session.query(GroupUpdateModel)
            .filter(GroupUpdateModel.group_id == group_id)
            .filter(GroupUpdateModel.deleted_at.is_(None))
        )
        query = apply_created_at_range(query, GroupUpdateModel.created_at, feed_filter)
        query = query.order_by(
            GroupUpdateModel.created_at.desc(), GroupUpdateModel.id.desc()
        )

        updates = [self._to_entity(model) for model in query.all()]
        return updates, len(updates)

    @staticmethod
    def _to_entity(model: GroupUpdateModel) -> GroupUpdate:
        return GroupUpdate(
            id=model.id,
            group_id=model.group_id,
            author=user_reference(model.user),
            title=model.title,
            content=model.content,
            image_url=model.image_url or None,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["GroupUpdateRepository"]
