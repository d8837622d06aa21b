"""Read path for animal comments shown in the activity feed."""

from __future__ import annotations

from sqlalchemy import and_
from sqlalchemy.orm import Session, contains_eager

from volunteer_api.domain.entities import AnimalComment, FeedFilter, SessionMetadata
from volunteer_api.infrastructure.models import (
    AnimalCommentModel,
    AnimalModel,
    CommentTagModel,
)
from volunteer_api.utils import ensure_app_timezone

from .mappers import (
    animal_reference,
    apply_created_at_range,
    comment_tags,
    user_reference,
)


class AnimalCommentRepository:
    """Query comments on a group's animals under an activity feed filter."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_feed(
        self, group_id: int, feed_filter: FeedFilter
    ) -> tuple[list[AnimalComment], int]:
        """Return the matching comments, newest first, and their count.

        Tag filtering is an OR: a comment matches when it carries any of the
        requested tags.
        """

        if not feed_filter.includes_comments:
            return [], 0

        query = (
            self.session.query(AnimalCommentModel)
            .join(AnimalModel, AnimalCommentModel.animal_id == AnimalModel.id)
            .options(contains_eager(AnimalCommentModel.animal))
            .filter(AnimalModel.group_id == group_id)
            .filter(AnimalModel.deleted_at.is_(None))
            .filter(AnimalCommentModel.deleted_at.is_(None))
        )
        query = apply_created_at_range(query, AnimalCommentModel.created_at, feed_filter)

        if feed_filter.animal_id is not None:
            query = query.filter(AnimalCommentModel.animal_id == feed_filter.animal_id)

        if feed_filter.tags:
            query = query.filter(
                AnimalCommentModel.tags.any(
                    and_(
                        CommentTagModel.name.in_(feed_filter.tags),
                        CommentTagModel.deleted_at.is_(None),
                    )
                )
            )

        bounds = feed_filter.rating_bounds
        if bounds is not None:
            rating = AnimalCommentModel.session_metadata["session_rating"].as_integer()
            lowest, highest = bounds
            query = query.filter(rating >= lowest).filter(rating <= highest)

        query = query.order_by(
            AnimalCommentModel.created_at.desc(), AnimalCommentModel.id.desc()
        )

        comments = [self._to_entity(model) for model in query.all()]
        return comments, len(comments)

    @staticmethod
    def _to_entity(model: AnimalCommentModel) -> AnimalComment:
        return AnimalComment(
            id=model.id,
            animal=animal_reference(model.animal),
            author=user_reference(model.user),
            content=model.content,
            image_url=model.image_url or None,
            created_at=ensure_app_timezone(model.created_at),
            metadata=SessionMetadata.from_payload(model.session_metadata),
            tags=comment_tags(model.tags),
        )


__all__ = ["AnimalCommentRepository"]
