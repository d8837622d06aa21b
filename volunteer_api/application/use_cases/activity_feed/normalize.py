"""Project announcements and comments onto :class:`ActivityItem`."""

from __future__ import annotations

from volunteer_api.domain.entities import (
    ActivityItem,
    ActivityKind,
    AnimalComment,
    CommentDetails,
    GroupUpdate,
)


def announcement_to_activity(update: GroupUpdate) -> ActivityItem:
    return ActivityItem(
        kind=ActivityKind.ANNOUNCEMENT,
        id=update.id,
        created_at=update.created_at,
        author=update.author,
        content=update.content,
        title=update.title,
        image_url=update.image_url,
    )


def comment_to_activity(comment: AnimalComment) -> ActivityItem:
    return ActivityItem(
        kind=ActivityKind.COMMENT,
        id=comment.id,
        created_at=comment.created_at,
        author=comment.author,
        content=comment.content,
        image_url=comment.image_url,
        comment=CommentDetails(
            animal=comment.animal,
            tags=tuple(comment.tags),
            metadata=comment.metadata,
        ),
    )


__all__ = ["announcement_to_activity", "comment_to_activity"]
