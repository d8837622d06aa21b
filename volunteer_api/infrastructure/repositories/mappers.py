"""Shared model to entity mappings for feed repositories."""

from __future__ import annotations

from sqlalchemy.orm import Query

from volunteer_api.domain.entities import (
    AnimalReference,
    CommentTag,
    FeedFilter,
    UserReference,
)
from volunteer_api.infrastructure.models import AnimalModel, CommentTagModel, UserModel


def user_reference(model: UserModel | None) -> UserReference | None:
    if model is None:
        return None
    return UserReference(
        id=model.id,
        username=model.username,
        first_name=model.first_name or "",
        last_name=model.last_name or "",
    )


def animal_reference(model: AnimalModel) -> AnimalReference:
    return AnimalReference(id=model.id, name=model.name, image_url=model.image_url or None)


def comment_tags(models: list[CommentTagModel]) -> tuple[CommentTag, ...]:
    return tuple(
        CommentTag(id=model.id, name=model.name, color=model.color)
        for model in models
        if model.deleted_at is None
    )


def apply_created_at_range(query: Query, column, feed_filter: FeedFilter) -> Query:
    """Restrict ``query`` to the inclusive date window of ``feed_filter``."""

    lower, upper = feed_filter.created_at_range()
    if lower is not None:
        query = query.filter(column >= lower)
    if upper is not None:
        query = query.filter(column < upper)
    return query


__all__ = [
    "animal_reference",
    "apply_created_at_range",
    "comment_tags",
    "user_reference",
]
