"""Endpoint exposing the merged activity feed of a group."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.activity_feed import (
    MAX_RECORD_ID,
    ActivityFeed,
    ActivityFeedUnavailableError,
    FeedFilterError,
    get_group_activity_feed,
    parse_feed_filter,
)
from volunteer_api.application.use_cases.groups import (
    GroupAccessDeniedError,
    GroupNotFoundError,
    ensure_group_feed_access,
)
from volunteer_api.config import get_settings
from volunteer_api.domain.entities import ActivityItem, User
from volunteer_api.infrastructure.database import get_db
from volunteer_api.interfaces.api.dependencies import get_current_active_user
from volunteer_api.interfaces.api.schemas import (
    ActivityAnimalRead,
    ActivityAuthorRead,
    ActivityFeedRead,
    ActivityFeedSummaryRead,
    ActivityItemRead,
    ActivityTagRead,
)

router = APIRouter(prefix="/groups", tags=["activity-feed"])


def _item_to_schema(item: ActivityItem) -> ActivityItemRead:
    author = item.author
    animal = item.animal
    metadata = item.metadata
    return ActivityItemRead(
        type=item.kind.value,
        id=item.id,
        created_at=item.created_at,
        user=(
            ActivityAuthorRead(
                id=author.id,
                username=author.username,
                display_name=author.display_name,
            )
            if author is not None
            else None
        ),
        content=item.content,
        title=item.title,
        image_url=item.image_url,
        tags=[ActivityTagRead(id=tag.id, name=tag.name, color=tag.color) for tag in item.tags],
        animal=(
            ActivityAnimalRead(id=animal.id, name=animal.name, image_url=animal.image_url)
            if animal is not None
            else None
        ),
        metadata=metadata.to_payload() if metadata is not None else {},
    )


def _feed_to_schema(feed: ActivityFeed) -> ActivityFeedRead:
    page = feed.page
    return ActivityFeedRead(
        items=[_item_to_schema(item) for item in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
        has_more=page.has_more,
        summary=ActivityFeedSummaryRead(
            behavior_concerns_count=feed.summary.behavior_concerns_count,
            medical_concerns_count=feed.summary.medical_concerns_count,
            poor_sessions_count=feed.summary.poor_sessions_count,
        ),
    )


@router.get("/{group_id}/activity-feed", response_model=ActivityFeedRead)
def read_group_activity_feed(
    group_id: int = Path(
        ..., ge=1, le=MAX_RECORD_ID, description="Identificador del grupo"
    ),
    limit: str | None = Query(None, description="Cantidad de elementos por página"),
    offset: str | None = Query(None, description="Elementos a omitir desde el inicio"),
    feed_type: str | None = Query(
        None, alias="type", description="all, comments o announcements"
    ),
    animal: str | None = Query(None, description="Identificador del animal"),
    tags: list[str] | None = Query(
        None, description="Nombres de etiquetas separados por coma"
    ),
    rating: str | None = Query(None, description="Calificación de 1 a 5 o 'poor'"),
    date_from: str | None = Query(None, alias="from", description="Fecha inicial AAAA-MM-DD"),
    date_to: str | None = Query(None, alias="to", description="Fecha final AAAA-MM-DD"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ActivityFeedRead:
    """Devuelve anuncios y comentarios del grupo en orden cronológico descendente."""

    try:
        ensure_group_feed_access(db, current_user, group_id)
    except GroupAccessDeniedError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except GroupNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    settings = get_settings()
    try:
        feed_filter = parse_feed_filter(
            limit=limit,
            offset=offset,
            feed_type=feed_type,
            animal=animal,
            tags=tags,
            rating=rating,
            date_from=date_from,
            date_to=date_to,
            default_limit=settings.activity_feed_default_limit,
            max_limit=settings.activity_feed_max_limit,
        )
    except FeedFilterError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"field": exc.field, "message": exc.message},
        ) from exc

    try:
        feed = get_group_activity_feed(db, group_id=group_id, feed_filter=feed_filter)
    except ActivityFeedUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc

    return _feed_to_schema(feed)


__all__ = ["router"]
