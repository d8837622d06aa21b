"""Persistence helpers for volunteer groups."""

from __future__ import annotations

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Group
from volunteer_api.infrastructure.models import GroupModel, user_group_table
from volunteer_api.utils import ensure_app_timezone


class GroupRepository:
    """Read access to groups and their membership."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, group_id: int) -> Group | None:
        model = (
            self.session.query(GroupModel)
            .filter(GroupModel.id == group_id)
            .filter(GroupModel.deleted_at.is_(None))
            .first()
        )
        return self._to_entity(model) if model else None

    def is_member(self, *, user_id: int, group_id: int) -> bool:
        query = (
            self.session.query(user_group_table.c.user_id)
            .join(GroupModel, GroupModel.id == user_group_table.c.group_id)
            .filter(user_group_table.c.user_id == user_id)
            .filter(user_group_table.c.group_id == group_id)
            .filter(GroupModel.deleted_at.is_(None))
        )
        return self.session.query(query.exists()).scalar()

    @staticmethod
    def _to_entity(model: GroupModel) -> Group:
        return Group(
            id=model.id,
            name=model.name,
            description=model.description or "",
            image_url=model.image_url or None,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["GroupRepository"]
