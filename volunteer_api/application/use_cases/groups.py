"""Use cases deciding who may read a group's content."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import Group, User
from volunteer_api.infrastructure.repositories import GroupRepository

logger = logging.getLogger(__name__)


class GroupAccessDeniedError(PermissionError):
    """Raised when a user may not read a group's feed."""


class GroupNotFoundError(LookupError):
    """Raised when the requested group does not exist."""


def can_read_group_feed(session: Session, user: User, group_id: int) -> bool:
    """Return ``True`` when ``user`` may read the activity feed of ``group_id``.

    Administrators read every group; everybody else needs to be an active
    member of the group.
    """

    if not user.is_active or user.id is None:
        return False
    if user.is_admin:
        return True
    return GroupRepository(session).is_member(user_id=user.id, group_id=group_id)


def ensure_group_feed_access(session: Session, user: User, group_id: int) -> Group:
    """Return the group after checking access, raising otherwise."""

    if not can_read_group_feed(session, user, group_id):
        logger.info("User %s denied access to group %s feed", user.id, group_id)
        raise GroupAccessDeniedError("Acceso denegado")

    group = GroupRepository(session).get(group_id)
    if group is None:
        raise GroupNotFoundError("Grupo no encontrado")
    return group


__all__ = [
    "GroupAccessDeniedError",
    "GroupNotFoundError",
    "can_read_group_feed",
    "ensure_group_feed_access",
]
