"""Repository implementations for infrastructure layer."""

from .animal_comment_repository import AnimalCommentRepository
from .group_repository import GroupRepository
from .group_update_repository import GroupUpdateRepository
from .user_repository import UserRepository

__all__ = [
    "AnimalCommentRepository",
    "GroupRepository",
    "GroupUpdateRepository",
    "UserRepository",
]
