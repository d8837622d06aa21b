"""ORM models used by the application infrastructure."""

from .animal import AnimalModel
from .animal_comment import AnimalCommentModel, animal_comment_tag_table
from .comment_tag import CommentTagModel
from .group import GroupModel, user_group_table
from .group_update import GroupUpdateModel
from .user import UserModel

__all__ = [
    "AnimalModel",
    "AnimalCommentModel",
    "animal_comment_tag_table",
    "CommentTagModel",
    "GroupModel",
    "user_group_table",
    "GroupUpdateModel",
    "UserModel",
]
