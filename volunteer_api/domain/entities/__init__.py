"""Domain entities exposed by the application."""

from .activity_item import ActivityItem, ActivityKind, CommentDetails
from .animal_comment import AnimalComment
from .feed_filter import FeedFilter, FeedType
from .group import Group
from .group_update import GroupUpdate
from .references import AnimalReference, CommentTag, UserReference
from .session_metadata import (
    POOR_SESSION_RATING_MAX,
    SESSION_RATING_MAX,
    SESSION_RATING_MIN,
    SessionMetadata,
)
from .user import User

__all__ = [
    "ActivityItem",
    "ActivityKind",
    "CommentDetails",
    "AnimalComment",
    "FeedFilter",
    "FeedType",
    "Group",
    "GroupUpdate",
    "AnimalReference",
    "CommentTag",
    "UserReference",
    "POOR_SESSION_RATING_MAX",
    "SESSION_RATING_MAX",
    "SESSION_RATING_MIN",
    "SessionMetadata",
    "User",
]
