"""Aggregate application use cases."""

from .activity_feed import get_group_activity_feed, parse_feed_filter
from .groups import can_read_group_feed, ensure_group_feed_access
from .users import authenticate_user, create_user, record_login

__all__ = [
    "authenticate_user",
    "can_read_group_feed",
    "create_user",
    "ensure_group_feed_access",
    "get_group_activity_feed",
    "parse_feed_filter",
    "record_login",
]
