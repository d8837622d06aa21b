"""Use cases for the group activity feed."""

from .feed import (
    ActivityFeed,
    ActivityFeedSummary,
    ActivityFeedUnavailableError,
    get_group_activity_feed,
    summarize_activity,
)
from .filters import (
    DEFAULT_FEED_LIMIT,
    MAX_FEED_LIMIT,
    MAX_RECORD_ID,
    FeedFilterError,
    parse_feed_filter,
)
from .merge import FeedPage, merge_activity_streams, paginate_activity
from .normalize import announcement_to_activity, comment_to_activity

__all__ = [
    "ActivityFeed",
    "ActivityFeedSummary",
    "ActivityFeedUnavailableError",
    "DEFAULT_FEED_LIMIT",
    "FeedFilterError",
    "FeedPage",
    "MAX_FEED_LIMIT",
    "MAX_RECORD_ID",
    "announcement_to_activity",
    "comment_to_activity",
    "get_group_activity_feed",
    "merge_activity_streams",
    "paginate_activity",
    "parse_feed_filter",
    "summarize_activity",
]
