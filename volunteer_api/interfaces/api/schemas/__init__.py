from .activity_feed import (
    ActivityAnimalRead,
    ActivityAuthorRead,
    ActivityFeedRead,
    ActivityFeedSummaryRead,
    ActivityItemRead,
    ActivityTagRead,
)
from .auth import Token

__all__ = [
    "ActivityAnimalRead",
    "ActivityAuthorRead",
    "ActivityFeedRead",
    "ActivityFeedSummaryRead",
    "ActivityItemRead",
    "ActivityTagRead",
    "Token",
]
