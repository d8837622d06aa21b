"""Merge the two sorted activity streams and cut one page out of them.

Both inputs must already be sorted newest first (ties by id descending). The
whole merged sequence is materialized before slicing, which costs
O(total matches) per request. Keyset pagination per source with a bounded
merge of ``offset + limit`` items is the way to scale this further.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from volunteer_api.domain.entities import ActivityItem


@dataclass(frozen=True)
class FeedPage:
    """One window of the merged activity feed."""

    items: list[ActivityItem]
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total


def merge_activity_streams(
    announcements: Sequence[ActivityItem], comments: Sequence[ActivityItem]
) -> list[ActivityItem]:
    """Two-pointer merge ordered by ``created_at`` descending.

    On equal timestamps the announcement goes first; within one stream the
    incoming order (id descending) is kept.
    """

    merged: list[ActivityItem] = []
    i = j = 0
    while i < len(announcements) and j < len(comments):
        if comments[j].created_at > announcements[i].created_at:
            merged.append(comments[j])
            j += 1
        else:
            merged.append(announcements[i])
            i += 1
    merged.extend(announcements[i:])
    merged.extend(comments[j:])
    return merged


def paginate_activity(
    announcements: Sequence[ActivityItem],
    comments: Sequence[ActivityItem],
    *,
    limit: int,
    offset: int,
) -> FeedPage:
    """Return the ``[offset, offset + limit)`` window of the merged streams."""

    if limit < 1:
        raise ValueError("limit must be a positive integer")
    if offset < 0:
        raise ValueError("offset must not be negative")

    total = len(announcements) + len(comments)
    merged = merge_activity_streams(announcements, comments)
    items = merged[offset : offset + limit] if offset < total else []
    return FeedPage(items=items, total=total, limit=limit, offset=offset)


__all__ = ["FeedPage", "merge_activity_streams", "paginate_activity"]
