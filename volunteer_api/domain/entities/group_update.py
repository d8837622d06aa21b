"""Domain entity describing a group announcement."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .references import UserReference


@dataclass(frozen=True)
class GroupUpdate:
    """Announcement posted by a coordinator to a whole group."""

    id: int
    group_id: int
    author: UserReference | None
    title: str
    content: str
    image_url: str | None
    created_at: datetime


__all__ = ["GroupUpdate"]
