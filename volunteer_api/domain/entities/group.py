"""Domain entity representing a volunteer group."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Group:
    """A team of volunteers sharing animals, announcements and tags."""

    id: int
    name: str
    description: str = ""
    image_url: str | None = None
    created_at: datetime | None = None


__all__ = ["Group"]
