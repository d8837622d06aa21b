"""Domain entity describing a comment posted on an animal."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .references import AnimalReference, CommentTag, UserReference
from .session_metadata import SessionMetadata


@dataclass(frozen=True)
class AnimalComment:
    """Volunteer note (optionally a session report) about a single animal."""

    id: int
    animal: AnimalReference
    author: UserReference | None
    content: str
    image_url: str | None
    created_at: datetime
    metadata: SessionMetadata | None = None
    tags: tuple[CommentTag, ...] = field(default_factory=tuple)


__all__ = ["AnimalComment"]
