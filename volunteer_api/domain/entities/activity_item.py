"""Domain entity describing an item of a group's activity feed."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .references import AnimalReference, CommentTag, UserReference
from .session_metadata import SessionMetadata


class ActivityKind(str, Enum):
    """Record family an activity item was projected from."""

    ANNOUNCEMENT = "announcement"
    COMMENT = "comment"


@dataclass(frozen=True)
class CommentDetails:
    """Attributes only animal comments carry."""

    animal: AnimalReference | None
    tags: tuple[CommentTag, ...] = field(default_factory=tuple)
    metadata: SessionMetadata | None = None


@dataclass(frozen=True)
class ActivityItem:
    """Read-only projection of an announcement or an animal comment.

    ``(kind, id)`` identifies an item; ids are only unique within a kind.
    ``comment`` is populated for comments and always ``None`` for
    announcements, so tags, animal and session metadata cannot leak onto
    announcements.
    """

    kind: ActivityKind
    id: int
    created_at: datetime
    author: UserReference | None
    content: str
    title: str | None = None
    image_url: str | None = None
    comment: CommentDetails | None = None

    @property
    def key(self) -> tuple[str, int]:
        return (self.kind.value, self.id)

    @property
    def tags(self) -> tuple[CommentTag, ...]:
        return self.comment.tags if self.comment is not None else ()

    @property
    def animal(self) -> AnimalReference | None:
        return self.comment.animal if self.comment is not None else None

    @property
    def metadata(self) -> SessionMetadata | None:
        return self.comment.metadata if self.comment is not None else None


__all__ = ["ActivityItem", "ActivityKind", "CommentDetails"]
