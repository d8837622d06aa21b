"""Lightweight references embedded in feed records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserReference:
    """Author information exposed alongside a feed record."""

    id: int
    username: str
    first_name: str = ""
    last_name: str = ""

    @property
    def display_name(self) -> str:
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name or self.username


@dataclass(frozen=True)
class AnimalReference:
    id: int
    name: str
    image_url: str | None = None


@dataclass(frozen=True)
class CommentTag:
    """Tag name and display color."""

    id: int
    name: str
    color: str


__all__ = ["AnimalReference", "CommentTag", "UserReference"]
