"""Structured session report attached to animal comments."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

SESSION_RATING_MIN = 1
SESSION_RATING_MAX = 5
POOR_SESSION_RATING_MAX = 2


@dataclass(frozen=True)
class SessionMetadata:
    """Notes captured by a volunteer after a session with an animal.

    ``session_rating`` goes from 1 (poor) to 5 (great); ``None`` means the
    comment was not rated.
    """

    session_goal: str = ""
    session_outcome: str = ""
    behavior_notes: str = ""
    medical_notes: str = ""
    session_rating: int | None = None
    other_notes: str = ""
    session_start_time: str = ""
    session_end_time: str = ""

    @classmethod
    def from_payload(cls, payload: dict[str, Any] | None) -> SessionMetadata | None:
        """Build an instance from the stored JSON document, ignoring unknown keys."""

        if not payload:
            return None

        known = {item.name for item in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in payload.items():
            if key not in known or value is None:
                continue
            if key == "session_rating":
                try:
                    rating = int(value)
                except (TypeError, ValueError):
                    continue
                values[key] = rating if rating > 0 else None
            else:
                values[key] = str(value)
        return cls(**values)

    def to_payload(self) -> dict[str, Any]:
        """Return the non-empty fields as a JSON compatible dictionary."""

        payload: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value in (None, ""):
                continue
            payload[item.name] = value
        return payload

    @property
    def is_poor_session(self) -> bool:
        return (
            self.session_rating is not None
            and SESSION_RATING_MIN <= self.session_rating <= POOR_SESSION_RATING_MAX
        )


__all__ = [
    "POOR_SESSION_RATING_MAX",
    "SESSION_RATING_MAX",
    "SESSION_RATING_MIN",
    "SessionMetadata",
]
