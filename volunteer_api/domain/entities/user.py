"""Domain entity representing a user."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    username: str
    email: str
    password: str
    first_name: str = ""
    last_name: str = ""
    is_admin: bool = False
    is_active: bool = True
    last_login: datetime | None = None
    created_at: datetime | None = None
    deleted_at: datetime | None = None
    group_ids: list[int] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        """Return the full name, falling back to the username."""

        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name or self.username

    def is_member_of(self, group_id: int) -> bool:
        """Return ``True`` when the user belongs to ``group_id``."""

        return group_id in self.group_ids
