"""Shared fixtures: a throwaway SQLite database and helpers to seed it."""

from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "volunteer_api_tests.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from volunteer_api.config import get_settings  # noqa: E402

get_settings.cache_clear()

from volunteer_api.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from volunteer_api.infrastructure.models import (  # noqa: E402
    AnimalCommentModel,
    AnimalModel,
    CommentTagModel,
    GroupModel,
    GroupUpdateModel,
    UserModel,
)
from volunteer_api.infrastructure.repositories import UserRepository  # noqa: E402
from volunteer_api.infrastructure.security import (  # noqa: E402
    create_access_token,
    get_password_hash,
)
from volunteer_api.interfaces.api.dependencies import password_signature  # noqa: E402

DEFAULT_PASSWORD = "Secret123"
_DEFAULT_PASSWORD_HASH = get_password_hash(DEFAULT_PASSWORD)


class FeedSeeder:
    """Insert users, groups, animals, tags, announcements and comments."""

    def __init__(self, session) -> None:
        self.session = session

    def _save(self, model):
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return model

    def group(self, name: str = "Dogs") -> GroupModel:
        return self._save(GroupModel(name=name, description=f"{name} team"))

    def user(
        self,
        username: str,
        *,
        groups: tuple[GroupModel, ...] = (),
        is_admin: bool = False,
        is_active: bool = True,
        first_name: str = "",
        last_name: str = "",
    ) -> UserModel:
        model = UserModel(
            username=username,
            email=f"{username}@example.com",
            password=_DEFAULT_PASSWORD_HASH,
            first_name=first_name,
            last_name=last_name,
            is_admin=is_admin,
            is_active=is_active,
        )
        model.groups = list(groups)
        return self._save(model)

    def animal(
        self,
        group: GroupModel,
        name: str = "Rex",
        *,
        image_url: str | None = None,
        deleted: bool = False,
    ) -> AnimalModel:
        return self._save(
            AnimalModel(
                group_id=group.id,
                name=name,
                species="Dog",
                image_url=image_url,
                deleted_at=datetime(2024, 1, 1) if deleted else None,
            )
        )

    def tag(
        self,
        group: GroupModel,
        name: str,
        *,
        color: str = "#ef4444",
        deleted: bool = False,
    ) -> CommentTagModel:
        return self._save(
            CommentTagModel(
                group_id=group.id,
                name=name,
                color=color,
                deleted_at=datetime(2024, 1, 1) if deleted else None,
            )
        )

    def announcement(
        self,
        group: GroupModel,
        author: UserModel,
        created_at: datetime,
        *,
        title: str = "Aviso",
        content: str = "Recordatorio para el equipo",
        image_url: str | None = None,
        deleted: bool = False,
    ) -> GroupUpdateModel:
        return self._save(
            GroupUpdateModel(
                group_id=group.id,
                user_id=author.id,
                title=title,
                content=content,
                image_url=image_url,
                created_at=created_at,
                deleted_at=datetime(2024, 12, 31) if deleted else None,
            )
        )

    def comment(
        self,
        animal: AnimalModel,
        author: UserModel,
        created_at: datetime,
        *,
        content: str = "Buen paseo",
        tags: tuple[CommentTagModel, ...] = (),
        metadata: dict[str, Any] | None = None,
        image_url: str | None = None,
        deleted: bool = False,
    ) -> AnimalCommentModel:
        model = AnimalCommentModel(
            animal_id=animal.id,
            user_id=author.id,
            content=content,
            image_url=image_url,
            session_metadata=metadata,
            created_at=created_at,
            deleted_at=datetime(2024, 12, 31) if deleted else None,
        )
        model.tags = list(tags)
        return self._save(model)

    def auth_headers(self, user: UserModel) -> dict[str, str]:
        entity = UserRepository(self.session).get(user.id)
        token = create_access_token(
            {"sub": entity.username, "pwd_sig": password_signature(entity)}
        )
        return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def db_session():
    """Yield a session bound to freshly created tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def seeder(db_session) -> FeedSeeder:
    return FeedSeeder(db_session)


@pytest.fixture()
def client(db_session):
    """Return a test client bound to a clean application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
