"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from volunteer_api.domain.entities import User
from volunteer_api.infrastructure.models import GroupModel, UserModel
from volunteer_api.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide read and write operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = self._get_model(email=email)
        return self._to_entity(model) if model else None

    def get_by_login(self, identifier: str) -> User | None:
        """Return the user whose username or email matches ``identifier``."""

        normalized = identifier.strip()
        if not normalized:
            return None
        model = (
            self._base_query()
            .filter(
                or_(
                    UserModel.username == normalized,
                    UserModel.email == normalized.lower(),
                )
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        if user.group_ids:
            model.groups = (
                self.session.query(GroupModel)
                .filter(GroupModel.id.in_(user.group_ids))
                .all()
            )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _base_query(self):
        return (
            self.session.query(UserModel)
            .options(selectinload(UserModel.groups))
            .filter(UserModel.deleted_at.is_(None))
        )

    def _get_model(self, **filters) -> UserModel | None:
        return self._base_query().filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.username = user.username
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.email = user.email.lower()
        model.password = user.password
        model.is_admin = user.is_admin
        model.is_active = user.is_active
        model.last_login = ensure_app_naive_datetime(user.last_login)
        model.deleted_at = ensure_app_naive_datetime(user.deleted_at)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password=model.password,
            first_name=model.first_name or "",
            last_name=model.last_name or "",
            is_admin=bool(model.is_admin),
            is_active=bool(model.is_active),
            last_login=ensure_app_timezone(model.last_login),
            created_at=ensure_app_timezone(model.created_at),
            deleted_at=ensure_app_timezone(model.deleted_at),
            group_ids=sorted(
                group.id for group in model.groups if group.deleted_at is None
            ),
        )


__all__ = ["UserRepository"]
