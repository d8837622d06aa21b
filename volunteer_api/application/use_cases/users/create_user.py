"""Use case for creating users."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from volunteer_api.domain.entities import User
from volunteer_api.infrastructure.repositories import GroupRepository, UserRepository
from volunteer_api.infrastructure.security import get_password_hash
from volunteer_api.utils import now_in_app_timezone


def create_user(
    session: Session,
    *,
    username: str,
    email: str,
    password: str,
    first_name: str = "",
    last_name: str = "",
    is_admin: bool = False,
    group_ids: Sequence[int] = (),
) -> User:
    """Create a new user ensuring unique usernames and email addresses."""

    repository = UserRepository(session)

    if repository.get_by_login(username) or repository.get_by_email(email.lower()):
        msg = "El usuario o el correo electrónico ya está registrado"
        raise ValueError(msg)

    group_repository = GroupRepository(session)
    for group_id in group_ids:
        if group_repository.get(group_id) is None:
            raise ValueError(f"Grupo {group_id} no encontrado")

    user = User(
        id=None,
        username=username,
        email=email,
        password=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
        is_admin=is_admin,
        is_active=True,
        created_at=now_in_app_timezone(),
        group_ids=list(group_ids),
    )

    return repository.create(user)
