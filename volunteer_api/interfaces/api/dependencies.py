"""FastAPI dependency utilities."""

from hashlib import sha256

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from volunteer_api.domain.entities import User
from volunteer_api.infrastructure.database import get_db
from volunteer_api.infrastructure.repositories import UserRepository
from volunteer_api.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_exception(detail: str = "Credenciales inválidas") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def password_signature(user: User) -> str:
    """Fingerprint embedded in tokens so password changes revoke them."""

    return sha256(f"{user.password}:{int(user.is_active)}".encode()).hexdigest()


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    username = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(username, str) or not isinstance(signature_claim, str):
        raise _credentials_exception()

    user = UserRepository(db).get_by_login(username)
    if user is None:
        raise _credentials_exception("Usuario no encontrado")

    if signature_claim != password_signature(user):
        raise _credentials_exception()

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Usuario inactivo",
        )
    return current_user
