"""Endpoints relacionados con autenticación."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from volunteer_api.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    record_login,
)
from volunteer_api.config import get_settings
from volunteer_api.infrastructure.database import get_db
from volunteer_api.infrastructure.security import create_access_token
from volunteer_api.interfaces.api.dependencies import password_signature
from volunteer_api.interfaces.api.schemas import Token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Autentica al usuario por nombre de usuario o correo y devuelve un token JWT."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        logger.info("Intento de inicio de sesión fallido para %s", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciales incorrectas",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Usuario inactivo",
            headers={"WWW-Authenticate": "Bearer"},
        )

    settings = get_settings()
    access_token = create_access_token(
        data={
            "sub": user.username,
            "admin": user.is_admin,
            "pwd_sig": password_signature(user),
        },
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
    record_login(db, user.id)
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "is_admin": user.is_admin,
    }
