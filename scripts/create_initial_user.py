"""Utility script to create an initial user in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from volunteer_api.application.use_cases.users.create_user import create_user
from volunteer_api.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the volunteer feed API.",
    )
    parser.add_argument(
        "--username",
        default="admin",
        help="Nombre de usuario (por defecto: admin)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Correo electrónico del usuario (por defecto: admin@example.com)",
    )
    parser.add_argument("--first-name", default="", help="Nombre del usuario (opcional)")
    parser.add_argument("--last-name", default="", help="Apellido del usuario (opcional)")
    parser.add_argument(
        "--password",
        default=None,
        help="Contraseña del usuario. Si no se proporciona se solicitará interactivamente.",
    )
    parser.add_argument(
        "--admin",
        action="store_true",
        help="Crea el usuario con privilegios de administrador.",
    )
    parser.add_argument(
        "--group",
        dest="group_ids",
        type=int,
        action="append",
        default=[],
        help="Identificador de un grupo al que pertenece el usuario (repetible).",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Ingrese la contraseña del usuario: ")
    if not password:
        raise SystemExit("No se proporcionó una contraseña válida.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            username=args.username,
            email=args.email,
            password=password,
            first_name=args.first_name,
            last_name=args.last_name,
            is_admin=args.admin,
            group_ids=args.group_ids,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"No se pudo crear el usuario: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error al guardar el usuario en la base de datos: {exc}") from exc
    else:
        print(
            "Usuario creado exitosamente:\n"
            f"  ID: {user.id}\n"
            f"  Usuario: {user.username}\n"
            f"  Email: {user.email}\n"
            f"  Administrador: {'sí' if user.is_admin else 'no'}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
