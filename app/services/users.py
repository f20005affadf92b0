# app/services/users.py

import logging
from datetime import datetime
from typing import Iterable, List, Tuple
from uuid import UUID

from sqlmodel import Session, select

from app.core.config import PASSWORD_MIN_LENGTH, USER_NAME_MAX_LENGTH
from app.core.exceptions import (
    AccountInactive,
    EmailAlreadyRegistered,
    Forbidden,
    InvalidCredentials,
    NotFound,
    ValidationError,
)
from app.core.security import create_access_token, get_password_hash, verify_password
from app.models.enums import UserRole
from app.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    {"email": "admin@altfolio.com", "password": "admin123", "name": "Admin User", "role": UserRole.admin},
    {"email": "viewer@altfolio.com", "password": "viewer123", "name": "Viewer User", "role": UserRole.viewer},
]


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(session: Session, email: str):
    return session.exec(select(User).where(User.email == normalize_email(email))).first()


def authenticate(session: Session, email: str, password: str) -> Tuple[User, str]:
    """Valida credenciales, marca last_login y emite el token de sesión."""
    user = get_user_by_email(session, email)
    if not user:
        logger.warning("Intento de login con email desconocido: %s", email)
        raise InvalidCredentials()

    if not user.is_active:
        logger.warning("Intento de login de cuenta desactivada: %s", user.email)
        raise AccountInactive()

    if not verify_password(password, user.hashed_password):
        logger.warning("Contraseña incorrecta para %s", user.email)
        raise InvalidCredentials()

    user.last_login = datetime.utcnow()
    session.add(user)
    session.commit()
    session.refresh(user)

    token = create_access_token(data={"sub": str(user.id)})
    return user, token


def register_user(
    session: Session,
    email: str,
    password: str,
    name: str,
    role: UserRole = UserRole.viewer,
) -> User:
    errors = []
    name = (name or "").strip()
    if not name or len(name) > USER_NAME_MAX_LENGTH:
        errors.append({"field": "name", "message": f"El nombre es obligatorio y no puede superar {USER_NAME_MAX_LENGTH} caracteres"})
    if len(password or "") < PASSWORD_MIN_LENGTH:
        errors.append({"field": "password", "message": f"La contraseña debe tener al menos {PASSWORD_MIN_LENGTH} caracteres"})
    if errors:
        raise ValidationError(errors)

    if get_user_by_email(session, email):
        raise EmailAlreadyRegistered()

    user = User(
        email=normalize_email(email),
        hashed_password=get_password_hash(password),
        name=name,
        role=role,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Usuario registrado: %s (%s)", user.email, user.role.value)
    return user


def create_default_users(session: Session) -> List[User]:
    """Crea los usuarios por defecto si no existen. Idempotente."""
    created = []
    for data in DEFAULT_USERS:
        if get_user_by_email(session, data["email"]):
            continue
        created.append(register_user(session, **data))
    return created


def get_active_users_by_ids(session: Session, user_ids: Iterable[str]) -> List[User]:
    ids = [UUID(str(i)) for i in user_ids]
    if not ids:
        return []
    return session.exec(
        select(User).where(User.id.in_(ids), User.is_active == True)
    ).all()


def get_users_by_ids(session: Session, user_ids: Iterable[str]) -> List[User]:
    ids = [UUID(str(i)) for i in user_ids]
    if not ids:
        return []
    return session.exec(select(User).where(User.id.in_(ids))).all()


def list_active_users(session: Session) -> List[User]:
    return session.exec(
        select(User).where(User.is_active == True).order_by(User.name)
    ).all()


def set_user_active(session: Session, actor: User, user_id: UUID, is_active: bool) -> User:
    """Activa o desactiva un usuario (solo admin). Sus inversiones no se tocan."""
    if not actor.is_admin:
        raise Forbidden("No autorizado, se requiere rol de administrador")

    user = session.get(User, user_id)
    if not user:
        raise NotFound("Usuario no encontrado")

    user.is_active = is_active
    user.updated_at = datetime.utcnow()
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info("Usuario %s %s por %s", user.email, "activado" if is_active else "desactivado", actor.email)
    return user
