# app/api/users.py

from fastapi import APIRouter, Depends
from sqlmodel import Session
from uuid import UUID
from typing import List

from app.database import get_session
from app.core.security import get_current_admin_user, get_current_user
from app.models.user import User
from app.schemas.user import OwnerRead, UserRead
from app.services.users import list_active_users, set_user_active

router = APIRouter(prefix="/users", tags=["users"])


# Usuarios activos que pueden asignarse como propietarios
@router.get("", response_model=List[OwnerRead])
@router.get("/", response_model=List[OwnerRead])
def list_users(
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    return list_active_users(session)


@router.put("/{user_id}/deactivate", response_model=UserRead)
def deactivate_user(
    user_id: UUID,
    admin: User = Depends(get_current_admin_user),
    session: Session = Depends(get_session),
):
    return set_user_active(session, admin, user_id, False)


@router.put("/{user_id}/reactivate", response_model=UserRead)
def reactivate_user(
    user_id: UUID,
    admin: User = Depends(get_current_admin_user),
    session: Session = Depends(get_session),
):
    return set_user_active(session, admin, user_id, True)
