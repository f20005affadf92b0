from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session
from app.core.config import ENVIRONMENT
from app.core.exceptions import Forbidden
from app.models.user import User
from app.schemas.user import Token, UserCreate, UserRead
from app.core.security import create_access_token, get_current_user
from app.database import get_session
from app.services.users import DEFAULT_USERS, authenticate, create_default_users, register_user

router = APIRouter(prefix="/auth", tags=["auth"])

# Registro
@router.post("/register", response_model=UserRead, status_code=201)
def register(user_create: UserCreate, session: Session = Depends(get_session)):
    return register_user(session, user_create.email, user_create.password, user_create.name)

# Login (username = email)
@router.post("/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), session: Session = Depends(get_session)):
    user, access_token = authenticate(session, form_data.username, form_data.password)
    return Token(access_token=access_token, user=UserRead.model_validate(user))

# Ruta protegida
@router.get("/me", response_model=UserRead)
def read_users_me(user: User = Depends(get_current_user)):
    return user

@router.post("/refresh", response_model=Token)
def refresh_token(user: User = Depends(get_current_user)):
    access_token = create_access_token(data={"sub": str(user.id)})
    return Token(access_token=access_token, user=UserRead.model_validate(user))

@router.post("/logout")
def logout(user: User = Depends(get_current_user)):
    # El token es stateless: el cliente simplemente lo descarta
    return {"message": "Sesión cerrada"}

# Usuarios por defecto (solo fuera de producción)
@router.post("/init")
def init_default_users(session: Session = Depends(get_session)):
    if ENVIRONMENT == "production":
        raise Forbidden("Este endpoint no está disponible en producción.")

    created = create_default_users(session)
    return {
        "message": "Usuarios por defecto creados",
        "created": [u.email for u in created],
        "users": [{"email": u["email"], "role": u["role"].value} for u in DEFAULT_USERS],
    }
