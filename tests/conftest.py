from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.security import create_access_token, get_password_hash
from app.database import get_session
from app.main import app
from app.models.enums import AssetType, UserRole
from app.models.investment import Investment
from app.models.user import User

PASSWORD = "password123"
PASSWORD_HASH = get_password_hash(PASSWORD)  # bcrypt es lento: un solo hash para todos


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


def _create_user(session, email, name, role=UserRole.viewer, is_active=True):
    user = User(email=email, hashed_password=PASSWORD_HASH, name=name, role=role, is_active=is_active)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture()
def admin(session):
    return _create_user(session, "admin@altfolio.com", "Admin User", role=UserRole.admin)


@pytest.fixture()
def viewer(session):
    return _create_user(session, "viewer@altfolio.com", "Viewer User")


@pytest.fixture()
def other_viewer(session):
    return _create_user(session, "other@altfolio.com", "Other Viewer")


@pytest.fixture()
def inactive_user(session):
    return _create_user(session, "inactive@altfolio.com", "Inactive User", is_active=False)


@pytest.fixture()
def make_investment(session):
    def _make(owners, **kwargs):
        data = {
            "asset_name": "Test Startup",
            "asset_type": AssetType.startup,
            "invested_amount": 100000.0,
            "current_value": 120000.0,
            "investment_date": datetime(2023, 1, 1),
            "is_active": True,
        }
        data.update(kwargs)
        investment = Investment(owners=[str(u.id) for u in owners], **data)
        session.add(investment)
        session.commit()
        session.refresh(investment)
        return investment

    return _make


@pytest.fixture()
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers():
    def _headers(user):
        token = create_access_token(data={"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _headers
