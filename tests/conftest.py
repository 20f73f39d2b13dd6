import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.core.security import create_access_token
from app.crud import crud_child, crud_user
from app.database import Base
from app.main import app
from app.schemas.child import ChildCreate
from app.schemas.user import UserCreate

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "password123"


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db, name, email, role):
    return crud_user.create_user(
        db,
        user_in=UserCreate(
            name=name,
            email=email,
            role=role,
            password=PASSWORD,
            confirm_password=PASSWORD,
        ),
    )


def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(data={'sub': user.email})}"}


@pytest.fixture
def mother(db):
    return make_user(db, "Amina Njeri", "amina@example.com", "mother")


@pytest.fixture
def other_mother(db):
    return make_user(db, "Grace Wanjiku", "grace@example.com", "mother")


@pytest.fixture
def doctor(db):
    return make_user(db, "Dr. Otieno", "otieno@example.com", "doctor")


@pytest.fixture
def mother_headers(mother):
    return auth_headers(mother)


@pytest.fixture
def other_mother_headers(other_mother):
    return auth_headers(other_mother)


@pytest.fixture
def doctor_headers(doctor):
    return auth_headers(doctor)


@pytest.fixture
def make_child(db):
    def _make_child(mother, name="Baraka", dob=date(2023, 1, 15), gender="male"):
        return crud_child.create_for_mother(
            db, child_in=ChildCreate(name=name, dob=dob, gender=gender), mother_id=mother.id
        )
    return _make_child


@pytest.fixture
def child(make_child, mother):
    return make_child(mother)
