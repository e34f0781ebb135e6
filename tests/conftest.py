"""Pytest configuration and fixtures."""

import os

# precisa vir antes de importar a aplicação (Settings lê o ambiente no import)
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_SECRET"] = "test-secret"
os.environ["BOOTSTRAP_ADMIN_EMAIL"] = ""

import pytest
from fastapi.testclient import TestClient

from agenda.core.security import hash_password
from agenda.db.base import Base
from agenda.db.session import SessionLocal, engine
from agenda.main import app
from agenda.models.enums import AuthType, Role
from agenda.models.user import User
from agenda.services.identity import Identity, issue_token

PASSWORD = "senha-forte-123"


@pytest.fixture(autouse=True)
def schema():
    """Fresh schema for every test."""
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_user(db):
    def _make(email: str, role: Role = Role.coordenador, full_name: str | None = None, active: bool = True) -> User:
        user = User(
            email=email,
            full_name=full_name or email.split("@")[0].title(),
            role=role,
            auth_type=AuthType.local,
            password_hash=hash_password(PASSWORD),
            active=active,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def ana(make_user) -> User:
    """Coordenadora, dona dos eventos nos testes."""
    return make_user("ana@escola.edu.br", full_name="Ana Souza")


@pytest.fixture
def caio(make_user) -> User:
    """Outro coordenador."""
    return make_user("caio@escola.edu.br", full_name="Caio Lima")


@pytest.fixture
def beatriz(make_user) -> User:
    """Supervisora."""
    return make_user("beatriz@escola.edu.br", role=Role.supervisor, full_name="Beatriz Reis")


@pytest.fixture
def headers():
    def _headers(user: User) -> dict:
        return {"Authorization": f"Bearer {issue_token(user)}"}

    return _headers


@pytest.fixture
def identity():
    def _identity(user: User) -> Identity:
        return Identity.from_user(user)

    return _identity


@pytest.fixture
def workshop() -> dict:
    return {
        "title": "Workshop",
        "event_type": "Formação",
        "start_date": "2025-03-01",
        "end_date": "2025-03-01",
        "all_day": True,
    }


@pytest.fixture
def password() -> str:
    return PASSWORD
