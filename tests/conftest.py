import os

# banco em memória antes de qualquer import da aplicação
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from counsel_api.db.base import Base
from counsel_api.db.session import get_db
from counsel_api.core.tokens import create_access_token
from counsel_api.main import app
from counsel_api.models.account import Account
from counsel_api.models.program import Program


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def seeded(session_factory):
    """Dois membros, dois programas ativos e um desativado."""
    with session_factory() as db:
        db.add_all([
            Account(id=1, username="alice", full_name="Alice Member", email="alice@example.org"),
            Account(id=2, username="bob", full_name="Bob Member", email="bob@example.org"),
        ])
        db.add_all([
            Program(id=10, name="Parenting Workshop", type="workshop", organizer="Family Team",
                    date=datetime(2026, 11, 1, tzinfo=timezone.utc)),
            Program(id=11, name="Stress Management Talk", type="seminar", organizer="Wellbeing Office",
                    date=datetime(2026, 12, 1, tzinfo=timezone.utc)),
            Program(id=12, name="Retired Program", type="seminar", organizer="Archive",
                    date=datetime(2025, 1, 1, tzinfo=timezone.utc), is_disabled=True),
        ])
        db.commit()
    return {"active": [10, 11], "disabled": 12, "accounts": [1, 2]}


@pytest.fixture()
def db(session_factory, seeded):
    with session_factory() as session:
        yield session


@pytest.fixture()
def client(session_factory, seeded):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers():
    def _make(account_id: int) -> dict:
        return {"Authorization": f"Bearer {create_access_token(account_id=account_id)}"}
    return _make
