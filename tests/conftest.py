"""
Pytest configuration and fixtures for the autograder tests
"""

import os

# Keep the application engine off postgres; every test builds its own sqlite engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from autograder.database import Base, get_db
from autograder.main import app
from autograder.models import User
from autograder.triggers.enrollment import (
    activate_enrollment_hook,
    unregister_enrollment_hook,
)
from autograder.utils import create_default_class


@pytest.fixture
def engine():
    """In-memory sqlite shared by every session of a test, schema created, no hook"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    unregister_enrollment_hook()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(params=["database", "orm"])
def hook_mode(request):
    return request.param


@pytest.fixture
def hooked_engine(engine, hook_mode):
    activate_enrollment_hook(engine, hook_mode)
    return engine


@pytest.fixture
def session_factory(hooked_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=hooked_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def default_class(session_factory):
    """The CSCI1001 row the enrollment references"""
    session = session_factory()
    try:
        return create_default_class(session)
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """FastAPI test client bound to the test database"""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user():
    counter = {"n": 0}

    def _make_user(**overrides):
        counter["n"] += 1
        fields = {
            "first_name": "Test",
            "last_name": f"User{counter['n']}",
            "user_name": f"user{counter['n']}",
            "email": f"user{counter['n']}@example.com",
        }
        fields.update(overrides)
        return User(**fields)

    return _make_user
