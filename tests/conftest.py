"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown with seeded companies and jobs
- FastAPI test client
- Admin and non-admin bearer tokens
"""

import os

# Point the app's own engine at SQLite before anything imports app.core.database
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite:///:memory:")
os.environ.setdefault("JSON_LOGS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, SQLExecutor, get_db
from app.core.security import create_access_token
from app.crud.job import JobRepository
from app import models  # noqa: F401  registers tables on Base
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite only enforces foreign keys when asked to"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _seed(db):
    db.execute(text("""
        INSERT INTO companies (handle, name, num_employees, description, logo_url)
        VALUES ('c1', 'C1', 1, 'Desc1', 'http://c1.img'),
               ('c2', 'C2', 2, 'Desc2', 'http://c2.img'),
               ('c3', 'C3', 3, 'Desc3', 'http://c3.img')"""))
    db.execute(text("""
        INSERT INTO jobs (title, salary, equity, company_handle)
        VALUES ('title1', 50000, 0, 'c1'),
               ('title2', 60000, 0.04, 'c1'),
               ('title3', 70000, 0.06, 'c2')"""))
    db.commit()


@pytest.fixture
def db_session():
    """
    Create a fresh, seeded database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        _seed(db)
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def job_ids(db_session):
    """Seeded job ids keyed by title"""
    rows = db_session.execute(text("SELECT id, title FROM jobs")).all()
    return {title: job_id for job_id, title in rows}


@pytest.fixture
def job_repo(db_session):
    return JobRepository(SQLExecutor(db_session))


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_token():
    return create_access_token({"sub": "u1", "is_admin": True})


@pytest.fixture
def user_token():
    return create_access_token({"sub": "u2", "is_admin": False})


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def user_headers(user_token):
    return {"Authorization": f"Bearer {user_token}"}
