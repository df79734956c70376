"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Users, resumes and jobs
- Overriding the caller identity
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401  (registers tables on Base.metadata)
from app.core.database import Base, get_db
from app.core.deps import get_current_user_id
from app.models.job import Job, JobStatus
from app.models.resume import Resume
from app.models.user import User, UserRole
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


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
def act_as():
    """
    Replace the identity resolver with a fixed user id (or None).

    Usage:
        act_as(user.id)
        act_as(None)  # unauthenticated
    """
    def _act_as(user_id):
        app.dependency_overrides[get_current_user_id] = lambda: user_id

    yield _act_as

    app.dependency_overrides.pop(get_current_user_id, None)


@pytest.fixture
def make_user(db_session):
    """Factory for users with a given role."""
    counter = {"n": 0}

    def _make_user(role=UserRole.JOB_SEEKER, with_resume=False):
        counter["n"] += 1
        user = User(email=f"user{counter['n']}@example.com", role=role)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)

        if with_resume:
            db_session.add(Resume(user_id=user.id, title="My resume"))
            db_session.commit()

        return user

    return _make_user


@pytest.fixture
def job_seeker(make_user):
    """A job-seeker who has a resume on file"""
    return make_user(UserRole.JOB_SEEKER, with_resume=True)


@pytest.fixture
def make_job(db_session):
    """Factory for jobs inserted directly into the store."""
    def _make_job(status=JobStatus.OPEN, title="Backend Engineer"):
        job = Job(
            title=title,
            description="Build and run APIs",
            salary_min=60000,
            salary_max=100000,
            location="Remote",
            status=status
        )
        db_session.add(job)
        db_session.commit()
        db_session.refresh(job)
        return job

    return _make_job


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Engineer",
        "description": "Build things",
        "salary_range": {"min": 50000, "max": 90000},
        "location": "Remote"
    }
