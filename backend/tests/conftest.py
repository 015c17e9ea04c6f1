"""Test configuration and fixtures."""

import os

# Point the application engine at memory before anything imports it.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from student_directory.database import Base, get_db
from student_directory.main import app
from student_directory.models import Department, Student

engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """A fresh database session over empty tables for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Test client whose requests share the test session."""

    def override_get_db():
        yield db_session

    with patch("student_directory.main.init_db"):
        app.dependency_overrides[get_db] = override_get_db
        with TestClient(app) as test_client:
            yield test_client
        app.dependency_overrides.clear()


@pytest.fixture
def departments(db_session):
    """CS (id "1") and Mathematics (id "2")."""
    rows = [
        Department(id="1", name="CS", address="Bldg A"),
        Department(id="2", name="Mathematics", address="Science Hall, Room 204"),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture
def make_student(db_session):
    """Insert a student row directly, bypassing the service."""

    def _make(department_id, student_id="S001", first_name="Grace", last_name="Hopper"):
        student = Student(
            first_name=first_name,
            last_name=last_name,
            student_id=student_id,
            address="42 Harbor Rd",
            department_id=department_id,
        )
        db_session.add(student)
        db_session.commit()
        return student

    return _make
