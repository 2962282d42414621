"""Pytest configuration."""
import os
from pathlib import Path

# Settings are read at import time, so the environment goes first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret-with-at-least-thirty-two-bytes"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from kidcode.core.database import Base, build_engine, create_db_and_tables, get_db
from kidcode.crud import lesson_crud
from kidcode.main import app
from kidcode.models.user_model import User
from kidcode.schemas.lesson_schema import LessonCreate, QuizCreate
from kidcode.services import seed_service

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(scope="session")
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def engine():
    # One shared in-memory connection so every session sees the same tables
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    create_db_and_tables(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def catalog(db):
    seed_service.seed_achievement_catalog(db)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the startup hook (create_all + seed) stays off
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user(db):
    db_user = User(email="kid@example.com", password_hash="unused", display_name="Kid")
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


@pytest.fixture
def make_lesson(db):
    """Creates a committed lesson whose quizzes have the given correct indexes."""
    def _make_lesson(answer_key=(), title="Lesson", language="KidCode", topic="Basics", summary="A lesson.", content="Text."):
        lesson = lesson_crud.create_lesson(db, LessonCreate(
            title=title,
            summary=summary,
            content=content,
            language=language,
            topic=topic,
            quizzes=[
                QuizCreate(question=f"Question {i + 1}?", options=["a", "b", "c"], answer_index=answer)
                for i, answer in enumerate(answer_key)
            ],
        ))
        db.commit()
        return lesson
    return _make_lesson


@pytest.fixture
def register(client):
    """Registers an account through the API and returns its Authorization header."""
    def _register(email="learner@example.com", password="secret123", display_name="Learner"):
        response = client.post("/api/auth/register", json={
            "email": email, "password": password, "displayName": display_name,
        })
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}
    return _register
