"""Shared fixtures: in-memory database, API client and a logged-in user."""

from __future__ import annotations

import os

# cheap hashes for the test run; must be set before app.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from app.auth.jwt import create_access_token
from app.auth.passwords import hash_password
from app.deps import get_db
from app.main import app
from app.models import User

VALID_FORM: dict[str, str] = {
    "username": "alice",
    "password": "",
    "confirmation": "",
    "theme": "dark_serif",
    "language": "en_US",
    "timezone": "Europe/Warsaw",
    "entry_direction": "desc",
    "entry_order": "published_at",
    "entries_per_page": "50",
    "keyboard_shortcuts": "1",
    "show_reading_time": "1",
    "custom_css": "body { color: #333; }",
    "entry_swipe": "0",
    "gesture_nav": "swipe",
    "display_mode": "fullscreen",
    "default_reading_speed": "300",
    "cjk_reading_speed": "600",
    "default_home_page": "starred",
    "categories_sorting_order": "alphabetical",
    "mark_read_on_view": "1",
    "media_playback_rate": "1.5",
    "block_filter_entry_rules": "EntryTitle=(?i)sponsored\nEntryURL=ads",
    "keep_filter_entry_rules": "",
}


@pytest.fixture
def form_values() -> dict[str, str]:
    return dict(VALID_FORM)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user(db) -> User:
    user = User(username="alice", password=hash_password("old-secret"))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def auth_headers(user) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}
