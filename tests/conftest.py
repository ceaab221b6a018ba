"""Shared fixtures: a throw-away SQLite database and record factories."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "darkstore_api_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["APP_TIMEZONE"] = "Asia/Kolkata"

from darkstore.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from darkstore.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from darkstore.infrastructure.models import AccountModel, NotificationModel  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def insert_account():
    """Insert an account row and return its id."""

    def _create(*, role: str = "customer", name: str = "Test User", **overrides) -> int:
        values = {
            "email": None,
            "phone": None,
            "is_active": True,
            "is_suspended": False,
            "suspension_reason": None,
            "locked_until": None,
            "failed_login_attempts": 0,
        }
        values.update(overrides)
        with SessionLocal() as db:
            model = AccountModel(role=role, name=name, **values)
            db.add(model)
            db.commit()
            db.refresh(model)
            return model.id

    return _create


@pytest.fixture()
def insert_notification():
    """Insert a notification row and return its id."""

    def _create(
        *,
        target_type: str = "all",
        title: str = "Notice",
        message: str = "Hello",
        **overrides,
    ) -> int:
        with SessionLocal() as db:
            model = NotificationModel(
                target_type=target_type, title=title, message=message, **overrides
            )
            db.add(model)
            db.commit()
            db.refresh(model)
            return model.id

    return _create


@pytest.fixture()
def fetch_account():
    """Return the stored columns of an account, read through a new session."""

    def _fetch(account_id: int) -> dict:
        with SessionLocal() as db:
            model = db.get(AccountModel, account_id)
            assert model is not None
            return {
                "role": model.role,
                "is_active": model.is_active,
                "is_suspended": model.is_suspended,
                "suspension_reason": model.suspension_reason,
                "locked_until": model.locked_until,
                "failed_login_attempts": model.failed_login_attempts,
            }

    return _fetch


@pytest.fixture()
def fetch_notifications():
    """Return ``{id: (is_read, read_at)}`` for every stored notification."""

    def _fetch() -> dict[int, tuple[bool, object]]:
        with SessionLocal() as db:
            return {
                model.id: (model.is_read, model.read_at)
                for model in db.query(NotificationModel).all()
            }

    return _fetch
