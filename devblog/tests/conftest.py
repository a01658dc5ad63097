from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TMP = Path(tempfile.mkdtemp(prefix="devblog-tests-"))

# Configuration is read once at import time, so the test environment has to be
# in place before anything from devblog is imported.
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'devblog.db'}"
os.environ["SESSION_SECRET"] = "pytest-session-secret-0123456789"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENABLE_RATE_LIMIT"] = "false"
os.environ["ENABLE_CSRF"] = "false"
os.environ["LOG_FILE"] = str(_TMP / "devblog.log")

from devblog.domain.users.entities import SessionPayload  # noqa: E402
from devblog.tests.fakes import (  # noqa: E402
    DeterministicHasher,
    FrozenClock,
    InMemoryPostRepository,
    InMemoryUserRepository,
)


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def posts() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def author() -> SessionPayload:
    return SessionPayload(user_id="u1", email="ann@example.com", name="Ann")


@pytest.fixture()
def other_author() -> SessionPayload:
    return SessionPayload(user_id="u2", email="bob@example.com", name="Bob")
