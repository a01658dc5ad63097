from __future__ import annotations

import pytest

from devblog.application.services.session_manager import SessionManager
from devblog.application.use_cases.users import (GetCurrentSessionUseCase,
                                                 LoginUserUseCase,
                                                 RegisterUserUseCase)
from devblog.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from devblog.tests.fakes import DeterministicHasher, InMemoryUserRepository


@pytest.fixture()
def sessions() -> SessionManager:
    return SessionManager("use-case-secret")


@pytest.fixture()
def registered(users: InMemoryUserRepository, hasher: DeterministicHasher) -> InMemoryUserRepository:
    RegisterUserUseCase(users=users, password_hasher=hasher).execute(
        "Alice@Example.com", "Secret123", "Alice"
    )
    return users


def test_register_user_normalises_email(registered: InMemoryUserRepository) -> None:
    user = registered.find_by_email("alice@example.com")
    assert user is not None
    assert user.name == "Alice"
    assert user.password_hash == "hashed:Secret123"


def test_register_user_duplicate_raises(
    registered: InMemoryUserRepository, hasher: DeterministicHasher
) -> None:
    use_case = RegisterUserUseCase(users=registered, password_hasher=hasher)

    with pytest.raises(UserAlreadyExistsError):
        use_case.execute("alice@example.com", "Other1234")


def test_login_user_success(
    registered: InMemoryUserRepository, hasher: DeterministicHasher, sessions: SessionManager
) -> None:
    login = LoginUserUseCase(users=registered, password_hasher=hasher, sessions=sessions)

    payload, token = login.execute(" ALICE@example.com ", "Secret123")

    assert payload.email == "alice@example.com"
    assert payload.name == "Alice"
    assert sessions.verify(token) == payload


@pytest.mark.parametrize(
    ("email", "password"),
    [("alice@example.com", "wrong"), ("nobody@example.com", "Secret123")],
)
def test_login_failures_share_one_error(
    registered: InMemoryUserRepository,
    hasher: DeterministicHasher,
    sessions: SessionManager,
    email: str,
    password: str,
) -> None:
    login = LoginUserUseCase(users=registered, password_hasher=hasher, sessions=sessions)

    with pytest.raises(InvalidCredentialsError) as exc_info:
        login.execute(email, password)

    assert exc_info.value.message == "Invalid email or password"
    assert exc_info.value.status == 401


def test_current_session(
    registered: InMemoryUserRepository, hasher: DeterministicHasher, sessions: SessionManager
) -> None:
    login = LoginUserUseCase(users=registered, password_hasher=hasher, sessions=sessions)
    payload, token = login.execute("alice@example.com", "Secret123")
    current = GetCurrentSessionUseCase(sessions=sessions)

    assert current.execute(token) == payload
    assert current.execute(None) is None
    assert current.execute("not-a-token") is None
