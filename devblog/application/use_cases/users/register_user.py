# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from devblog.domain.users.entities import User
from devblog.domain.users.exceptions import UserAlreadyExistsError
from devblog.domain.users.repositories import PasswordHasher, UserRepository
from devblog.shared.logging import logger
from devblog.shared.utils.clock import Clock, utc_now


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        clock: Clock = utc_now,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._clock = clock

    def execute(self, email: str, password: str, name: str | None = None) -> User:
        email = email.strip().lower()
        if self._users.find_by_email(email):
            raise UserAlreadyExistsError()
        now = self._clock()
        hashed = self._password_hasher.hash(password)
        user = User(
            id="",
            email=email,
            password_hash=hashed,
            name=(name or "").strip() or None,
            created_at=now,
            updated_at=now,
        )
        persisted = self._users.add(user)
        logger.info(f"auth.register: ok user_id={persisted.id}")
        return persisted
