# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from devblog.application.services.session_manager import SessionManager
from devblog.domain.users.entities import SessionPayload
from devblog.domain.users.exceptions import InvalidCredentialsError
from devblog.domain.users.repositories import PasswordHasher, UserRepository
from devblog.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        sessions: SessionManager,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._sessions = sessions

    def execute(self, email: str, password: str) -> tuple[SessionPayload, str]:
        email = email.strip().lower()
        user = self._users.find_by_email(email)
        password_valid = user is not None and self._password_hasher.verify(
            password, user.password_hash
        )

        # Unknown email and wrong password share one error so accounts cannot be probed.
        if not password_valid or user is None:
            logger.info("auth.login: rejected")
            raise InvalidCredentialsError()

        payload = SessionPayload.for_user(user)
        token = self._sessions.issue(payload)
        logger.info(f"auth.login: ok user_id={user.id}")
        return payload, token
