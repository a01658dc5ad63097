# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from devblog.application.use_cases.users.get_current_session import GetCurrentSessionUseCase
from devblog.domain.users.entities import SessionPayload
from devblog.shared.errors import UnauthenticatedError
from devblog.shared.logging import logger

from .session_cookie import read_session_cookie


class SessionGuard:
    """Wraps admin views so they only run for a verified session.

    The verified payload is exposed as ``g.session`` and ``g.user_id``.
    """

    def __init__(self, *, current_session: GetCurrentSessionUseCase, login_url: str) -> None:
        self._current_session = current_session
        self._login_url = login_url

    def current(self) -> SessionPayload | None:
        return self._current_session.execute(read_session_cookie())

    def require(self) -> SessionPayload:
        payload = self.current()
        if payload is None:
            logger.info(f"auth.guard: rejected path={request.path}")
            raise UnauthenticatedError(self._login_url)
        g.session = payload
        g.user_id = payload.user_id
        return payload

    def __call__(self, view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self.require()
            return view(*args, **kwargs)

        return wrapper


def current_session() -> SessionPayload:
    return g.session


__all__ = ["SessionGuard", "current_session"]
