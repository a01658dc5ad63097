# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Response, request

from devblog.shared.config import load_config

SESSION_COOKIE = "session"
SESSION_MAX_AGE = 60 * 60 * 24 * 7
SESSION_SAMESITE = "Lax"


def read_session_cookie() -> str | None:
    return request.cookies.get(SESSION_COOKIE) or None


def set_session_cookie(response: Response, token: str, max_age: int = SESSION_MAX_AGE) -> None:
    config = load_config()
    response.set_cookie(
        SESSION_COOKIE,
        token,
        httponly=True,
        samesite=SESSION_SAMESITE,
        secure=config.session_cookie_secure(),
        max_age=max_age,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    # Deleting an absent cookie is harmless, so logout never fails.
    config = load_config()
    response.delete_cookie(
        SESSION_COOKIE,
        path="/",
        httponly=True,
        samesite=SESSION_SAMESITE,
        secure=config.session_cookie_secure(),
    )


__all__ = [
    "SESSION_COOKIE",
    "SESSION_MAX_AGE",
    "SESSION_SAMESITE",
    "clear_session_cookie",
    "read_session_cookie",
    "set_session_cookie",
]
