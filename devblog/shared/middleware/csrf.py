# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from functools import wraps

from flask import Flask, request

from devblog.shared.config import load_config
from devblog.shared.errors import CsrfError

SAFE_METHODS: tuple[str, ...] = ("GET", "HEAD", "OPTIONS")
CSRF_COOKIE = "csrf_token"
CSRF_HEADER = "X-CSRF-Token"


def _is_enabled() -> bool:
    return load_config().security.enable_csrf


def configure_csrf(app: Flask) -> None:
    if not _is_enabled():
        return

    @app.after_request
    def _ensure_csrf_cookie(resp):
        if request.method in SAFE_METHODS and not request.cookies.get(CSRF_COOKIE):
            config = load_config()
            resp.set_cookie(
                CSRF_COOKIE,
                secrets.token_urlsafe(32),
                httponly=False,
                samesite=config.security.cookie_samesite,
                secure=config.session_cookie_secure(),
                max_age=60 * 60 * 24 * 7,
                path="/",
            )
        return resp


def csrf_protect(f: Callable):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not _is_enabled() or request.method in SAFE_METHODS:
            return f(*args, **kwargs)
        header = (request.headers.get(CSRF_HEADER) or "").strip()
        cookie = (request.cookies.get(CSRF_COOKIE) or "").strip()
        if not header or not cookie or not secrets.compare_digest(header, cookie):
            raise CsrfError()
        return f(*args, **kwargs)

    return wrapper


__all__ = ["configure_csrf", "csrf_protect"]
