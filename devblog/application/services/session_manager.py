# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited session tokens."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from jose import JWTError, jwt

from devblog.domain.users.entities import SessionPayload
from devblog.shared.logging import logger
from devblog.shared.utils.clock import Clock, utc_now

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(days=7)


class SessionManager:
    """Issues and verifies HS256 JWTs carrying a :class:`SessionPayload`.

    The signing secret is injected by the caller. Verification never raises:
    a bad signature, a malformed token, missing claims and expiry all come
    back as ``None``.
    """

    def __init__(self, secret: str, *, ttl: timedelta = DEFAULT_TTL, clock: Clock = utc_now) -> None:
        if not secret:
            raise ValueError("session secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock

    @property
    def max_age_seconds(self) -> int:
        return int(self._ttl.total_seconds())

    def issue(self, payload: SessionPayload) -> str:
        now = self._clock()
        claims: dict[str, Any] = {
            "userId": payload.user_id,
            "email": payload.email,
            "name": payload.name,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str | None) -> SessionPayload | None:
        if not token:
            return None
        try:
            claims = jwt.decode(
                token, self._secret, algorithms=[ALGORITHM], options={"verify_exp": False}
            )
        except (JWTError, ValueError, TypeError) as exc:
            logger.debug(f"session.verify: rejected ({type(exc).__name__})")
            return None
        exp = claims.get("exp")
        # Expiry is checked against the injected clock, not the wall clock.
        if not isinstance(exp, int) or exp <= int(self._clock().timestamp()):
            logger.debug("session.verify: rejected (expired)")
            return None
        return _payload_from_claims(claims)


def _payload_from_claims(claims: dict[str, Any]) -> SessionPayload | None:
    user_id = claims.get("userId")
    email = claims.get("email")
    name = claims.get("name")
    if not isinstance(user_id, str) or not user_id:
        return None
    if not isinstance(email, str) or not email:
        return None
    if name is not None and not isinstance(name, str):
        return None
    return SessionPayload(user_id=user_id, email=email, name=name)


__all__ = ["ALGORITHM", "DEFAULT_TTL", "SessionManager"]
