# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    email: str
    password_hash: str
    name: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class SessionPayload:
    """Identity carried inside a signed session token."""

    user_id: str
    email: str
    name: str | None

    @classmethod
    def for_user(cls, user: User) -> SessionPayload:
        return cls(user_id=user.id, email=user.email, name=user.name)
