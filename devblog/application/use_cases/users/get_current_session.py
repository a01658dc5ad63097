# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from devblog.application.services.session_manager import SessionManager
from devblog.domain.users.entities import SessionPayload


class GetCurrentSessionUseCase:
    """Resolves the session cookie value into the signed-in editor, if any."""

    def __init__(self, *, sessions: SessionManager) -> None:
        self._sessions = sessions

    def execute(self, token: str | None) -> SessionPayload | None:
        return self._sessions.verify(token)
