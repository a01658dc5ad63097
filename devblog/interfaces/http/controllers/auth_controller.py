# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from devblog.application.use_cases.users.login_user import LoginUserUseCase
from devblog.interfaces.http.auth_guard import SessionGuard
from devblog.interfaces.http.dto.auth import (AuthSuccessDTO, CurrentSessionDTO,
                                              LoginRequestDTO, SessionUserDTO)
from devblog.interfaces.http.payload import request_payload
from devblog.interfaces.http.session_cookie import (clear_session_cookie,
                                                    set_session_cookie)
from devblog.shared.errors.validation import raise_validation_error
from devblog.shared.logging import logger
from devblog.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        guard: SessionGuard,
        session_max_age: int,
    ) -> None:
        self._login_use_case = login_use_case
        self._guard = guard
        self._session_max_age = session_max_age

    @rate_limit()
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc)

        session, token = self._login_use_case.execute(dto.email, dto.password)

        payload = AuthSuccessDTO(user=SessionUserDTO.from_session(session)).model_dump()
        response = jsonify(payload)
        set_session_cookie(response, token, self._session_max_age)
        return response, 200

    def logout(self) -> tuple[Response, int]:
        response = jsonify(AuthSuccessDTO().model_dump())
        clear_session_cookie(response)
        logger.info("auth.logout: ok")
        return response, 200

    def me(self) -> tuple[Response, int]:
        session = self._guard.current()
        if session is None:
            return jsonify(CurrentSessionDTO(authenticated=False).model_dump()), 200
        dto = CurrentSessionDTO(authenticated=True, user=SessionUserDTO.from_session(session))
        return jsonify(dto.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
