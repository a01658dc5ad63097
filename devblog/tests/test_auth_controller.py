from __future__ import annotations

from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Blueprint, Flask, jsonify

from devblog.application.services.session_manager import SessionManager
from devblog.application.use_cases.users.get_current_session import GetCurrentSessionUseCase
from devblog.application.use_cases.users.login_user import LoginUserUseCase
from devblog.domain.users.entities import SessionPayload
from devblog.domain.users.exceptions import InvalidCredentialsError
from devblog.interfaces.http import session_cookie
from devblog.interfaces.http.auth_guard import SessionGuard, current_session
from devblog.interfaces.http.controllers.auth_controller import AuthController
from devblog.shared.config import AppConfig
from devblog.shared.middleware.error_handler import configure_error_handling

SECRET = "controller-secret"
PAYLOAD = SessionPayload(user_id="u1", email="ann@example.com", name="Ann")


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


@pytest.fixture()
def guard() -> SessionGuard:
    current = GetCurrentSessionUseCase(sessions=SessionManager(SECRET))
    return SessionGuard(current_session=current, login_url="/login")


def _controller(login: object, guard: SessionGuard) -> AuthController:
    return AuthController(
        login_use_case=cast(LoginUserUseCase, login),
        guard=guard,
        session_max_age=604800,
    )


def test_login_endpoint_sets_session_cookie(flask_app: Flask, guard: SessionGuard) -> None:
    login_called: dict[str, tuple[str, str]] = {}

    class StubLogin:
        def execute(self, email: str, password: str) -> tuple[SessionPayload, str]:
            login_called["args"] = (email, password)
            return PAYLOAD, "token123"

    flask_app.register_blueprint(_controller(StubLogin(), guard).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"email": "Ann@Example.com", "password": "Secret123"}
        )

    assert response.status_code == 200
    assert login_called["args"] == ("ann@example.com", "Secret123")
    assert response.get_json()["user"] == {"id": "u1", "email": "ann@example.com", "name": "Ann"}
    cookie = response.headers["Set-Cookie"]
    assert cookie.startswith("session=token123")
    assert "HttpOnly" in cookie
    assert "SameSite=Lax" in cookie
    assert "Max-Age=604800" in cookie
    assert "Path=/" in cookie


def test_login_accepts_form_body(flask_app: Flask, guard: SessionGuard) -> None:
    login = MagicMock()
    login.execute.return_value = (PAYLOAD, "token123")
    flask_app.register_blueprint(_controller(login, guard).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", data={"email": "ann@example.com", "password": "Secret123"}
        )

    assert response.status_code == 200
    login.execute.assert_called_once_with("ann@example.com", "Secret123")


def test_login_invalid_payload_returns_422(flask_app: Flask, guard: SessionGuard) -> None:
    flask_app.register_blueprint(_controller(MagicMock(), guard).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/auth/login", json={"email": "ann@example.com"})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["message"] == "Email and password are required"


def test_login_bad_credentials_returns_generic_401(flask_app: Flask, guard: SessionGuard) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    flask_app.register_blueprint(_controller(login, guard).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/auth/login", json={"email": "ann@example.com", "password": "nope"}
        )

    assert response.status_code == 401
    assert response.get_json() == {
        "error": "invalid_credentials",
        "message": "Invalid email or password",
    }
    assert "Set-Cookie" not in response.headers


def test_session_cookie_stays_lax_whatever_the_configured_samesite(
    flask_app: Flask, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("COOKIE_SAMESITE", "Strict")
    monkeypatch.setattr(session_cookie, "load_config", AppConfig)
    response = flask_app.response_class()

    session_cookie.set_session_cookie(response, "token123")

    assert "SameSite=Lax" in response.headers["Set-Cookie"]

def test_logout_clears_cookie_even_without_session(flask_app: Flask, guard: SessionGuard) -> None:
    flask_app.register_blueprint(_controller(MagicMock(), guard).as_blueprint())

    with flask_app.test_client() as client:
        first = client.post("/api/auth/logout")
        second = client.post("/api/auth/logout")

    for response in (first, second):
        assert response.status_code == 200
        assert response.headers["Set-Cookie"].startswith("session=;")
        assert "Max-Age=0" in response.headers["Set-Cookie"]


def test_me_reports_session_state(flask_app: Flask, guard: SessionGuard) -> None:
    flask_app.register_blueprint(_controller(MagicMock(), guard).as_blueprint())
    token = SessionManager(SECRET).issue(PAYLOAD)

    with flask_app.test_client() as client:
        anonymous = client.get("/api/auth/me")
        client.set_cookie("session", token)
        signed_in = client.get("/api/auth/me")

    assert anonymous.get_json() == {"authenticated": False, "user": None}
    assert signed_in.get_json()["authenticated"] is True
    assert signed_in.get_json()["user"]["id"] == "u1"


def test_guard_rejects_missing_or_forged_session(flask_app: Flask, guard: SessionGuard) -> None:
    bp = Blueprint("protected", __name__)

    def whoami():
        return jsonify({"user_id": current_session().user_id})

    bp.add_url_rule("/protected", view_func=guard(whoami))
    flask_app.register_blueprint(bp)

    with flask_app.test_client() as client:
        missing = client.get("/protected")
        client.set_cookie("session", SessionManager("other-secret").issue(PAYLOAD))
        forged = client.get("/protected")
        client.set_cookie("session", SessionManager(SECRET).issue(PAYLOAD))
        valid = client.get("/protected")

    for response in (missing, forged):
        assert response.status_code == 401
        assert response.get_json()["error"] == "unauthenticated"
        assert response.get_json()["context"] == {"login_url": "/login"}
    assert valid.status_code == 200
    assert valid.get_json() == {"user_id": "u1"}
