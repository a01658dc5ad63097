# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from devblog.infrastructure.container import container
from devblog.infrastructure.db import init_db
from devblog.shared.config import load_config
from devblog.shared.logging import logger, setup_logging
from devblog.shared.middleware.csrf import configure_csrf
from devblog.shared.middleware.error_handler import configure_error_handling
from devblog.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


_config = load_config()


def create_app() -> Flask:
    init_db()
    setup_logging(debug_mode=_config.debug_logging)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_csrf(app)

    configure_request_logging(app)

    app.config.update(
        SECRET_KEY=_config.session_secret,
        # The "session" cookie name belongs to the signed editor token.
        SESSION_COOKIE_NAME="flask_session",
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE=_config.security.cookie_samesite,
        SESSION_COOKIE_SECURE=_config.session_cookie_secure(),
    )

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": _config.security.allowed_origins}}
    }
    if any(o != "*" for o in _config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())
    app.register_blueprint(container.admin_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized env={_config.app_env}")
    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=not _config.is_production())
