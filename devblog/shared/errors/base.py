# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast

GENERIC_RETRY_MESSAGE = "An error occurred. Please try again."


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.message:
            payload["message"] = self.message
        if self.context:
            payload["context"] = dict(self.context)
        return payload


def _class_default(cls: type, name: str, default: Any = None) -> Any:
    for klass in cls.__mro__:
        if klass is AppError:
            break
        if name in vars(klass):
            return vars(klass)[name]
    return default


class DomainError(AppError):
    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, _class_default(type(self), "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, _class_default(type(self), "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast("str | None", _class_default(type(self), "message"))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, message=message, context=context)


class PersistenceError(InfrastructureError):
    """Store failure surfaced to callers as a generic retry-later message."""

    def __init__(self, code: str = "persistence_error") -> None:
        super().__init__(
            code,
            status=HTTPStatus.SERVICE_UNAVAILABLE,
            message=GENERIC_RETRY_MESSAGE,
        )


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.UNPROCESSABLE_ENTITY,
            message=message,
            context=context,
        )


class UnauthenticatedError(AppError):
    def __init__(self, login_url: str) -> None:
        super().__init__(
            code="unauthenticated",
            status=HTTPStatus.UNAUTHORIZED,
            message="Authentication required",
            context={"login_url": login_url},
        )


class RateLimitedError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="rate_limited",
            status=HTTPStatus.TOO_MANY_REQUESTS,
            message="Too many requests. Please try again later.",
        )


class CsrfError(AppError):
    def __init__(self) -> None:
        super().__init__(code="csrf", status=HTTPStatus.FORBIDDEN)
