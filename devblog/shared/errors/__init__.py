# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    GENERIC_RETRY_MESSAGE,
    AppError,
    CsrfError,
    DomainError,
    InfrastructureError,
    PersistenceError,
    RateLimitedError,
    UnauthenticatedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "GENERIC_RETRY_MESSAGE",
    "AppError",
    "CsrfError",
    "DomainError",
    "InfrastructureError",
    "PersistenceError",
    "RateLimitedError",
    "UnauthenticatedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
