# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import BcryptPasswordHasher
from .services.session_manager import SessionManager
from .services.slug_resolver import SlugResolver

__all__ = [
    "BcryptPasswordHasher",
    "SessionManager",
    "SlugResolver",
]
