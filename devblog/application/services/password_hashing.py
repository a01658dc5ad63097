"""Password hashing strategies."""

from __future__ import annotations

from passlib.context import CryptContext

from devblog.domain.users.repositories import PasswordHasher

DEFAULT_BCRYPT_ROUNDS = 10


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash(self, password: str) -> str:
        return str(self._context.hash(password))

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(self._context.verify(password, hashed))
        except (ValueError, TypeError):
            # Unrecognised or malformed hash in the store.
            return False
