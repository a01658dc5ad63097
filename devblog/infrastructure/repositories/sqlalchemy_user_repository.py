# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from devblog.domain.users.entities import User as DomainUser
from devblog.domain.users.exceptions import UserAlreadyExistsError
from devblog.domain.users.repositories import UserRepository
from devblog.infrastructure.db.models import User
from devblog.infrastructure.db.session import session_scope
from devblog.shared.utils.clock import as_utc


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        password_hash=row.password_hash,
        name=row.name,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.query(User).filter(User.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with session_scope() as session:
            row = User(
                email=user.email,
                password_hash=user.password_hash,
                name=user.name,
                created_at=user.created_at,
                updated_at=user.updated_at,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                raise UserAlreadyExistsError() from exc
            session.refresh(row)
            return _to_domain(row)
