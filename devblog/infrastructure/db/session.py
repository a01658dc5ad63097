# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, scoped_session, sessionmaker

from devblog.shared.config import load_config
from devblog.shared.errors import PersistenceError
from devblog.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


connect_args: dict[str, object] = {}
engine_options: dict[str, object] = {}
if _config.database.url.startswith("sqlite"):
    connect_args = {
        "check_same_thread": False,
        "timeout": int(_config.database.pool_timeout),
    }
else:
    engine_options = {
        "pool_size": _config.database.pool_size,
        "max_overflow": _config.database.max_overflow,
        "pool_timeout": _config.database.pool_timeout,
    }

ENGINE: Engine = create_engine(
    _config.database.url,
    echo=False,
    future=True,
    pool_pre_ping=True,
    connect_args=connect_args,
    **engine_options,
)


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


@contextmanager
def session_scope() -> Iterator[Session]:
    """Commit on success, roll back on any error.

    Driver and ORM failures leave as :class:`PersistenceError`; everything
    else (domain errors raised inside the block) propagates unchanged.
    """
    session = SessionLocal()
    logger.debug("db.session: opened scoped session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed scoped session")
    except SQLAlchemyError as exc:
        logger.opt(exception=exc).error("db.session: store error, rolling back")
        session.rollback()
        raise PersistenceError() from exc
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
        SessionLocal.remove()
        logger.debug("db.session: closed scoped session")


def init_db() -> None:
    from devblog.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=ENGINE)
    logger.info("Database schema ensured")
