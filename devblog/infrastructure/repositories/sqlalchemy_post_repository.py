# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from devblog.domain.posts.entities import AuthorSummary, SearchHit
from devblog.domain.posts.entities import Post as DomainPost
from devblog.domain.posts.exceptions import PostNotFoundError, SlugConflictError
from devblog.domain.posts.repositories import PostRepository
from devblog.infrastructure.db.models import Post
from devblog.infrastructure.db.session import session_scope
from devblog.shared.utils.clock import as_utc


def _to_domain(row: Post) -> DomainPost:
    author = AuthorSummary(name=row.author.name, email=row.author.email) if row.author else None
    return DomainPost(
        id=row.id,
        title=row.title,
        slug=row.slug,
        content=row.content,
        excerpt=row.excerpt,
        author_id=row.author_id,
        published=bool(row.published),
        published_at=as_utc(row.published_at) if row.published_at else None,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        author=author,
    )


def _like_pattern(query: str) -> str:
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _flush_claiming_slug(session: Session, slug: str) -> None:
    try:
        session.flush()
    except IntegrityError as exc:
        # Only the slug index is expected to collide; anything else is a store failure.
        if "slug" in str(exc.orig).lower():
            raise SlugConflictError(slug) from exc
        raise


class SqlAlchemyPostRepository(PostRepository):
    def find_by_id(self, post_id: str) -> DomainPost | None:
        with session_scope() as session:
            row = session.get(Post, post_id, options=[joinedload(Post.author)])
            return _to_domain(row) if row else None

    def find_by_slug(self, slug: str) -> DomainPost | None:
        with session_scope() as session:
            row = (
                session.query(Post)
                .options(joinedload(Post.author))
                .filter(Post.slug == slug)
                .first()
            )
            return _to_domain(row) if row else None

    def slug_holder(self, slug: str) -> str | None:
        with session_scope() as session:
            return session.query(Post.id).filter(Post.slug == slug).scalar()

    def add(self, post: DomainPost) -> DomainPost:
        with session_scope() as session:
            row = Post(
                title=post.title,
                slug=post.slug,
                content=post.content,
                excerpt=post.excerpt,
                author_id=post.author_id,
                published=post.published,
                published_at=post.published_at,
            )
            session.add(row)
            _flush_claiming_slug(session, post.slug)
            session.refresh(row)
            return _to_domain(row)

    def save(self, post: DomainPost) -> DomainPost:
        with session_scope() as session:
            row = session.get(Post, post.id)
            if row is None:
                raise PostNotFoundError()
            row.title = post.title
            row.slug = post.slug
            row.content = post.content
            row.excerpt = post.excerpt
            row.published = post.published
            row.published_at = post.published_at
            _flush_claiming_slug(session, post.slug)
            session.refresh(row)
            return _to_domain(row)

    def delete(self, post_id: str) -> None:
        with session_scope() as session:
            session.query(Post).filter(Post.id == post_id).delete()

    def list_published(self, *, offset: int, limit: int) -> Sequence[DomainPost]:
        with session_scope() as session:
            rows = (
                session.query(Post)
                .options(joinedload(Post.author))
                .filter(Post.published.is_(True))
                .order_by(Post.published_at.desc(), Post.id.asc())
                .offset(offset)
                .limit(limit)
                .all()
            )
            return [_to_domain(row) for row in rows]

    def list_all(self) -> Sequence[DomainPost]:
        with session_scope() as session:
            rows = (
                session.query(Post)
                .options(joinedload(Post.author))
                .order_by(Post.published.desc(), Post.updated_at.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def list_recent(self, limit: int) -> Sequence[DomainPost]:
        with session_scope() as session:
            rows = (
                session.query(Post)
                .options(joinedload(Post.author))
                .order_by(Post.created_at.desc())
                .limit(limit)
                .all()
            )
            return [_to_domain(row) for row in rows]

    def search_published(self, query: str, *, limit: int) -> Sequence[SearchHit]:
        pattern = _like_pattern(query)
        with session_scope() as session:
            rows = (
                session.query(Post.id, Post.title, Post.slug)
                .filter(Post.published.is_(True))
                .filter(
                    or_(
                        Post.title.ilike(pattern, escape="\\"),
                        Post.content.ilike(pattern, escape="\\"),
                        Post.excerpt.ilike(pattern, escape="\\"),
                    )
                )
                .order_by(Post.published_at.desc())
                .limit(limit)
                .all()
            )
            return [SearchHit(id=row.id, title=row.title, slug=row.slug) for row in rows]

    def count(self, *, published: bool | None = None) -> int:
        with session_scope() as session:
            query = session.query(func.count(Post.id))
            if published is not None:
                query = query.filter(Post.published.is_(published))
            return int(query.scalar() or 0)
