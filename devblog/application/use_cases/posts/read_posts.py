# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Read-side use cases for the public site and the admin area."""

from __future__ import annotations

from collections.abc import Sequence

from devblog.domain.posts.entities import DashboardStats, Post, PostPage, SearchHit
from devblog.domain.posts.exceptions import PostNotFoundError
from devblog.domain.posts.repositories import PostRepository
from devblog.domain.posts.slugs import is_valid_slug
from devblog.domain.users.entities import SessionPayload

from .common import load_owned_post

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
MAX_PAGE = 10_000
RECENT_POSTS = 5
SEARCH_MIN_LENGTH = 2
SEARCH_LIMIT = 10


class ListPublishedPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, page: int = 0, page_size: int = DEFAULT_PAGE_SIZE) -> PostPage:
        page = min(max(0, page), MAX_PAGE)
        page_size = min(max(1, page_size), MAX_PAGE_SIZE)
        rows = list(self._posts.list_published(offset=page * page_size, limit=page_size + 1))
        return PostPage(
            posts=rows[:page_size],
            has_more=len(rows) > page_size,
            page=page,
            page_size=page_size,
        )


class GetPublishedPostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, slug: str) -> Post:
        if not is_valid_slug(slug):
            raise PostNotFoundError()
        post = self._posts.find_by_slug(slug)
        # Drafts are indistinguishable from missing posts on the public site.
        if post is None or not post.published:
            raise PostNotFoundError()
        return post


class ListAllPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self) -> Sequence[Post]:
        return self._posts.list_all()


class GetPostForEditUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: str, session: SessionPayload) -> Post:
        return load_owned_post(self._posts, post_id, session, "edit")


class GetDashboardStatsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self) -> DashboardStats:
        return DashboardStats(
            total=self._posts.count(),
            published=self._posts.count(published=True),
            drafts=self._posts.count(published=False),
            recent=self._posts.list_recent(RECENT_POSTS),
        )


class SearchPostsUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, query: str) -> Sequence[SearchHit]:
        query = (query or "").strip()
        if len(query) < SEARCH_MIN_LENGTH:
            return []
        return self._posts.search_published(query, limit=SEARCH_LIMIT)


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE",
    "MAX_PAGE_SIZE",
    "GetDashboardStatsUseCase",
    "GetPostForEditUseCase",
    "GetPublishedPostUseCase",
    "ListAllPostsUseCase",
    "ListPublishedPostsUseCase",
    "SearchPostsUseCase",
]
