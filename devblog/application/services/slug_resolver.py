# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from devblog.domain.posts.exceptions import SlugConflictError
from devblog.domain.posts.repositories import PostRepository
from devblog.domain.posts.slugs import slugify
from devblog.shared.errors import PersistenceError
from devblog.shared.logging import logger

FALLBACK_SLUG = "post"
MAX_WRITE_ATTEMPTS = 3

T = TypeVar("T")


class SlugResolver:
    def __init__(self, posts: PostRepository, *, max_attempts: int = MAX_WRITE_ATTEMPTS) -> None:
        self._posts = posts
        self._max_attempts = max(1, max_attempts)

    @staticmethod
    def base_slug(title: str) -> str:
        return slugify(title) or FALLBACK_SLUG

    def ensure_unique(self, base_slug: str, exclude_id: str | None = None) -> str:
        """Probe ``base``, ``base-1``, ``base-2``... until one is free.

        A slug held only by ``exclude_id`` counts as free so that a post can
        keep its own slug on update.
        """
        slug = base_slug
        counter = 1
        while True:
            holder = self._posts.slug_holder(slug)
            if holder is None or holder == exclude_id:
                return slug
            slug = f"{base_slug}-{counter}"
            counter += 1

    def write_with_unique_slug(
        self,
        base_slug: str,
        write: Callable[[str], T],
        *,
        exclude_id: str | None = None,
    ) -> T:
        """Resolve a slug and hand it to ``write``, retrying on store conflicts.

        Probing and writing are not atomic, so a concurrent writer can claim the
        slug in between. The store's unique constraint turns that into a
        :class:`SlugConflictError`, and the next probe sees the competing row.
        """
        for attempt in range(1, self._max_attempts + 1):
            slug = self.ensure_unique(base_slug, exclude_id)
            try:
                return write(slug)
            except SlugConflictError:
                logger.warning(
                    f"slugs.write: conflict slug={slug} attempt={attempt}/{self._max_attempts}"
                )
        raise PersistenceError("slug_conflict")


__all__ = ["FALLBACK_SLUG", "MAX_WRITE_ATTEMPTS", "SlugResolver"]
