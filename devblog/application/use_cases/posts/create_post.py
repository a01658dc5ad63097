# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from devblog.application.services.slug_resolver import SlugResolver
from devblog.domain.posts.entities import Post
from devblog.domain.posts.repositories import PostRepository
from devblog.domain.users.entities import SessionPayload
from devblog.shared.logging import logger
from devblog.shared.utils.clock import Clock, utc_now

from .common import PostInput


class CreatePostUseCase:
    def __init__(
        self,
        *,
        posts: PostRepository,
        slugs: SlugResolver,
        clock: Clock = utc_now,
    ) -> None:
        self._posts = posts
        self._slugs = slugs
        self._clock = clock

    def execute(self, data: PostInput, session: SessionPayload) -> Post:
        now = self._clock()

        def _insert(slug: str) -> Post:
            return self._posts.add(
                Post(
                    id="",
                    title=data.title,
                    slug=slug,
                    content=data.content,
                    excerpt=data.excerpt,
                    author_id=session.user_id,
                    published=data.published,
                    published_at=now if data.published else None,
                )
            )

        created = self._slugs.write_with_unique_slug(self._slugs.base_slug(data.title), _insert)
        logger.info(
            f"posts.create: ok post_id={created.id} slug={created.slug} "
            f"published={created.published} user_id={session.user_id}"
        )
        return created
