# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from devblog.application.services.slug_resolver import SlugResolver
from devblog.domain.posts.entities import Post
from devblog.domain.posts.repositories import PostRepository
from devblog.domain.users.entities import SessionPayload
from devblog.shared.logging import logger
from devblog.shared.utils.clock import Clock, utc_now

from .common import PostInput, load_owned_post


class UpdatePostUseCase:
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

    def execute(self, post_id: str, data: PostInput, session: SessionPayload) -> Post:
        post = load_owned_post(self._posts, post_id, session, "edit")
        previous_slug = post.slug
        now = self._clock()

        def _save(slug: str) -> Post:
            post.title = data.title
            post.slug = slug
            post.content = data.content
            post.excerpt = data.excerpt
            # An already published post keeps its original publish time.
            post.set_published(data.published, now)
            return self._posts.save(post)

        updated = self._slugs.write_with_unique_slug(
            self._slugs.base_slug(data.title), _save, exclude_id=post_id
        )
        logger.info(
            f"posts.update: ok post_id={post_id} slug={previous_slug}->{updated.slug} "
            f"published={updated.published}"
        )
        return updated
