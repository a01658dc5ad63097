# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from devblog.domain.posts.entities import Post
from devblog.domain.posts.repositories import PostRepository
from devblog.domain.users.entities import SessionPayload
from devblog.shared.logging import logger
from devblog.shared.utils.clock import Clock, utc_now

from .common import load_owned_post


class TogglePublishUseCase:
    def __init__(self, *, posts: PostRepository, clock: Clock = utc_now) -> None:
        self._posts = posts
        self._clock = clock

    def execute(self, post_id: str, session: SessionPayload) -> Post:
        post = load_owned_post(self._posts, post_id, session, "modify")
        post.toggle_publish(self._clock())
        saved = self._posts.save(post)
        logger.info(f"posts.toggle_publish: ok post_id={post_id} published={saved.published}")
        return saved
