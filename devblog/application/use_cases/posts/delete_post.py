# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from devblog.domain.posts.repositories import PostRepository
from devblog.domain.users.entities import SessionPayload
from devblog.shared.logging import logger

from .common import load_owned_post


class DeletePostUseCase:
    def __init__(self, *, posts: PostRepository) -> None:
        self._posts = posts

    def execute(self, post_id: str, session: SessionPayload) -> None:
        post = load_owned_post(self._posts, post_id, session, "delete")
        self._posts.delete(post.id)
        logger.info(f"posts.delete: ok post_id={post_id} slug={post.slug}")
