# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from devblog.domain.posts.entities import Post
from devblog.domain.posts.exceptions import PermissionDeniedError, PostNotFoundError
from devblog.domain.posts.repositories import PostRepository
from devblog.domain.users.entities import SessionPayload
from devblog.shared.logging import logger


@dataclass(slots=True, frozen=True)
class PostInput:
    title: str
    content: str
    excerpt: str | None = None
    published: bool = False


def load_owned_post(
    posts: PostRepository, post_id: str, session: SessionPayload, action: str
) -> Post:
    post = posts.find_by_id(post_id)
    if post is None:
        logger.info(f"posts.{action}: not_found post_id={post_id}")
        raise PostNotFoundError()
    if not post.is_owned_by(session.user_id):
        logger.warning(
            f"posts.{action}: denied post_id={post_id} user_id={session.user_id}"
        )
        raise PermissionDeniedError(f"You do not have permission to {action} this post")
    return post
