# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Post entities and the publish lifecycle."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from devblog.domain.exceptions import InvariantViolation

WORDS_PER_MINUTE = 200
DESCRIPTION_LENGTH = 160


@dataclass(slots=True, frozen=True)
class AuthorSummary:
    name: str | None
    email: str


@dataclass(slots=True)
class Post:
    """A blog post.

    ``published_at`` is set exactly when ``published`` is true. The two
    lifecycle transitions are :meth:`publish` and :meth:`unpublish`.
    """

    id: str
    title: str
    slug: str
    content: str
    excerpt: str | None
    author_id: str
    published: bool = False
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: AuthorSummary | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.published and self.published_at is None:
            raise InvariantViolation("published post needs a publish time", field="published_at")
        if not self.published and self.published_at is not None:
            raise InvariantViolation("draft cannot carry a publish time", field="published_at")

    def publish(self, now: datetime) -> None:
        if self.published:
            return
        self.published = True
        self.published_at = now

    def unpublish(self) -> None:
        self.published = False
        self.published_at = None

    def toggle_publish(self, now: datetime) -> bool:
        if self.published:
            self.unpublish()
        else:
            self.publish(now)
        return self.published

    def set_published(self, published: bool, now: datetime) -> None:
        if published:
            self.publish(now)
        else:
            self.unpublish()

    def is_owned_by(self, user_id: str) -> bool:
        return self.author_id == user_id

    def reading_minutes(self) -> int:
        words = len(self.content.split(" "))
        return max(1, math.ceil(words / WORDS_PER_MINUTE))

    def description(self) -> str:
        return self.excerpt or self.content[:DESCRIPTION_LENGTH]


@dataclass(slots=True, frozen=True)
class SearchHit:
    id: str
    title: str
    slug: str


@dataclass(slots=True, frozen=True)
class PostPage:
    posts: Sequence[Post]
    has_more: bool
    page: int
    page_size: int


@dataclass(slots=True, frozen=True)
class DashboardStats:
    total: int
    published: int
    drafts: int
    recent: Sequence[Post]
