# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Post, SearchHit


class PostRepository(Protocol):
    def find_by_id(self, post_id: str) -> Post | None: ...
    def find_by_slug(self, slug: str) -> Post | None: ...
    def slug_holder(self, slug: str) -> str | None: ...
    def add(self, post: Post) -> Post: ...
    def save(self, post: Post) -> Post: ...
    def delete(self, post_id: str) -> None: ...
    def list_published(self, *, offset: int, limit: int) -> Sequence[Post]: ...
    def list_all(self) -> Sequence[Post]: ...
    def list_recent(self, limit: int) -> Sequence[Post]: ...
    def search_published(self, query: str, *, limit: int) -> Sequence[SearchHit]: ...
    def count(self, *, published: bool | None = None) -> int: ...
