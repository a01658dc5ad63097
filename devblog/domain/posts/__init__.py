# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import AuthorSummary, DashboardStats, Post, PostPage, SearchHit
from .exceptions import PermissionDeniedError, PostNotFoundError, SlugConflictError
from .repositories import PostRepository
from .slugs import is_valid_slug, slugify

__all__ = [
    "AuthorSummary",
    "DashboardStats",
    "PermissionDeniedError",
    "Post",
    "PostNotFoundError",
    "PostPage",
    "PostRepository",
    "SearchHit",
    "SlugConflictError",
    "is_valid_slug",
    "slugify",
]
