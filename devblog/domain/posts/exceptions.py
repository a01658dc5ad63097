# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from devblog.shared.errors.base import DomainError


class PostNotFoundError(DomainError):
    code = "post_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Post not found"


class PermissionDeniedError(DomainError):
    code = "permission_denied"
    status = HTTPStatus.FORBIDDEN
    message = "You do not have permission to modify this post"


class SlugConflictError(DomainError):
    """Raised by the store when another row already holds the slug."""

    code = "slug_conflict"
    status = HTTPStatus.CONFLICT

    def __init__(self, slug: str) -> None:
        super().__init__(context={"slug": slug})
        self.slug = slug
