# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .common import PostInput
from .create_post import CreatePostUseCase
from .delete_post import DeletePostUseCase
from .read_posts import (
    GetDashboardStatsUseCase,
    GetPostForEditUseCase,
    GetPublishedPostUseCase,
    ListAllPostsUseCase,
    ListPublishedPostsUseCase,
    SearchPostsUseCase,
)
from .toggle_publish import TogglePublishUseCase
from .update_post import UpdatePostUseCase

__all__ = [
    "CreatePostUseCase",
    "DeletePostUseCase",
    "GetDashboardStatsUseCase",
    "GetPostForEditUseCase",
    "GetPublishedPostUseCase",
    "ListAllPostsUseCase",
    "ListPublishedPostsUseCase",
    "PostInput",
    "SearchPostsUseCase",
    "TogglePublishUseCase",
    "UpdatePostUseCase",
]
