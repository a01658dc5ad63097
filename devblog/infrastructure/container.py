# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from devblog.application.services.password_hashing import \
    BcryptPasswordHasher
from devblog.application.services.session_manager import SessionManager
from devblog.application.services.slug_resolver import SlugResolver
from devblog.application.use_cases.posts import (CreatePostUseCase,
                                                 DeletePostUseCase,
                                                 GetDashboardStatsUseCase,
                                                 GetPostForEditUseCase,
                                                 GetPublishedPostUseCase,
                                                 ListAllPostsUseCase,
                                                 ListPublishedPostsUseCase,
                                                 SearchPostsUseCase,
                                                 TogglePublishUseCase,
                                                 UpdatePostUseCase)
from devblog.application.use_cases.users import (GetCurrentSessionUseCase,
                                                 LoginUserUseCase,
                                                 RegisterUserUseCase)
from devblog.infrastructure.repositories.sqlalchemy_post_repository import \
    SqlAlchemyPostRepository
from devblog.infrastructure.repositories.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from devblog.interfaces.http.auth_guard import SessionGuard
from devblog.interfaces.http.controllers.admin_controller import \
    AdminController
from devblog.interfaces.http.controllers.auth_controller import AuthController
from devblog.interfaces.http.controllers.misc_controller import MiscController
from devblog.interfaces.http.controllers.posts_controller import \
    PostsController
from devblog.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    # Services

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self._config.auth.bcrypt_rounds)

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(
            self._config.session_secret,
            ttl=timedelta(days=self._config.auth.session_ttl_days),
        )

    @cached_property
    def slug_resolver(self) -> SlugResolver:
        return SlugResolver(self.post_repository)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository()

    # Auth use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            sessions=self.session_manager,
        )

    @cached_property
    def get_current_session_use_case(self) -> GetCurrentSessionUseCase:
        return GetCurrentSessionUseCase(sessions=self.session_manager)

    # Post use cases

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(posts=self.post_repository, slugs=self.slug_resolver)

    @cached_property
    def update_post_use_case(self) -> UpdatePostUseCase:
        return UpdatePostUseCase(posts=self.post_repository, slugs=self.slug_resolver)

    @cached_property
    def delete_post_use_case(self) -> DeletePostUseCase:
        return DeletePostUseCase(posts=self.post_repository)

    @cached_property
    def toggle_publish_use_case(self) -> TogglePublishUseCase:
        return TogglePublishUseCase(posts=self.post_repository)

    @cached_property
    def list_published_posts_use_case(self) -> ListPublishedPostsUseCase:
        return ListPublishedPostsUseCase(posts=self.post_repository)

    @cached_property
    def get_published_post_use_case(self) -> GetPublishedPostUseCase:
        return GetPublishedPostUseCase(posts=self.post_repository)

    @cached_property
    def list_all_posts_use_case(self) -> ListAllPostsUseCase:
        return ListAllPostsUseCase(posts=self.post_repository)

    @cached_property
    def get_post_for_edit_use_case(self) -> GetPostForEditUseCase:
        return GetPostForEditUseCase(posts=self.post_repository)

    @cached_property
    def get_dashboard_stats_use_case(self) -> GetDashboardStatsUseCase:
        return GetDashboardStatsUseCase(posts=self.post_repository)

    @cached_property
    def search_posts_use_case(self) -> SearchPostsUseCase:
        return SearchPostsUseCase(posts=self.post_repository)

    # Controllers

    @cached_property
    def session_guard(self) -> SessionGuard:
        return SessionGuard(
            current_session=self.get_current_session_use_case,
            login_url=self._config.auth.login_url,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            guard=self.session_guard,
            session_max_age=self.session_manager.max_age_seconds,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            list_published=self.list_published_posts_use_case,
            get_published=self.get_published_post_use_case,
            search=self.search_posts_use_case,
        )

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController(
            guard=self.session_guard,
            get_dashboard_stats=self.get_dashboard_stats_use_case,
            list_all=self.list_all_posts_use_case,
            get_for_edit=self.get_post_for_edit_use_case,
            create_post=self.create_post_use_case,
            update_post=self.update_post_use_case,
            delete_post=self.delete_post_use_case,
            toggle_publish=self.toggle_publish_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
