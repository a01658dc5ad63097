# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from devblog.application.use_cases.posts import (CreatePostUseCase,
                                                 DeletePostUseCase,
                                                 GetDashboardStatsUseCase,
                                                 GetPostForEditUseCase,
                                                 ListAllPostsUseCase,
                                                 TogglePublishUseCase,
                                                 UpdatePostUseCase)
from devblog.interfaces.http.auth_guard import SessionGuard, current_session
from devblog.interfaces.http.dto.posts import (DashboardStatsDTO, PostDetailDTO,
                                               PostInputDTO, PostSummaryDTO)
from devblog.interfaces.http.payload import request_payload
from devblog.shared.errors.validation import raise_validation_error
from devblog.shared.middleware.csrf import csrf_protect


def _post_input() -> PostInputDTO:
    try:
        return PostInputDTO.model_validate(request_payload())
    except ValidationError as exc:
        raise_validation_error(exc)


class AdminController:
    """Editor endpoints. Every view runs behind the session guard."""

    def __init__(
        self,
        *,
        guard: SessionGuard,
        get_dashboard_stats: GetDashboardStatsUseCase,
        list_all: ListAllPostsUseCase,
        get_for_edit: GetPostForEditUseCase,
        create_post: CreatePostUseCase,
        update_post: UpdatePostUseCase,
        delete_post: DeletePostUseCase,
        toggle_publish: TogglePublishUseCase,
    ) -> None:
        self._guard = guard
        self._get_dashboard_stats = get_dashboard_stats
        self._list_all = list_all
        self._get_for_edit = get_for_edit
        self._create_post = create_post
        self._update_post = update_post
        self._delete_post = delete_post
        self._toggle_publish = toggle_publish

    def dashboard(self) -> tuple[Response, int]:
        stats = self._get_dashboard_stats.execute()
        return jsonify(DashboardStatsDTO.from_domain(stats).model_dump(mode="json")), 200

    def list_posts(self) -> tuple[Response, int]:
        posts = self._list_all.execute()
        items = [PostSummaryDTO.from_domain(post).model_dump(mode="json") for post in posts]
        return jsonify({"posts": items}), 200

    @csrf_protect
    def create_post(self) -> tuple[Response, int]:
        dto = _post_input()
        post = self._create_post.execute(dto.to_input(), current_session())
        return jsonify(PostDetailDTO.from_domain(post).model_dump(mode="json")), 201

    def get_post(self, post_id: str) -> tuple[Response, int]:
        post = self._get_for_edit.execute(post_id, current_session())
        return jsonify(PostDetailDTO.from_domain(post).model_dump(mode="json")), 200

    @csrf_protect
    def update_post(self, post_id: str) -> tuple[Response, int]:
        dto = _post_input()
        post = self._update_post.execute(post_id, dto.to_input(), current_session())
        return jsonify(PostDetailDTO.from_domain(post).model_dump(mode="json")), 200

    @csrf_protect
    def delete_post(self, post_id: str) -> tuple[Response, int]:
        self._delete_post.execute(post_id, current_session())
        return jsonify({"ok": True}), 200

    @csrf_protect
    def toggle_publish(self, post_id: str) -> tuple[Response, int]:
        post = self._toggle_publish.execute(post_id, current_session())
        return jsonify(PostSummaryDTO.from_domain(post).model_dump(mode="json")), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin", __name__, url_prefix="/api/admin")
        guard = self._guard
        bp.add_url_rule("/dashboard", view_func=guard(self.dashboard), methods=["GET"])
        bp.add_url_rule("/posts", view_func=guard(self.list_posts), methods=["GET"])
        bp.add_url_rule(
            "/posts", endpoint="create_post", view_func=guard(self.create_post), methods=["POST"]
        )
        bp.add_url_rule("/posts/<post_id>", view_func=guard(self.get_post), methods=["GET"])
        bp.add_url_rule(
            "/posts/<post_id>",
            endpoint="update_post",
            view_func=guard(self.update_post),
            methods=["PUT"],
        )
        bp.add_url_rule(
            "/posts/<post_id>",
            endpoint="delete_post",
            view_func=guard(self.delete_post),
            methods=["DELETE"],
        )
        bp.add_url_rule(
            "/posts/<post_id>/toggle-publish",
            view_func=guard(self.toggle_publish),
            methods=["POST"],
        )
        return bp
