# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from devblog.application.use_cases.posts import (GetPublishedPostUseCase,
                                                 ListPublishedPostsUseCase,
                                                 SearchPostsUseCase)
from devblog.interfaces.http.dto.posts import (PaginationDTO, PostDetailDTO,
                                               PostPageDTO, SearchHitDTO,
                                               SearchQueryDTO)
from devblog.shared.errors.validation import raise_validation_error


class PostsController:
    """Public, unauthenticated read endpoints."""

    def __init__(
        self,
        *,
        list_published: ListPublishedPostsUseCase,
        get_published: GetPublishedPostUseCase,
        search: SearchPostsUseCase,
    ) -> None:
        self._list_published = list_published
        self._get_published = get_published
        self._search = search

    def list_posts(self) -> tuple[Response, int]:
        try:
            dto = PaginationDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        page = self._list_published.execute(dto.page, dto.page_size)
        return jsonify(PostPageDTO.from_domain(page).model_dump(mode="json")), 200

    def get_post(self, slug: str) -> tuple[Response, int]:
        post = self._get_published.execute(slug)
        return jsonify(PostDetailDTO.from_domain(post).model_dump(mode="json")), 200

    def search(self) -> tuple[Response, int]:
        try:
            dto = SearchQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)

        hits = self._search.execute(dto.q)
        return jsonify({"results": [SearchHitDTO.from_domain(hit).model_dump() for hit in hits]}), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/api")
        bp.add_url_rule("/posts", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("/posts/<slug>", view_func=self.get_post, methods=["GET"])
        bp.add_url_rule("/search", view_func=self.search, methods=["GET"])
        return bp
