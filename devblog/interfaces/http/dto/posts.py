from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from devblog.application.use_cases.posts import PostInput
from devblog.application.use_cases.posts.read_posts import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE,
    MAX_PAGE_SIZE,
)
from devblog.domain.posts.entities import DashboardStats, Post, PostPage, SearchHit
from devblog.shared.errors.validation_types import ValidationErrorType

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 10
EXCERPT_MAX_LENGTH = 500


class PostInputDTO(BaseModel):
    title: str = ""
    content: str = ""
    excerpt: str | None = None
    published: bool = False

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        value = value.strip()
        if len(value) < TITLE_MIN_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.TITLE_TOO_SHORT,
                "Title must be at least 3 characters",
                {"min_length": TITLE_MIN_LENGTH},
            )
        if len(value) > TITLE_MAX_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.TITLE_TOO_LONG,
                "Title must be less than 200 characters",
                {"max_length": TITLE_MAX_LENGTH},
            )
        return value

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        value = value.strip()
        if len(value) < CONTENT_MIN_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.CONTENT_TOO_SHORT,
                "Content must be at least 10 characters",
                {"min_length": CONTENT_MIN_LENGTH},
            )
        return value

    @field_validator("excerpt")
    @classmethod
    def validate_excerpt(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if len(value) > EXCERPT_MAX_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.EXCERPT_TOO_LONG,
                "Excerpt must be less than 500 characters",
                {"max_length": EXCERPT_MAX_LENGTH},
            )
        return value

    def to_input(self) -> PostInput:
        return PostInput(
            title=self.title,
            content=self.content,
            excerpt=self.excerpt,
            published=self.published,
        )


class PaginationDTO(BaseModel):
    page: int = Field(0, ge=0, le=MAX_PAGE)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class SearchQueryDTO(BaseModel):
    q: str = Field("", max_length=200)


class AuthorDTO(BaseModel):
    name: str | None = None
    email: str


class PostSummaryDTO(BaseModel):
    id: str
    title: str
    slug: str
    excerpt: str | None = None
    published: bool
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: AuthorDTO | None = None

    @classmethod
    def from_domain(cls, post: Post) -> PostSummaryDTO:
        author = (
            AuthorDTO(name=post.author.name, email=post.author.email) if post.author else None
        )
        return cls(
            id=post.id,
            title=post.title,
            slug=post.slug,
            excerpt=post.excerpt,
            published=post.published,
            published_at=post.published_at,
            created_at=post.created_at,
            updated_at=post.updated_at,
            author=author,
        )


class PostDetailDTO(PostSummaryDTO):
    content: str
    reading_minutes: int
    description: str

    @classmethod
    def from_domain(cls, post: Post) -> PostDetailDTO:
        summary = PostSummaryDTO.from_domain(post)
        return cls(
            **summary.model_dump(),
            content=post.content,
            reading_minutes=post.reading_minutes(),
            description=post.description(),
        )


class PostPageDTO(BaseModel):
    posts: list[PostSummaryDTO]
    has_more: bool
    page: int
    page_size: int

    @classmethod
    def from_domain(cls, page: PostPage) -> PostPageDTO:
        return cls(
            posts=[PostSummaryDTO.from_domain(post) for post in page.posts],
            has_more=page.has_more,
            page=page.page,
            page_size=page.page_size,
        )


class SearchHitDTO(BaseModel):
    id: str
    title: str
    slug: str

    @classmethod
    def from_domain(cls, hit: SearchHit) -> SearchHitDTO:
        return cls(id=hit.id, title=hit.title, slug=hit.slug)


class DashboardStatsDTO(BaseModel):
    total: int
    published: int
    drafts: int
    recent: list[PostSummaryDTO]

    @classmethod
    def from_domain(cls, stats: DashboardStats) -> DashboardStatsDTO:
        return cls(
            total=stats.total,
            published=stats.published,
            drafts=stats.drafts,
            recent=[PostSummaryDTO.from_domain(post) for post in stats.recent],
        )
