# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Idempotent demo data: one editor and three posts."""

from __future__ import annotations

from dataclasses import dataclass

from devblog.domain.users.repositories import PasswordHasher
from devblog.infrastructure.db.models import Post, User
from devblog.infrastructure.db.session import session_scope
from devblog.shared.logging import logger
from devblog.shared.utils.clock import Clock, utc_now

DEMO_EMAIL = "admin@example.com"
DEMO_NAME = "Admin User"
DEMO_PASSWORD = "DevBlog123"


@dataclass(frozen=True, slots=True)
class DemoPost:
    slug: str
    title: str
    content: str
    excerpt: str
    published: bool


DEMO_POSTS: tuple[DemoPost, ...] = (
    DemoPost(
        slug="welcome-to-devblog",
        title="Welcome to DevBlog CMS",
        content=(
            "# Welcome to DevBlog CMS\n\n"
            "This is your first blog post! This CMS is built with Flask, SQLAlchemy and pydantic.\n\n"
            "## Features\n\n"
            "- Signed session cookies\n"
            "- Unique, readable slugs\n"
            "- One-click publishing\n"
            "- Full-text search over published posts\n\n"
            "Start editing this post or create new ones from the admin dashboard!"
        ),
        excerpt="Your first blog post in DevBlog CMS",
        published=True,
    ),
    DemoPost(
        slug="getting-started-with-nextjs",
        title="Getting Started with Next.js",
        content=(
            "# Getting Started with Next.js\n\n"
            "Next.js is a powerful React framework that makes building web applications a breeze.\n\n"
            "## Why Next.js?\n\n"
            "- Server-side rendering out of the box\n"
            "- File-based routing\n"
            "- API routes\n"
            "- Excellent performance\n"
        ),
        excerpt="Learn the basics of Next.js framework",
        published=True,
    ),
    DemoPost(
        slug="draft-post-example",
        title="This is a Draft Post",
        content="This post is not published yet. Only visible in the admin dashboard.",
        excerpt="An example of an unpublished draft post",
        published=False,
    ),
)


@dataclass(frozen=True, slots=True)
class SeedResult:
    user_id: str
    created_user: bool
    created_posts: int


def seed_demo_data(
    password_hasher: PasswordHasher,
    *,
    password: str = DEMO_PASSWORD,
    clock: Clock = utc_now,
) -> SeedResult:
    now = clock()
    with session_scope() as session:
        user = session.query(User).filter(User.email == DEMO_EMAIL).first()
        created_user = user is None
        if user is None:
            user = User(
                email=DEMO_EMAIL,
                name=DEMO_NAME,
                password_hash=password_hasher.hash(password),
            )
            session.add(user)
            session.flush()

        existing = {
            slug
            for (slug,) in session.query(Post.slug).filter(
                Post.slug.in_([demo.slug for demo in DEMO_POSTS])
            )
        }
        created_posts = 0
        for demo in DEMO_POSTS:
            if demo.slug in existing:
                continue
            session.add(
                Post(
                    title=demo.title,
                    slug=demo.slug,
                    content=demo.content,
                    excerpt=demo.excerpt,
                    published=demo.published,
                    published_at=now if demo.published else None,
                    author_id=user.id,
                )
            )
            created_posts += 1
        user_id = user.id

    logger.info(
        f"seed: ok user_id={user_id} created_user={created_user} created_posts={created_posts}"
    )
    return SeedResult(user_id=user_id, created_user=created_user, created_posts=created_posts)


__all__ = ["DEMO_EMAIL", "DEMO_PASSWORD", "DEMO_POSTS", "SeedResult", "seed_demo_data"]
