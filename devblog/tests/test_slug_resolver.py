from __future__ import annotations

import pytest

from devblog.application.services.slug_resolver import SlugResolver
from devblog.domain.posts.entities import Post
from devblog.shared.errors import PersistenceError
from devblog.tests.fakes import InMemoryPostRepository, make_post


def test_base_slug_falls_back_for_punctuation_only_titles() -> None:
    assert SlugResolver.base_slug("Hello World") == "hello-world"
    assert SlugResolver.base_slug("?!") == "post"


def test_ensure_unique_returns_free_slug(posts: InMemoryPostRepository) -> None:
    resolver = SlugResolver(posts)
    assert resolver.ensure_unique("hello-world") == "hello-world"


def test_ensure_unique_appends_sequential_suffix(posts: InMemoryPostRepository) -> None:
    posts.add(make_post(slug="hello-world"))
    posts.add(make_post(slug="hello-world-1"))
    resolver = SlugResolver(posts)

    assert resolver.ensure_unique("hello-world") == "hello-world-2"


def test_ensure_unique_treats_own_slug_as_free(posts: InMemoryPostRepository) -> None:
    existing = posts.add(make_post(slug="hello-world"))
    resolver = SlugResolver(posts)

    assert resolver.ensure_unique("hello-world", exclude_id=existing.id) == "hello-world"
    assert resolver.ensure_unique("hello-world", exclude_id="someone-else") == "hello-world-1"


class RacingPostRepository(InMemoryPostRepository):
    """Lets a competing writer claim the slug between probe and insert."""

    def __init__(self, races: int) -> None:
        super().__init__()
        self._races = races

    def add(self, post: Post) -> Post:
        if self._races > 0:
            self._races -= 1
            super().add(make_post(slug=post.slug, title="Competitor"))
        return super().add(post)


def test_write_retries_after_store_conflict() -> None:
    posts = RacingPostRepository(races=1)
    resolver = SlugResolver(posts)

    created = resolver.write_with_unique_slug(
        "hello-world", lambda slug: posts.add(make_post(slug=slug))
    )

    assert created.slug == "hello-world-1"
    assert sorted(p.slug for p in posts.posts.values()) == ["hello-world", "hello-world-1"]


def test_write_gives_up_after_bounded_attempts() -> None:
    posts = RacingPostRepository(races=10)
    resolver = SlugResolver(posts, max_attempts=3)

    with pytest.raises(PersistenceError) as exc_info:
        resolver.write_with_unique_slug("hello-world", lambda slug: posts.add(make_post(slug=slug)))

    assert exc_info.value.code == "slug_conflict"
    assert exc_info.value.message == "An error occurred. Please try again."
