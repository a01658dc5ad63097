from datetime import UTC, datetime, timedelta

import pytest

from devblog.domain import InvariantViolation
from devblog.domain.users.entities import SessionPayload, User
from devblog.tests.fakes import make_post

NOW = datetime(2025, 1, 1, tzinfo=UTC)


def test_new_post_is_a_draft() -> None:
    post = make_post()
    assert post.published is False
    assert post.published_at is None


def test_toggle_publish_sets_and_clears_publish_time() -> None:
    post = make_post()

    assert post.toggle_publish(NOW) is True
    assert post.published_at == NOW

    assert post.toggle_publish(NOW + timedelta(hours=1)) is False
    assert post.published_at is None


def test_publish_is_idempotent_and_keeps_first_publish_time() -> None:
    post = make_post()
    post.publish(NOW)
    post.publish(NOW + timedelta(days=3))
    assert post.published_at == NOW


def test_publish_state_and_time_must_agree() -> None:
    with pytest.raises(InvariantViolation):
        make_post(published=True, published_at=None)
    with pytest.raises(InvariantViolation):
        make_post(published=False, published_at=NOW)


def test_reading_time_and_description() -> None:
    long_post = make_post(content=" ".join(["word"] * 401))
    assert long_post.reading_minutes() == 3
    assert make_post(content="short").reading_minutes() == 1

    assert long_post.description() == long_post.content[:160]
    assert make_post(excerpt="Teaser").description() == "Teaser"


def test_ownership() -> None:
    post = make_post(author_id="u1")
    assert post.is_owned_by("u1")
    assert not post.is_owned_by("u2")


def test_session_payload_from_user() -> None:
    user = User(
        id="u9",
        email="ann@example.com",
        password_hash="x",
        name=None,
        created_at=NOW,
        updated_at=NOW,
    )
    payload = SessionPayload.for_user(user)
    assert payload == SessionPayload(user_id="u9", email="ann@example.com", name=None)
