from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from devblog.app import create_app
from devblog.application.services.slug_resolver import SlugResolver
from devblog.application.use_cases.posts import CreatePostUseCase, PostInput
from devblog.domain.users.entities import SessionPayload
from devblog.infrastructure.container import container
from devblog.infrastructure.db import ENGINE, Base, SessionLocal
from devblog.infrastructure.db.models import Post, User
from devblog.infrastructure.repositories.sqlalchemy_post_repository import SqlAlchemyPostRepository
from devblog.infrastructure.seed import DEMO_EMAIL, DEMO_PASSWORD, seed_demo_data

BODY = "Integration body that is long enough to pass validation."


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def app() -> Flask:
    return create_app()


@pytest.fixture()
def editor(app: Flask) -> FlaskClient:
    seed_demo_data(container.password_hasher)
    client = app.test_client()
    response = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
    assert response.status_code == 200
    return client


def _login_second_editor(app: Flask) -> FlaskClient:
    container.register_user_use_case.execute("bob@example.com", "Password123", "Bob")
    client = app.test_client()
    response = client.post(
        "/api/auth/login", json={"email": "bob@example.com", "password": "Password123"}
    )
    assert response.status_code == 200
    return client


def test_seed_is_idempotent() -> None:
    first = seed_demo_data(container.password_hasher)
    second = seed_demo_data(container.password_hasher)

    assert (first.created_user, first.created_posts) == (True, 3)
    assert (second.created_user, second.created_posts) == (False, 0)
    session = SessionLocal()
    try:
        assert session.query(User).count() == 1
        assert session.query(Post).count() == 3
        assert session.query(Post).filter(Post.published.is_(True)).count() == 2
    finally:
        session.close()


def test_login_me_logout_flow(editor: FlaskClient) -> None:
    cookie = editor.get_cookie("session")
    assert cookie is not None and cookie.value

    me = editor.get("/api/auth/me").get_json()
    assert me["authenticated"] is True
    assert me["user"]["email"] == DEMO_EMAIL
    assert me["user"]["name"] == "Admin User"

    assert editor.post("/api/auth/logout").status_code == 200
    assert editor.get("/api/auth/me").get_json() == {"authenticated": False, "user": None}
    assert editor.get("/api/admin/dashboard").status_code == 401


def test_wrong_password_is_rejected_generically(app: Flask) -> None:
    seed_demo_data(container.password_hasher)
    client = app.test_client()

    wrong = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": "Nope12345"})
    unknown = client.post(
        "/api/auth/login", json={"email": "ghost@example.com", "password": DEMO_PASSWORD}
    )

    for response in (wrong, unknown):
        assert response.status_code == 401
        assert response.get_json()["message"] == "Invalid email or password"
    assert client.get_cookie("session") is None


def test_admin_requires_session(app: Flask) -> None:
    client = app.test_client()

    response = client.get("/api/admin/posts")
    assert response.status_code == 401
    assert response.get_json()["context"] == {"login_url": "/login"}

    client.set_cookie("session", "forged.token.value")
    assert client.post("/api/admin/posts", json={"title": "Hello World", "content": BODY}).status_code == 401


def test_post_lifecycle(editor: FlaskClient, app: Flask) -> None:
    created = editor.post("/api/admin/posts", json={"title": "Hello World", "content": BODY})
    assert created.status_code == 201
    post = created.get_json()
    assert post["slug"] == "hello-world"
    assert post["published"] is False
    assert post["published_at"] is None

    public = app.test_client()
    assert public.get("/api/posts/hello-world").status_code == 404

    toggled = editor.post(f"/api/admin/posts/{post['id']}/toggle-publish")
    assert toggled.status_code == 200
    assert toggled.get_json()["published"] is True

    read = public.get("/api/posts/hello-world")
    assert read.status_code == 200
    detail = read.get_json()
    assert detail["reading_minutes"] == 1
    assert detail["description"] == BODY
    assert detail["author"] == {"name": "Admin User", "email": DEMO_EMAIL}

    duplicate = editor.post("/api/admin/posts", json={"title": "Hello, World!", "content": BODY})
    assert duplicate.get_json()["slug"] == "hello-world-1"

    updated = editor.put(
        f"/api/admin/posts/{post['id']}",
        json={"title": "Hello World", "content": BODY, "excerpt": "Teaser", "published": True},
    )
    assert updated.status_code == 200
    assert updated.get_json()["slug"] == "hello-world"
    assert updated.get_json()["published_at"] == toggled.get_json()["published_at"]

    assert editor.delete(f"/api/admin/posts/{post['id']}").status_code == 200
    assert editor.get(f"/api/admin/posts/{post['id']}").status_code == 404


def test_create_with_form_body(editor: FlaskClient) -> None:
    response = editor.post(
        "/api/admin/posts",
        data={"title": "Form Post", "content": BODY, "published": "on"},
    )

    assert response.status_code == 201
    assert response.get_json()["published"] is True


def test_create_validation_error(editor: FlaskClient) -> None:
    response = editor.post("/api/admin/posts", json={"title": "Hi", "content": BODY})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["message"] == "Title must be at least 3 characters"
    assert payload["context"]["fields"] == ["title"]


def test_other_editor_cannot_touch_post(editor: FlaskClient, app: Flask) -> None:
    post = editor.post("/api/admin/posts", json={"title": "Ann only", "content": BODY}).get_json()
    bob = _login_second_editor(app)

    edit = bob.put(f"/api/admin/posts/{post['id']}", json={"title": "Bob was here", "content": BODY})
    assert edit.status_code == 403
    assert edit.get_json()["message"] == "You do not have permission to edit this post"

    delete = bob.delete(f"/api/admin/posts/{post['id']}")
    assert delete.status_code == 403
    assert delete.get_json()["message"] == "You do not have permission to delete this post"

    toggle = bob.post(f"/api/admin/posts/{post['id']}/toggle-publish")
    assert toggle.status_code == 403
    assert toggle.get_json()["message"] == "You do not have permission to modify this post"

    missing = bob.put("/api/admin/posts/does-not-exist", json={"title": "Whatever", "content": BODY})
    assert missing.status_code == 404
    assert missing.get_json()["message"] == "Post not found"


def test_public_listing_search_and_dashboard(editor: FlaskClient, app: Flask) -> None:
    public = app.test_client()

    listing = public.get("/api/posts?page=0&page_size=1").get_json()
    assert len(listing["posts"]) == 1
    assert listing["has_more"] is True
    second_page = public.get("/api/posts?page=1&page_size=1").get_json()
    assert second_page["has_more"] is False
    assert {listing["posts"][0]["slug"], second_page["posts"][0]["slug"]} == {
        "welcome-to-devblog",
        "getting-started-with-nextjs",
    }

    assert public.get("/api/posts?page_size=0").status_code == 422

    hits = public.get("/api/search?q=NEXT.JS").get_json()["results"]
    assert [hit["slug"] for hit in hits] == ["getting-started-with-nextjs"]
    assert public.get("/api/search?q=draft").get_json()["results"] == []
    assert public.get("/api/search?q=n").get_json()["results"] == []

    stats = editor.get("/api/admin/dashboard").get_json()
    assert (stats["total"], stats["published"], stats["drafts"]) == (3, 2, 1)
    assert len(stats["recent"]) == 3

    everything = editor.get("/api/admin/posts").get_json()["posts"]
    assert [post["published"] for post in everything] == [True, True, False]


def test_health_and_security_headers(app: Flask) -> None:
    response = app.test_client().get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_out_of_range_page_is_rejected(app: Flask) -> None:
    public = app.test_client()

    response = public.get("/api/posts?page=99999999999999999999")

    assert response.status_code == 422
    assert response.get_json()["error"] == "validation_error"
    assert public.get("/api/posts?page=10000").status_code == 200


class StaleReadPostRepository(SqlAlchemyPostRepository):
    """Reports a slug as free for the first few lookups, like a lagging reader."""

    def __init__(self, stale_reads: int) -> None:
        self._stale_reads = stale_reads

    def slug_holder(self, slug: str) -> str | None:
        if self._stale_reads > 0:
            self._stale_reads -= 1
            return None
        return super().slug_holder(slug)


def test_unique_index_conflict_is_retried_with_next_suffix() -> None:
    seeded = seed_demo_data(container.password_hasher)
    posts = StaleReadPostRepository(stale_reads=1)
    create = CreatePostUseCase(posts=posts, slugs=SlugResolver(posts))
    author = SessionPayload(user_id=seeded.user_id, email=DEMO_EMAIL, name=None)
    data = PostInput(title="Welcome to DevBlog", content=BODY, excerpt=None, published=False)

    first = create.execute(data, author)
    second = create.execute(data, author)

    assert first.slug == "welcome-to-devblog-1"
    assert second.slug == "welcome-to-devblog-2"
    session = SessionLocal()
    try:
        assert session.query(Post).filter(Post.slug.like("welcome-to-devblog%")).count() == 3
    finally:
        session.close()
