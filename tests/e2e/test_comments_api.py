"""End-to-end tests for the comment API surface.

In-memory repositories are request scoped, so each HTTP call starts from an
empty store; these tests cover routing, authentication and error mapping.
"""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from blog.config import Settings
from blog.domain.value import UserRole
from blog.interface.api.app import create_app
from blog.util.jwt import create_token
from tests.di import build_test_container


def _token(role: UserRole = UserRole.USER) -> str:
    return create_token(str(uuid4()), "tester", role.value, Settings().auth)


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(container=build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def member_client(client):
    client.cookies.set("auth_token", _token())
    return client


@pytest.fixture
def admin_client(client):
    client.cookies.set("auth_token", _token(UserRole.ADMIN))
    return client


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCommentEndpoints:
    """Tests for /posts/{post_id}/comments."""

    def test_thread_of_missing_post_is_404(self, client):
        response = client.get(f"/posts/{uuid4()}/comments")

        assert response.status_code == 404
        assert response.json() == {"detail": "Post not found"}

    def test_malformed_post_id_is_422(self, client):
        response = client.get("/posts/not-a-uuid/comments")

        assert response.status_code == 422

    def test_create_requires_authentication(self, client):
        response = client.post(f"/posts/{uuid4()}/comments", json={"content": "hi"})

        assert response.status_code == 401
        assert response.json() == {"detail": "Authentication required"}

    def test_invalid_token_is_treated_as_anonymous(self, client):
        client.cookies.set("auth_token", "garbage")

        response = client.post(f"/posts/{uuid4()}/comments", json={"content": "hi"})

        assert response.status_code == 401

    def test_create_on_missing_post_is_404(self, member_client):
        response = member_client.post(
            f"/posts/{uuid4()}/comments", json={"content": "hi"}
        )

        assert response.status_code == 404

    def test_recent_comments_empty(self, client):
        response = client.get("/comments/recent", params={"limit": 5})

        assert response.status_code == 200
        assert response.json() == {"items": [], "total": 0, "limit": 5, "offset": 0}

    def test_like_requires_authentication(self, client):
        response = client.post(f"/posts/{uuid4()}/comments/{uuid4()}/like")

        assert response.status_code == 401


class TestModerationAndReports:
    def test_unknown_queue_status_is_400(self, member_client):
        response = member_client.get(
            f"/posts/{uuid4()}/moderation", params={"status": "deleted"}
        )

        assert response.status_code == 400
        assert "Invalid status" in response.json()["detail"]

    def test_report_list_requires_admin(self, member_client):
        response = member_client.get("/reports/comments")

        assert response.status_code == 403
        assert response.json() == {"detail": "Admin access required"}

    def test_admin_sees_empty_report_list(self, admin_client):
        response = admin_client.get("/reports/comments")

        assert response.status_code == 200
        assert response.json()["total"] == 0

    def test_updating_missing_report_is_404(self, admin_client):
        response = admin_client.patch(
            f"/reports/comments/{uuid4()}", json={"status": "rejected"}
        )

        assert response.status_code == 404


class TestNotificationEndpoints:
    def test_requires_authentication(self, client):
        assert client.get("/notifications").status_code == 401

    def test_empty_inbox(self, member_client):
        response = member_client.get("/notifications")

        assert response.status_code == 200
        body = response.json()
        assert body["items"] == []
        assert body["unread_count"] == 0

    def test_unread_count_route_is_not_shadowed(self, member_client):
        response = member_client.get("/notifications/unread-count")

        assert response.status_code == 200
        assert response.json() == {"unread_count": 0}

    def test_missing_notification_is_404(self, member_client):
        response = member_client.get(f"/notifications/{uuid4()}")

        assert response.status_code == 404


class TestUserEndpoints:
    def test_top_commenters_of_unknown_user_is_404(self, client):
        response = client.get(f"/users/{uuid4()}/top-commenters")

        assert response.status_code == 404
        assert response.json() == {"detail": "User not found"}
