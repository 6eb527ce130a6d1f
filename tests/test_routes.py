"""Tests for the HTTP routes in front of the controller."""

import pytest

from chatserver.app.config.settings import settings
from chatserver.app.models import Msg


def _login(client, username="alice"):
    response = client.post("/auth/login", json={"username": username})
    assert response.status_code == 200
    return response


class TestAuthRoutes:

    def test_root(self, client):
        assert client.get("/").status_code == 200

    def test_login_sets_cookie(self, client):
        response = _login(client)
        body = response.json()
        assert body["username"] == "alice"
        assert body["logged_in_until"] is not None
        assert client.cookies.get(settings.AUTH_COOKIE_NAME) == "alice"

    def test_login_unknown_user(self, client):
        response = client.post("/auth/login", json={"username": "nobody"})
        assert response.status_code == 401

    def test_login_invalid_username(self, client):
        response = client.post("/auth/login", json={"username": "bad name!"})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "validation_error"
        assert error["field"] == "username"

    def test_me_requires_login(self, client):
        assert client.get("/auth/me").status_code == 401
        _login(client, "bob")
        response = client.get("/auth/me")
        assert response.status_code == 200
        assert response.json()["username"] == "bob"

    def test_forged_cookie_for_user_who_never_logged_in(self, client):
        client.cookies.set(settings.AUTH_COOKIE_NAME, "bob")
        assert client.get("/auth/me").status_code == 401

    def test_malformed_cookie(self, client):
        client.cookies.set(settings.AUTH_COOKIE_NAME, "not-alnum")
        assert client.get("/chat/msg").status_code == 401


class TestChatRoutes:

    def test_requires_login(self, client):
        assert client.get("/chat/msg").status_code == 401
        assert client.post("/chat/msg", json={"msg": "hi"}).status_code == 401

    def test_message_lifecycle(self, client):
        _login(client)
        assert client.get("/chat/msg").json() == []

        response = client.post("/chat/msg", json={"msg": "hello"})
        assert response.status_code == 201
        created = response.json()
        assert created["msg"] == "hello"
        assert created["author"]["username"] == "alice"

        response = client.get(f"/chat/msg/{created['id']}")
        assert response.status_code == 200
        assert response.json()["msg"] == "hello"

        assert len(client.get("/chat/msg").json()) == 1

        assert client.delete(f"/chat/msg/{created['id']}").status_code == 204
        assert client.get(f"/chat/msg/{created['id']}").status_code == 404
        assert client.delete(f"/chat/msg/{created['id']}").status_code == 204

    def test_empty_message_rejected(self, client):
        _login(client)
        response = client.post("/chat/msg", json={"msg": ""})
        assert response.status_code == 400
        assert response.json()["error"]["field"] == "msg"

    @pytest.mark.parametrize("msg_id", [0, -1])
    def test_non_positive_id_rejected(self, client, msg_id):
        _login(client)
        assert client.get(f"/chat/msg/{msg_id}").status_code == 400
        assert client.delete(f"/chat/msg/{msg_id}").status_code == 400

    def test_huge_id_is_not_found(self, client):
        _login(client)
        assert client.get(f"/chat/msg/{2 ** 64}").status_code == 404
        assert client.delete(f"/chat/msg/{2 ** 64}").status_code == 204

    def test_database_failure_is_500(self, client, dao):
        _login(client)
        Msg.__table__.drop(dao.engine)
        response = client.get("/chat/msg")
        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "persistence_error"
        assert error["message"] == "Could not find all messages"
