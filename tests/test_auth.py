import time

import pytest
from authlib.integrations.base_client import OAuthError
from flask import redirect

import api.auth


class FakeProvider:
    """Stands in for the Authlib client so no request leaves the test."""

    def __init__(self, token=None, error=None):
        self.token = token
        self.error = error
        self.redirect_uri = None

    def authorize_redirect(self, redirect_uri, **kwargs):
        self.redirect_uri = redirect_uri
        return redirect("https://idp.example/authorize?client_id=test-client-id")

    def authorize_access_token(self, **kwargs):
        if self.error:
            raise self.error
        return self.token


@pytest.fixture
def use_provider(monkeypatch):
    def _use(fake):
        monkeypatch.setattr(api.auth, "provider", lambda: fake)
        return fake

    return _use


def test_home_redirects_anonymous_to_login(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/auth/login")


def test_home_renders_for_authenticated_session(client, login):
    login(name="Ada Reader")
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Ada Reader" in resp.data


def test_login_redirects_to_identity_provider(client, use_provider):
    fake = use_provider(FakeProvider())
    resp = client.get("/auth/login")
    assert resp.status_code == 302
    assert resp.headers["Location"].startswith("https://idp.example/authorize")
    assert fake.redirect_uri.endswith("/auth/callback")


def test_callback_starts_session(client, use_provider):
    use_provider(FakeProvider(token={"access_token": "t", "userinfo": {"sub": "abc", "name": "Grace", "email": "g@example.com"}}))

    resp = client.get("/auth/callback?code=xyz&state=s")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")

    me = client.get("/auth/me")
    assert me.status_code == 200
    data = me.get_json()["data"]
    assert data["subject"] == "abc"
    assert data["email"] == "g@example.com"

    assert client.get("/").status_code == 200


def test_callback_provider_error_is_401(client, use_provider):
    use_provider(FakeProvider(error=OAuthError(error="access_denied", description="User denied access")))
    resp = client.get("/auth/callback?error=access_denied")
    assert resp.status_code == 401
    body = resp.get_json()
    assert body["error"] == "UNAUTHORIZED"
    assert body["message"] == "User denied access"
    assert client.get("/auth/me").status_code == 401


def test_callback_without_subject_is_401(client, use_provider):
    use_provider(FakeProvider(token={"access_token": "t", "userinfo": {"email": "nosub@example.com"}}))
    resp = client.get("/auth/callback?code=xyz")
    assert resp.status_code == 401
    assert client.get("/").status_code == 302


def test_me_requires_session(client):
    resp = client.get("/auth/me")
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "UNAUTHORIZED"


def test_logout_returns_to_anonymous(client, login):
    login()
    assert client.get("/auth/me").status_code == 200

    resp = client.post("/auth/logout")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "message": "Logged out successfully"}

    assert client.get("/auth/me").status_code == 401
    assert client.get("/").status_code == 302


def test_expired_session_is_anonymous(client, app, login):
    lifetime = app.config["SESSION_LIFETIME_SECONDS"]
    login(authenticated_at=time.time() - lifetime - 1)

    assert client.get("/").status_code == 302
    assert client.get("/auth/me").status_code == 401


def test_malformed_session_is_anonymous(client):
    with client.session_transaction() as sess:
        sess["identity"] = {"who": "me"}
    assert client.get("/auth/me").status_code == 401


def test_catalog_api_is_not_gated(client):
    assert client.get("/books").status_code == 200
    assert client.get("/authors").status_code == 200


def test_logout_rejects_get(client, login):
    login()
    resp = client.get("/auth/logout")
    assert resp.status_code == 405
    assert client.get("/auth/me").status_code == 200
