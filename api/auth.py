"""
Authentication blueprint:
- GET  /auth/login     -> redirect to the identity provider (OpenID Connect)
- GET  /auth/callback  -> verify the provider's assertion and start a session
- POST /auth/logout
- GET  /auth/me

The implementation:
- Uses Authlib's Flask client for the authorization-code round trip and ID token checks
- Keeps the verified identity in Flask's signed session cookie
- Loads it into flask.g.identity before every request; handlers never read the session
"""
from __future__ import annotations

import logging

from authlib.integrations.base_client import OAuthError
from authlib.integrations.flask_client import OAuth
from flask import Blueprint, current_app, g, jsonify, redirect, session, url_for

from api.errors import AuthenticationFailed
from utils.security import identity_from_claims, load_identity, store_identity

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__, url_prefix="/auth")


def init_oauth(app):
    """Create the app's OAuth registry and register the configured provider."""
    oauth = OAuth(app)
    oauth.register(
        name="google",
        client_id=app.config.get("GOOGLE_CLIENT_ID"),
        client_secret=app.config.get("GOOGLE_CLIENT_SECRET"),
        server_metadata_url=app.config["GOOGLE_DISCOVERY_URL"],
        client_kwargs={"scope": "openid email profile"},
    )
    return oauth


def provider():
    """The identity provider client bound to the current app."""
    return current_app.extensions["authlib.integrations.flask_client"].create_client("google")


@bp.before_app_request
def load_current_identity():
    """Attach the session's verified identity (or None) to the request context."""
    g.identity = load_identity(session, current_app.config["SESSION_LIFETIME_SECONDS"])


@bp.get("/login")
def login():
    """
    Start the OAuth login flow
    ---
    tags:
      - Auth
    responses:
      302:
        description: Redirect to the identity provider
    """
    redirect_uri = url_for("auth.callback", _external=True)
    return provider().authorize_redirect(redirect_uri)


@bp.get("/callback")
def callback():
    """
    OAuth callback: exchanges the code and stores the identity in the session
    ---
    tags:
      - Auth
    responses:
      302:
        description: Authenticated, redirect to the home page
      401:
        description: The provider rejected or did not assert an identity
    """
    try:
        token = provider().authorize_access_token()
    except OAuthError as exc:
        logger.warning("OAuth callback rejected: %s", exc.error)
        raise AuthenticationFailed(exc.description or "Authentication with the identity provider failed")

    claims = token.get("userinfo") if token else None
    identity = identity_from_claims(claims)
    if identity is None:
        raise AuthenticationFailed("The identity provider did not assert a user identity")

    store_identity(session, identity)
    logger.info("User %s logged in", identity.subject)
    return redirect(url_for("home"))


@bp.post("/logout")
def logout():
    """
    End the session
    ---
    tags:
      - Auth
    responses:
      200:
        description: Logged out
    """
    identity = g.get("identity")
    session.clear()
    g.identity = None
    if identity is not None:
        logger.info("User %s logged out", identity.subject)
    return jsonify({"success": True, "message": "Logged out successfully"}), 200


@bp.get("/me")
def me():
    """
    Current session identity
    ---
    tags:
      - Auth
    responses:
      200:
        description: The authenticated user
      401:
        description: Not logged in
    """
    identity = g.get("identity")
    if identity is None:
        raise AuthenticationFailed()
    return jsonify({"success": True, "data": identity.to_dict()}), 200
