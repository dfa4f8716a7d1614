"""
Session identity helpers:
- Identity: the verified user attached to the current request (flask.g.identity)
- identity_from_claims(): build an Identity from OpenID Connect userinfo claims
- session payload round trip with an authentication timestamp for expiry
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

SESSION_KEY = "identity"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    subject: str
    name: Optional[str] = None
    email: Optional[str] = None
    picture: Optional[str] = None
    authenticated_at: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def identity_from_claims(claims: Dict[str, Any] | None) -> Optional[Identity]:
    """Return an Identity for verified claims, or None when `sub` is missing."""
    if not claims or not claims.get("sub"):
        return None
    return Identity(
        subject=str(claims["sub"]),
        name=claims.get("name"),
        email=claims.get("email"),
        picture=claims.get("picture"),
        authenticated_at=time.time(),
    )


def load_identity(session, lifetime_seconds: int) -> Optional[Identity]:
    """
    Read the identity stored in the session.
    Returns None (and clears the session) if it is malformed or older than lifetime_seconds.
    """
    raw = session.get(SESSION_KEY)
    if not raw:
        return None
    try:
        identity = Identity(**raw)
    except TypeError:
        session.clear()
        return None
    if time.time() - identity.authenticated_at > lifetime_seconds:
        logger.info("Session for %s expired", identity.subject)
        session.clear()
        return None
    return identity


def store_identity(session, identity: Identity) -> None:
    session.clear()
    session[SESSION_KEY] = identity.to_dict()
    session.permanent = True
