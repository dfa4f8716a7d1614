from __future__ import annotations
from functools import wraps
from flask import g, redirect, url_for


def login_required(login_endpoint: str = "auth.login"):
    """
    Gate a view on the request-scoped identity loaded by the auth middleware.
    Anonymous requests are redirected to the login endpoint.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if getattr(g, "identity", None) is None:
                return redirect(url_for(login_endpoint))
            return fn(*args, **kwargs)

        return wrapper

    return decorator
