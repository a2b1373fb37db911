"""Identity decorators for JSON routes.

Login itself happens elsewhere; these only read the identity it leaves in the
Flask session (``user_id`` and ``role``).
"""
from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError


def current_user_id() -> int:
    try:
        return int(session["user_id"])
    except (KeyError, TypeError, ValueError):
        raise AuthenticationError("Invalid session identity") from None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"msg": "Authentication required"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"msg": "Authentication required"}), 401
        if session.get("role") != Role.ADMIN.value:
            return jsonify({"msg": "Admins only"}), 403
        return view(*args, **kwargs)

    return wrapper
