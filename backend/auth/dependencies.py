from __future__ import annotations

from fastapi import HTTPException, Request


def require_user(request: Request) -> dict:
    """Raise 401 if no user is logged in."""
    user = request.session.get("user")
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def require_same_user(user_id: str, user: dict) -> None:
    """Raise 403 unless ``user_id`` belongs to the logged-in user."""
    if user.get("id") != user_id:
        raise HTTPException(status_code=403, detail="Access to another account is not allowed")
