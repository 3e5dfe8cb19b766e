"""Role checks for admin-only operations."""

from __future__ import annotations

from collections.abc import Iterable

from fastapi import HTTPException, status

from bistro.models.user import User, UserRole


def require_roles(user: User, allowed: Iterable[UserRole]) -> None:
    """Raise HTTP 403 unless the user holds one of ``allowed``."""
    if user.role not in set(allowed):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )


__all__ = ["require_roles"]
