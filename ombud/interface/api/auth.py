"""Request authentication helpers for API routes."""

from fastapi import HTTPException, status

from ombud.domain.service import JWTService
from ombud.domain.value import Role


def require_user_id(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """Return the authenticated user's ID or raise 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the user is trying to do, for the error message
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


def require_admin(jwt_service: JWTService, auth_token: str | None) -> str:
    """Return the authenticated admin's ID, or raise 401/403."""
    payload = jwt_service.get_payload_from_token(auth_token)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    if payload.role != Role.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator access required",
        )
    return payload.user_id
