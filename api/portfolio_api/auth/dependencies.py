"""Authentication dependencies for FastAPI endpoints."""

import logging

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.auth.jwt import AuthIdentity, InvalidTokenError, TokenService, get_token_service
from portfolio_api.database import get_db
from portfolio_api.errors import api_error
from portfolio_api.repository.users import get_user

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


async def get_current_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> AuthIdentity:
    """
    Authenticate a request from its ``Authorization: Bearer`` header.

    The identity is reloaded from the users table so that role changes and
    deletions take effect immediately, then attached to ``request.state``.

    Raises:
        HTTPException: 401 if the header is missing or the user no longer
            exists, 403 if the token fails verification
    """
    if credentials is None or not credentials.credentials:
        raise api_error(
            status.HTTP_401_UNAUTHORIZED,
            "MISSING_TOKEN",
            "Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        claims = tokens.verify(credentials.credentials)
    except InvalidTokenError:
        raise api_error(status.HTTP_403_FORBIDDEN, "INVALID_TOKEN", "Invalid token")

    user = await get_user(db, claims.id)
    if user is None:
        logger.info("Token presented for missing user id=%s", claims.id)
        raise api_error(status.HTTP_401_UNAUTHORIZED, "INVALID_TOKEN", "Invalid token")

    identity = AuthIdentity(id=user.id, email=user.email, is_admin=bool(user.is_admin))
    request.state.identity = identity
    return identity


async def require_admin(
    identity: AuthIdentity = Depends(get_current_identity),
) -> AuthIdentity:
    """
    Require the authenticated user to be an admin.

    Raises:
        HTTPException: 403 if the user is not an admin
    """
    if not identity.is_admin:
        raise api_error(status.HTTP_403_FORBIDDEN, "ADMIN_REQUIRED", "Admin access required")
    return identity
