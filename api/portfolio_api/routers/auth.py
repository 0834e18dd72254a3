"""Authentication router: dashboard login and token introspection."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.auth.dependencies import get_current_identity
from portfolio_api.auth.jwt import AuthIdentity, TokenService, get_token_service
from portfolio_api.auth.password import verify_password
from portfolio_api.database import get_db
from portfolio_api.errors import api_error
from portfolio_api.repository.users import get_user_by_email
from portfolio_api.schemas.auth import IdentityResponse, LoginRequest, LoginResponse, UserInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
)
async def login(
    data: LoginRequest,
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> LoginResponse:
    """
    Authenticate with email and password.

    Returns a bearer token valid for 24 hours and the user's public info.
    Unknown emails and wrong passwords get the same 401 response.
    """
    user = await get_user_by_email(db, data.email)

    if not user or not verify_password(data.password, user.password_hash):
        logger.info("Failed login for %s", data.email)
        raise api_error(
            status.HTTP_401_UNAUTHORIZED, "INVALID_CREDENTIALS", "Invalid credentials"
        )

    identity = AuthIdentity(id=user.id, email=user.email, is_admin=bool(user.is_admin))
    token = tokens.issue(identity)

    return LoginResponse(
        token=token,
        user=UserInfo(
            id=user.id,
            username=user.username,
            email=user.email,
            is_admin=bool(user.is_admin),
        ),
    )


@router.get(
    "/me",
    response_model=IdentityResponse,
    status_code=status.HTTP_200_OK,
)
async def me(identity: AuthIdentity = Depends(get_current_identity)) -> IdentityResponse:
    """Return the identity behind the presented bearer token."""
    return IdentityResponse(id=identity.id, email=identity.email, is_admin=identity.is_admin)
