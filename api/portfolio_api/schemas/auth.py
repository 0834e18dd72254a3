"""Authentication schemas for request/response validation."""

from pydantic import Field

from portfolio_api.schemas.base import APIModel


class LoginRequest(APIModel):
    """Dashboard login request schema."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserInfo(APIModel):
    """Public view of a user account (never includes the password hash)."""

    id: int
    username: str
    email: str
    is_admin: bool


class LoginResponse(APIModel):
    """Bearer token plus the user it was issued for."""

    token: str
    user: UserInfo


class IdentityResponse(APIModel):
    """The identity attached to an authenticated request."""

    id: int
    email: str
    is_admin: bool
