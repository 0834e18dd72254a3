"""Authentication utilities for the Portfolio API."""

from portfolio_api.auth.jwt import AuthIdentity, InvalidTokenError, TokenService, get_token_service
from portfolio_api.auth.password import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "AuthIdentity",
    "InvalidTokenError",
    "TokenService",
    "get_token_service",
]
