"""Data access for users and portfolio content."""

from portfolio_api.repository.content import ContentRepository, get_repository
from portfolio_api.repository.users import (
    create_user,
    get_user,
    get_user_by_email,
    get_user_by_username,
)

__all__ = [
    "ContentRepository",
    "get_repository",
    "create_user",
    "get_user",
    "get_user_by_email",
    "get_user_by_username",
]
