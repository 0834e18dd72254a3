"""Credential store lookups."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_api.auth.password import hash_password
from portfolio_api.models.user import User


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    return await db.get(User, user_id)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Find a user by email, case-insensitively."""
    result = await db.execute(select(User).where(func.lower(User.email) == email.lower()))
    return result.scalar_one_or_none()


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def create_user(
    db: AsyncSession,
    username: str,
    email: str,
    password: str,
    is_admin: bool = False,
) -> User:
    """
    Create a user with a hashed password.

    Raises sqlalchemy.exc.IntegrityError on flush if the username or email is
    already taken.
    """
    user = User(
        username=username,
        email=email.lower(),
        password_hash=hash_password(password),
        is_admin=is_admin,
    )
    db.add(user)
    await db.flush()
    return user
