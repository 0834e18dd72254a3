"""Create an admin account for the dashboard."""

from __future__ import annotations

import argparse
import asyncio
import getpass
import sys

from sqlalchemy.exc import IntegrityError

from portfolio_api.database import AsyncSessionLocal, init_db
from portfolio_api.repository.users import create_user


async def _create(username: str, email: str, password: str) -> int:
    await init_db()
    async with AsyncSessionLocal() as session:
        try:
            user = await create_user(session, username, email, password, is_admin=True)
            await session.commit()
        except IntegrityError:
            await session.rollback()
            print(f"A user with username '{username}' or email '{email}' already exists.", file=sys.stderr)
            return 1
    print(f"Admin user created: {user.email} (id={user.id})")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Create an admin user")
    parser.add_argument("--email", required=True, help="Login email")
    parser.add_argument("--username", default="admin", help="Username (default: admin)")
    parser.add_argument(
        "--password",
        default=None,
        help="Password (prompted for if omitted)",
    )
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    if not password:
        print("Password cannot be empty.", file=sys.stderr)
        return 1

    return asyncio.run(_create(args.username, args.email, password))


if __name__ == "__main__":
    raise SystemExit(main())
