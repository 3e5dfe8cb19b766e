"""Create a local admin account for development."""
from __future__ import annotations

import asyncio

from bistro.db.session import get_sessionmaker
from bistro.models.user import UserRole
from bistro.schemas.user import UserCreate
from bistro.services import user_service

EMAIL = "admin@example.com"
PASSWORD = "admin1234"


async def main() -> None:
    async with get_sessionmaker()() as session:
        if await user_service.get_user_by_email(session, email=EMAIL) is not None:
            print(f"User {EMAIL} already exists")
            return
        await user_service.create_user(
            session,
            UserCreate(
                email=EMAIL,
                password=PASSWORD,
                display_name="Dev Admin",
                role=UserRole.ADMIN,
            ),
        )
    print(f"Created admin {EMAIL} / {PASSWORD}")


if __name__ == "__main__":
    asyncio.run(main())
