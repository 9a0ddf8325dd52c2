"""
Seed Admin User

Creates the first admin account for the submission review endpoints.
Credentials come from the environment so nothing secret lives in the repo.

Usage:
    ADMIN_SEED_EMAIL=admin@example.org ADMIN_SEED_PASSWORD=... \
        python scripts/seed_admin.py
"""

import asyncio
import os
import sys

from foundation_api.core.database import async_session_maker, close_db
from foundation_api.core.security import hash_password
from foundation_api.modules.users.models import UserRole
from foundation_api.modules.users.repository import UserRepository


async def seed_admin() -> int:
    """Create the admin user if it doesn't exist."""
    email = os.getenv("ADMIN_SEED_EMAIL")
    password = os.getenv("ADMIN_SEED_PASSWORD")
    name = os.getenv("ADMIN_SEED_NAME", "Foundation Admin")

    if not email or not password:
        print("ADMIN_SEED_EMAIL and ADMIN_SEED_PASSWORD must be set")
        return 1

    async with async_session_maker() as db:
        existing_user = await UserRepository.get_by_email(db, email)
        if existing_user:
            print(f"Admin already exists: {existing_user.email}")
            print(f"  ID: {existing_user.id}")
            print(f"  Role: {existing_user.role}")
            return 0

        admin_user = await UserRepository.create(
            db,
            email=email,
            password_hash=hash_password(password),
            name=name,
            role=UserRole.SUPER_ADMIN,
        )
        await db.commit()

        print("Admin created successfully!")
        print(f"  Email: {admin_user.email}")
        print(f"  Name: {admin_user.name}")
        print(f"  ID: {admin_user.id}")

    await close_db()
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(seed_admin()))
