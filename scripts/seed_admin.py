#!/usr/bin/env python3
"""
Script to create the farm administrator account.

This performs the same bootstrap as POST /api/v1/seed but from the command line,
so a fresh database can be prepared before the API is exposed.

Usage:
  python scripts/seed_admin.py [--email admin@goatfarm.com] [--password secret] [--name "Admin"]

Values not given on the command line fall back to SEED_ADMIN_* settings.
"""

import asyncio
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import AlreadyExists, ValidationError
from src.application.use_cases.auth import seed_admin
from src.config.settings import get_settings
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_admin(email: str, password: str, name: str | None) -> int:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            result = await seed_admin.execute(
                uow=uow,
                payload=seed_admin.SeedAdminInput(email=email, password=password, name=name),
                password_hasher=PasswordHasher(),
            )
    except AlreadyExists:
        print(f"Admin user {email} already exists, nothing to do")
        return 1
    except ValidationError as exc:
        print(f"Error: {exc.message}")
        return 1
    finally:
        await engine.dispose()

    print("Admin user created")
    print(f"   User ID: {result.user_id}")
    print(f"   Email: {result.email}")
    print(f"   Role: {result.role.value}")
    return 0


if __name__ == "__main__":
    import argparse

    settings = get_settings()
    parser = argparse.ArgumentParser(description="Create the farm administrator account")
    parser.add_argument("--email", default=settings.seed_admin_email, help="Admin email")
    parser.add_argument(
        "--password",
        default=settings.seed_admin_password.get_secret_value(),
        help="Admin password",
    )
    parser.add_argument("--name", default=settings.seed_admin_name, help="Display name")

    args = parser.parse_args()
    sys.exit(asyncio.run(create_admin(args.email, args.password, args.name)))
