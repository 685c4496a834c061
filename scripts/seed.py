"""Database seeder for local development of the User Records API."""
import argparse
import asyncio
import random
import time

from app.database import engine, async_session, Base
from app.models import User
from app.repositories.user_repository import SqlAlchemyUserRepository
from app.services.user_service import UserService

FIRST_NAMES = ["Alice", "Bob", "Charlie", "Dana", "Eve", "Frank", "Grace", "Heidi",
               "Ivan", "Judy", "Mallory", "Niaj", "Olivia", "Peggy", "Rupert", "Sybil"]


async def seed(count: int = 10, keep: bool = False):
    print(f"Seeding: {count} users")
    start = time.perf_counter()

    async with engine.begin() as conn:
        if not keep:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        service = UserService(SqlAlchemyUserRepository(session))
        for i in range(count):
            name = f"{random.choice(FIRST_NAMES)} {i:04d}"
            await service.create_user(User(name=name, email=f"user_{i:04d}@example.com"))
        await session.commit()

        total = len(await service.get_all_users())

    await engine.dispose()

    elapsed = time.perf_counter() - start
    print(f"\nSeeding complete in {elapsed:.1f}s")
    print(f"  Users in table: {total}")


def main():
    parser = argparse.ArgumentParser(description="Seed the users table")
    parser.add_argument("--count", type=int, default=10, help="Number of users to create")
    parser.add_argument("--keep", action="store_true", help="Keep existing rows instead of recreating the schema")
    args = parser.parse_args()
    asyncio.run(seed(count=args.count, keep=args.keep))


if __name__ == "__main__":
    main()
