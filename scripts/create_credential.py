#!/usr/bin/env python3
"""Create the tables if needed and provision one credential record."""

import argparse
import asyncio
from getpass import getpass

from sqlmodel import SQLModel

from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.errors import StoreError
from src.depends import AsyncSessionLocal, engine
from config import ApplicationConfig


async def provision(username: str, password: str) -> str:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    async with AsyncSessionLocal() as session:
        async with SqlAlchemyUnitOfWork(session) as uow:
            record = await uow.credentials.create(username, hasher.hash(password))
            await uow.commit()
            user_id = str(record.id)

    await engine.dispose()
    return user_id


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("username")
    args = parser.parse_args()

    pw1 = getpass("Password: ")
    pw2 = getpass("Repeat password: ")
    if pw1 != pw2:
        raise SystemExit("Passwords do not match")
    if not pw1:
        raise SystemExit("Password must not be empty")

    try:
        user_id = asyncio.run(provision(args.username, pw1))
    except StoreError as exc:
        raise SystemExit(f"Could not create credential: {exc}")

    print(f"OK -> {args.username} ({user_id})")


if __name__ == "__main__":
    main()
