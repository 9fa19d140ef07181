import hashlib
from datetime import timedelta

import pytest
from sqlmodel import select

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.entities import Session


@pytest.mark.asyncio
async def test_only_token_hash_is_stored(db_session, create_credential):
    record = await create_credential("alice", "correct-pw")

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        token, session = await uow.sessions.create(record.id, timedelta(minutes=5))
        await uow.commit()

    rows = (await db_session.exec(select(Session))).all()
    assert len(rows) == 1
    assert rows[0].token_hash == hashlib.sha256(token.encode()).hexdigest()
    assert rows[0].token_hash != token
    assert rows[0].expires_at - rows[0].created_at == timedelta(minutes=5)


@pytest.mark.asyncio
async def test_tokens_are_unique(db_session, create_credential):
    record = await create_credential("alice", "correct-pw")

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        tokens = {
            (await uow.sessions.create(record.id, timedelta(minutes=5)))[0]
            for _ in range(20)
        }
        await uow.commit()

    assert len(tokens) == 20


@pytest.mark.asyncio
async def test_invalidate_and_revoke_all(db_session, create_credential):
    record = await create_credential("alice", "correct-pw")

    async with SqlAlchemyUnitOfWork(db_session) as uow:
        first, _ = await uow.sessions.create(record.id, timedelta(minutes=5))
        second, _ = await uow.sessions.create(record.id, timedelta(minutes=5))
        third, _ = await uow.sessions.create(record.id, timedelta(minutes=5))

        assert await uow.sessions.invalidate(first) is True
        assert await uow.sessions.invalidate(first) is False
        assert await uow.sessions.get_active(first) is None

        assert await uow.sessions.revoke_all_by_user_id(record.id) == 2
        assert await uow.sessions.get_active(second) is None
        assert await uow.sessions.get_active(third) is None
        await uow.commit()
