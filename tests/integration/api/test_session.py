from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import update

from src.domain.base import utc_now
from src.domain.entities import Session
from tests.utils.cookies import cookie_header, session_cookie


async def login(client: AsyncClient) -> str:
    response = await client.post("/auth/login", json={
        "username": "alice",
        "password": "correct-pw"
    })
    assert response.status_code == 200
    client.cookies.clear()
    return session_cookie(response)


@pytest.mark.asyncio
async def test_current_session(client: AsyncClient, create_credential):
    record = await create_credential("alice", "correct-pw")
    token = await login(client)

    response = await client.get("/auth/session", headers=cookie_header(token))

    assert response.status_code == 200
    data = response.json()
    assert data["user_id"] == str(record.id)
    assert data["username"] == "alice"
    assert "created_at" in data
    assert "expires_at" in data


@pytest.mark.asyncio
async def test_session_without_cookie(client: AsyncClient):
    response = await client.get("/auth/session")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_SESSION"


@pytest.mark.asyncio
async def test_forged_session(client: AsyncClient, create_credential):
    await create_credential("alice", "correct-pw")
    await login(client)

    response = await client.get("/auth/session", headers=cookie_header("forged-token"))

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_SESSION"


@pytest.mark.asyncio
async def test_expired_session(client: AsyncClient, create_credential, db_session):
    await create_credential("alice", "correct-pw")
    token = await login(client)

    await db_session.execute(
        update(Session).values(expires_at=utc_now() - timedelta(seconds=1))
    )
    await db_session.commit()

    response = await client.get("/auth/session", headers=cookie_header(token))

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_SESSION"
