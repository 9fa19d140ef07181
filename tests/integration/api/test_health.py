import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_health_database_unreachable(unavailable_client: AsyncClient):
    response = await unavailable_client.get("/health")

    assert response.status_code == 503
    error = response.json()["error"]
    assert error["code"] == "STORE_UNAVAILABLE"
    assert "nonexistent" not in error["message"]
