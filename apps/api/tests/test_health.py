import pytest
from httpx import AsyncClient

from contacts_api.core.config import settings


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "env": settings.ENV, "version": settings.VERSION}
