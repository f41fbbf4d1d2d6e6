"""Integration test fixtures.

This conftest loads the full FastAPI app; unit tests never import it.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, cast

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from nutricalc.app import app


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL/REST tests.

    Uses httpx.AsyncClient with an explicit ASGITransport and a dummy
    base_url so relative requests resolve.
    """
    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
