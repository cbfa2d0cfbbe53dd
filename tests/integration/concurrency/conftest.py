"""Shared fixtures for concurrency integration tests.

Requests are fired with ``asyncio.gather`` through an ``httpx.AsyncClient``
bound to the app over ``ASGITransport``, so they interleave on one event
loop the way they would under a real server.
"""

import httpx
import pytest
from fastapi import FastAPI


@pytest.fixture
async def async_client(app: FastAPI):
    """AsyncClient talking to the ``app`` fixture in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
