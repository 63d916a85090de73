"""Reusable HTTP client utilities."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx


@asynccontextmanager
async def async_http_client(
    *,
    timeout: float | None,
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield a configured AsyncClient and close it afterwards.

    ``timeout=None`` disables the client-side deadline entirely.
    """

    async with httpx.AsyncClient(
        base_url=base_url or "", timeout=timeout, transport=transport
    ) as client:
        yield client
