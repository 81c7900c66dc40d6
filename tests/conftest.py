from pathlib import Path
import sys

import httpx
import pytest_asyncio

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core.http import ApiClient  # noqa: E402

BASE_URL = "http://api.test"


@pytest_asyncio.fixture
async def make_api():
    """Build an ``ApiClient`` whose requests are answered by ``handler``."""
    clients: list[httpx.AsyncClient] = []

    def factory(handler, **kwargs) -> ApiClient:
        kwargs.setdefault("token", "test-token")
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
        clients.append(client)
        return ApiClient(client=client, **kwargs)

    yield factory
    for client in clients:
        await client.aclose()
