import asyncio

import httpx
import pytest

from infrastructure.api import FaceitAPIClient, RateLimitRetryPolicy
from helpers import BASE_URL, FakeFaceitAPI, RecordingSleep


@pytest.fixture
def fake_api():
    return FakeFaceitAPI()


@pytest.fixture
def recording_sleep():
    return RecordingSleep()


@pytest.fixture
def make_client(fake_api, recording_sleep):
    def _make(*_args, **_kwargs) -> FaceitAPIClient:
        return FaceitAPIClient(
            "test-key-0123456789",
            base_url=BASE_URL,
            retry_policy=RateLimitRetryPolicy(max_retries=5, fallback_base_ms=500, sleep=recording_sleep),
            transport=httpx.MockTransport(fake_api.handler),
        )
    return _make


@pytest.fixture
def with_client(make_client):
    """Run ``fn(api)`` inside an open client and return its result."""

    def _run(fn):
        async def _go():
            async with make_client() as api:
                return await fn(api)
        return asyncio.run(_go())

    return _run
