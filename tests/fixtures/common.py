"""Common test fixtures for envoi resolver tests.

This module provides fixtures that can be reused across different test modules.
"""

from typing import Callable, List, Optional
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio

from envoi_resolver.clients.chain_resolver import ChainResolver
from envoi_resolver.clients.contract_client import ContractClient
from envoi_resolver.clients.http_resolver import HttpResolver
from envoi_resolver.config import AlgodConfig, ResolverSettings

TEST_NAME = "en.voi"
TEST_ADDRESS = "BRB3JP4LIW5Q755FJCGVAOA4W3THJ7BR3K6F26EVCGMETLEAZOQRHHJNLQ"
API_URL = "https://api.test.envoi"


class MockBackend:
    """Scripted HTTP backend that records every request it receives."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Optional[Callable] = None

    def respond_with(self, status_code: int = 200, json=None, text: Optional[str] = None):
        def handler(request):
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json)
        self.handler = handler

    def raise_error(self, exc_factory: Callable[[httpx.Request], Exception]):
        def handler(request):
            raise exc_factory(request)
        self.handler = handler

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.handler(request)
        if not isinstance(result, httpx.Response):
            result = await result
        return result

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings():
    """Resolver settings pointing at a test API."""
    return ResolverSettings(api_base_url=API_URL, http_timeout=1.0)


@pytest.fixture
def mock_contract_client():
    """Create a mock contract client."""
    return AsyncMock(spec=ContractClient)


@pytest.fixture
def chain_resolver(settings, mock_contract_client):
    """Chain resolver wired to the mock contract client."""
    return ChainResolver(
        AlgodConfig(url="http://localhost", port=4001),
        settings,
        contract_client=mock_contract_client
    )


@pytest.fixture
def http_backend():
    """Scripted HTTP backend."""
    return MockBackend()


@pytest_asyncio.fixture
async def http_resolver(settings, http_backend):
    """HTTP resolver whose client talks to the scripted backend."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(http_backend))
    resolver = HttpResolver(settings, client=client)
    yield resolver
    await resolver.close()


@pytest.fixture
def sample_name_response():
    """Indexer response for en.voi."""
    return {
        "results": [{
            "address": TEST_ADDRESS,
            "type": "addr",
            "name": TEST_NAME,
            "metadata": {},
            "cached": False
        }]
    }


@pytest.fixture
def sample_token_response():
    """Indexer token response with one complete and one incomplete record."""
    return {
        "results": [
            {
                "token_id": "80067632360305829899847207196844336417360777167721505904064743996533051131418",
                "name": TEST_NAME,
                "address": TEST_ADDRESS,
                "metadata": {"avatar": "https://example.com/avatar-thumb.png"},
                "cached": True
            },
            {
                "name": "ghost.voi",
                "address": "",
                "metadata": None,
                "cached": False
            }
        ]
    }
