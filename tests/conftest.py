"""
Shared fixtures: a scripted Shopify server on httpx.MockTransport.
"""

import json
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import httpx
import pytest

from shopify_admin import ShopifyAdminClient


class MockShopify:
    """Records requests and answers them from a queue of responses"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: List[httpx.Response] = []

    def queue(
        self,
        status: int = 200,
        json_body: Any = None,
        headers: Dict[str, str] = None,
        content: bytes = None,
    ):
        if content is not None:
            response = httpx.Response(status, content=content, headers=headers)
        elif json_body is not None:
            response = httpx.Response(status, json=json_body, headers=headers)
        else:
            response = httpx.Response(status, headers=headers)
        self.responses.append(response)
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Optional[dict]:
        content = self.last_request.content
        return json.loads(content) if content else None


@pytest.fixture
def shopify():
    """Scripted server"""
    return MockShopify()


@pytest.fixture
def client(shopify):
    """Client pinned to a version, with back-off sleeps stubbed out"""
    client = ShopifyAdminClient(
        "test-shop",
        access_token="shpat_test",
        api_version="2024-01",
        transport=shopify.transport,
    )
    client._backoff = AsyncMock()
    return client
