from typing import List

import httpx
import pytest
from fastapi.testclient import TestClient

from catalogue.core_settings import Settings
from catalogue.infrastructure.inventory_client import InventoryClient
from catalogue.main import create_app

INVENTORY_BASE_URL = "http://inventory.test"


class FakeInventoryProvider:
    """Stands in for the inventory API behind an httpx.MockTransport.

    ``mode`` selects the behaviour: ``ok``, ``error`` (HTTP 500), ``not_found``,
    ``malformed``, ``timeout``, ``connect_error``, ``huge_price`` (a price
    too large to round to cents) or ``crash`` (a non-httpx exception).
    """

    def __init__(self):
        self.mode = "ok"
        self.price = 9.99
        self.stock = 5
        self.requests: List[httpx.Request] = []

    @property
    def requested_ids(self) -> List[int]:
        return [int(r.url.path.rsplit("/", 1)[-1]) for r in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.mode == "ok":
            return httpx.Response(200, json={"price": self.price, "stock": self.stock})
        if self.mode == "error":
            return httpx.Response(500, json={"message": "boom"})
        if self.mode == "not_found":
            return httpx.Response(404)
        if self.mode == "malformed":
            return httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})
        if self.mode == "timeout":
            raise httpx.ReadTimeout("timed out", request=request)
        if self.mode == "connect_error":
            raise httpx.ConnectError("connection refused", request=request)
        if self.mode == "huge_price":
            return httpx.Response(200, json={"price": 1e30, "stock": 1})
        if self.mode == "crash":
            raise RuntimeError("transport blew up")
        raise AssertionError(f"unknown mode {self.mode}")

    def client(self, base_url: str = INVENTORY_BASE_URL) -> InventoryClient:
        http_client = httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(self))
        return InventoryClient(base_url, http_client=http_client)


@pytest.fixture
def inventory() -> FakeInventoryProvider:
    return FakeInventoryProvider()


@pytest.fixture
def settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", INVENTORY_API_BASE_URL=INVENTORY_BASE_URL)


@pytest.fixture
def client(settings, inventory):
    app = create_app(settings=settings, inventory_client=inventory.client())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_product(client):
    def _make(name: str = "Widget", description: str = "A thing") -> dict:
        resp = client.post("/api/products", json={"name": name, "description": description})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _make
