"""
Pytest fixtures and configuration for TrackNStock tests

The inventory API is replaced by an httpx.MockTransport, so no test needs
a running backend.

Author: TM3
Date: 2025-10-22
"""
import json
from decimal import Decimal

import httpx
import pytest

from tracknstock.connectors.inventory_api_connector import InventoryApiConnector
from tracknstock.domain.product import Product
from tracknstock.services.product_store import ProductStore


API_BASE_URL = "http://testserver/api/products"


class FakeInventoryApi:
    """
    Scripted inventory backend

    Register responses with add(); every request received is kept in
    .requests for assertions.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method: str, path: str = "", status: int = 200, json_body=None, error: Exception = None):
        self.routes[(method, f"/api/products{path}")] = (status, json_body, error)

    def calls(self, method: str, path: str = "") -> list:
        return [r for r in self.requests if r.method == method and r.url.path == f"/api/products{path}"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={'message': f'No route for {key}'})
        status, body, error = self.routes[key]
        if error is not None:
            raise error
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)


@pytest.fixture
def fake_api():
    return FakeInventoryApi()


@pytest.fixture
def connector(fake_api):
    return InventoryApiConnector(base_url=API_BASE_URL, timeout=5.0, transport=fake_api.transport())


@pytest.fixture
def store(connector):
    return ProductStore(connector)


@pytest.fixture
def sample_product_data():
    """Products as the API serves them (camelCase)"""
    return [
        {
            "id": 1,
            "name": "Apple",
            "category": "Fruits",
            "supplier": "FarmFresh",
            "quantity": 5,
            "minStock": 10,
            "price": 120.5,
            "lastUpdated": "2025-10-01T10:15:00",
        },
        {
            "id": 2,
            "name": "Banana",
            "category": "Fruits",
            "supplier": "TropicalTaste",
            "quantity": 0,
            "minStock": 3,
            "price": 40.0,
            "lastUpdated": "2025-10-02T08:00:00",
        },
        {
            "id": 3,
            "name": "Galaxy S24",
            "category": "Electronics",
            "supplier": "Samsung",
            "quantity": 25,
            "minStock": 5,
            "price": 74999.0,
            "lastUpdated": "2025-10-03T12:30:00",
        },
    ]


@pytest.fixture
def sample_products(sample_product_data):
    return [Product.model_validate(item) for item in sample_product_data]


@pytest.fixture
def sample_statistics_data():
    return {
        "totalProducts": 3,
        "lowStockCount": 2,
        "outOfStockCount": 1,
        "totalValue": 1875577.5,
    }


def make_product(id: int, name: str, quantity: int, min_stock: int, **extra) -> Product:
    data = {
        "id": id,
        "name": name,
        "quantity": quantity,
        "min_stock": min_stock,
        "price": Decimal(extra.pop("price", "10")),
    }
    data.update(extra)
    return Product(**data)
