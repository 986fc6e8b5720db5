"""
Unit tests for InventoryApiConnector

HTTP is served by httpx.MockTransport; no backend needed.

Author: TM3
Date: 2025-10-22
"""
import pytest
import httpx
from decimal import Decimal

from conftest import request_json
from tracknstock.connectors.inventory_api_connector import InventoryApiConnector
from tracknstock.core.exceptions import ServerError, TransportError
from tracknstock.domain.product import ProductCreate


def new_product_fields() -> ProductCreate:
    return ProductCreate(
        name="Pressure Cooker",
        category="Kitchen",
        supplier="Prestige",
        quantity=8,
        min_stock=2,
        price=Decimal("2499.00"),
    )


class TestInventoryApiConnectorReads:

    @pytest.mark.asyncio
    async def test_list_products(self, connector, fake_api, sample_product_data):
        # Arrange
        fake_api.add("GET", "", json_body=sample_product_data)

        # Act
        products = await connector.list_products()

        # Assert
        assert [p.id for p in products] == [1, 2, 3]
        assert products[1].name == "Banana"

    @pytest.mark.asyncio
    async def test_list_products_keeps_negative_values(self, connector, fake_api, sample_product_data):
        # Arrange
        negative = {"id": 9, "name": "Returned Kettle", "category": "Kitchen", "supplier": "Philips",
                    "quantity": -1, "minStock": 2, "price": 1500}
        fake_api.add("GET", "", json_body=sample_product_data + [negative])

        # Act
        products = await connector.list_products()

        # Assert
        assert [p.id for p in products] == [1, 2, 3, 9]
        assert products[3].quantity == -1

    @pytest.mark.asyncio
    async def test_list_products_empty_body(self, connector, fake_api):
        fake_api.add("GET", "", json_body=[])

        assert await connector.list_products() == []

    @pytest.mark.asyncio
    async def test_get_statistics(self, connector, fake_api, sample_statistics_data):
        fake_api.add("GET", "/statistics", json_body=sample_statistics_data)

        stats = await connector.get_statistics()

        assert stats.total_products == 3
        assert stats.total_value == Decimal("1875577.5")

    @pytest.mark.asyncio
    async def test_get_product(self, connector, fake_api, sample_product_data):
        fake_api.add("GET", "/3", json_body=sample_product_data[2])

        product = await connector.get_product(3)

        assert product.name == "Galaxy S24"

    @pytest.mark.asyncio
    async def test_search_sends_query_parameter(self, connector, fake_api, sample_product_data):
        fake_api.add("GET", "/search", json_body=[sample_product_data[1]])

        products = await connector.search_products("ban")

        assert [p.id for p in products] == [2]
        assert fake_api.calls("GET", "/search")[0].url.params["query"] == "ban"

    @pytest.mark.asyncio
    async def test_low_and_out_of_stock_lists(self, connector, fake_api, sample_product_data):
        fake_api.add("GET", "/low-stock", json_body=sample_product_data[:2])
        fake_api.add("GET", "/out-of-stock", json_body=[sample_product_data[1]])

        assert len(await connector.list_low_stock()) == 2
        assert [p.id for p in await connector.list_out_of_stock()] == [2]

    @pytest.mark.asyncio
    async def test_categories_and_suppliers(self, connector, fake_api):
        fake_api.add("GET", "/categories", json_body=["Electronics", "Fruits"])
        fake_api.add("GET", "/suppliers", json_body=["FarmFresh", None, "Samsung"])

        assert await connector.list_categories() == ["Electronics", "Fruits"]
        assert await connector.list_suppliers() == ["FarmFresh", "Samsung"]


class TestInventoryApiConnectorWrites:

    @pytest.mark.asyncio
    async def test_create_product_posts_fields_without_id(self, connector, fake_api):
        # Arrange
        fake_api.add("POST", "", status=201, json_body={"id": 10, "name": "Pressure Cooker",
                                                      "category": "Kitchen", "supplier": "Prestige",
                                                      "quantity": 8, "minStock": 2, "price": 2499.0})

        # Act
        created = await connector.create_product(new_product_fields())

        # Assert
        assert created.id == 10
        body = request_json(fake_api.calls("POST")[0])
        assert body == {"name": "Pressure Cooker", "category": "Kitchen", "supplier": "Prestige",
                        "quantity": 8, "minStock": 2, "price": 2499.0}

    @pytest.mark.asyncio
    async def test_update_product_puts_to_product_url(self, connector, fake_api):
        fake_api.add("PUT", "/10", json_body={"id": 10, "name": "Pressure Cooker", "category": "Kitchen",
                                              "supplier": "Prestige", "quantity": 8, "minStock": 2,
                                              "price": 2499.0})

        updated = await connector.update_product(10, new_product_fields())

        assert updated.id == 10
        assert len(fake_api.calls("PUT", "/10")) == 1

    @pytest.mark.asyncio
    async def test_delete_product_accepts_no_content(self, connector, fake_api):
        fake_api.add("DELETE", "/10", status=204)

        assert await connector.delete_product(10) is None
        assert len(fake_api.calls("DELETE", "/10")) == 1


class TestInventoryApiConnectorErrors:

    @pytest.mark.asyncio
    async def test_server_error_carries_body_message(self, connector, fake_api):
        fake_api.add("POST", "", status=400, json_body={"message": "Price must be positive"})

        with pytest.raises(ServerError) as exc_info:
            await connector.create_product(new_product_fields())

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Price must be positive"

    @pytest.mark.asyncio
    async def test_server_error_without_body_uses_reason(self, connector, fake_api):
        fake_api.add("PUT", "/99", status=404)

        with pytest.raises(ServerError) as exc_info:
            await connector.update_product(99, new_product_fields())

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Not Found"

    @pytest.mark.asyncio
    async def test_connection_failure_is_transport_error(self, connector, fake_api):
        fake_api.add("GET", "", error=httpx.ConnectError("Connection refused"))

        with pytest.raises(TransportError):
            await connector.list_products()

    @pytest.mark.asyncio
    async def test_invalid_json_is_server_error(self, fake_api):
        def handler(request):
            return httpx.Response(200, content=b"<html>oops</html>")

        connector = InventoryApiConnector(base_url="http://testserver/api/products",
                                          transport=httpx.MockTransport(handler))

        with pytest.raises(ServerError, match="Invalid JSON"):
            await connector.list_products()

    @pytest.mark.asyncio
    async def test_malformed_product_is_server_error(self, connector, fake_api):
        fake_api.add("GET", "", json_body=[{"name": "no id"}])

        with pytest.raises(ServerError):
            await connector.list_products()

    @pytest.mark.asyncio
    async def test_requests_are_not_retried(self, connector, fake_api):
        fake_api.add("GET", "/statistics", status=500, json_body={"error": "boom"})

        with pytest.raises(ServerError, match="boom"):
            await connector.get_statistics()

        assert len(fake_api.calls("GET", "/statistics")) == 1


def test_base_url_trailing_slash_is_stripped():
    connector = InventoryApiConnector(base_url="http://example.com/api/products/")

    assert connector.base_url == "http://example.com/api/products"
