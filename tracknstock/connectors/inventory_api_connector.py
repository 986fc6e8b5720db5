"""
Inventory REST API Connector
Handles all interactions with the inventory backend

Author: TM3
Date: 2025-10-20
"""
from typing import Any, Dict, List, Optional
import httpx
import logging

from pydantic import ValidationError as PydanticValidationError

from tracknstock.core.config import settings
from tracknstock.core.exceptions import ServerError, TransportError
from tracknstock.domain.product import Product, ProductCreate, ProductUpdate
from tracknstock.domain.statistics import Statistics

logger = logging.getLogger(__name__)


class InventoryApiConnector:
    """
    Connector for the inventory REST API

    Handles:
    - Product listing, lookup and search
    - Create / update / delete
    - Server-side statistics, categories and suppliers

    Every call is one HTTP round trip. Nothing is retried: a failure is
    logged and raised as TransportError or ServerError for the caller to
    report.
    """

    def __init__(self, base_url: str = None, timeout: float = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize inventory API connector

        Args:
            base_url: Products endpoint (default: API_BASE_URL setting)
            timeout: Request timeout in seconds (default: API_TIMEOUT setting)
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = (base_url or settings.get_api_base_url()).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self._transport = transport
        self.headers = {
            'Accept': 'application/json',
        }

    async def _make_request(self, method: str, endpoint: str = "",
                            params: Optional[Dict] = None, json: Optional[Dict] = None) -> Any:
        """
        Make a request against the products endpoint

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: Path below the base URL (e.g. '/statistics')
            params: Query parameters
            json: JSON body

        Returns:
            Parsed JSON body, or None for empty responses
        """
        url = f"{self.base_url}{endpoint}"

        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            try:
                response = await client.request(method, url, headers=self.headers, params=params, json=json)
            except httpx.TransportError as e:
                logger.error(f"API request error: {method} {url} - {e!r}")
                raise TransportError(f"Could not reach the inventory API at {self.base_url}", url=url) from e

        if not response.is_success:
            message = _error_message(response)
            logger.error(f"API request failed: {method} {url} - {response.status_code} - {message}")
            raise ServerError(response.status_code, message)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {method} {url}: {e}")
            raise ServerError(response.status_code, "Invalid JSON in response") from e

    # ==================== CORE API METHODS ====================

    async def list_products(self) -> List[Product]:
        """GET / - every product"""
        data = await self._make_request("GET")
        return _parse_products(data)

    async def get_statistics(self) -> Statistics:
        """GET /statistics - server-side inventory summary"""
        data = await self._make_request("GET", "/statistics")
        try:
            return Statistics.model_validate(data or {})
        except PydanticValidationError as e:
            logger.error(f"Malformed statistics payload: {e}")
            raise ServerError(200, "Malformed statistics in response") from e

    async def create_product(self, fields: ProductCreate) -> Product:
        """POST / - create a product, returns it with its new id"""
        data = await self._make_request("POST", json=fields.to_payload())
        logger.info(f"Created product '{fields.name}'")
        return _parse_product(data)

    async def update_product(self, product_id: int, fields: ProductUpdate) -> Product:
        """PUT /{id} - replace the editable fields of a product"""
        data = await self._make_request("PUT", f"/{product_id}", json=fields.to_payload())
        logger.info(f"Updated product {product_id}")
        return _parse_product(data)

    async def delete_product(self, product_id: int) -> None:
        """DELETE /{id}"""
        await self._make_request("DELETE", f"/{product_id}")
        logger.info(f"Deleted product {product_id}")

    # ==================== LOOKUPS ====================

    async def get_product(self, product_id: int) -> Product:
        """GET /{id}"""
        data = await self._make_request("GET", f"/{product_id}")
        return _parse_product(data)

    async def search_products(self, query: str) -> List[Product]:
        """GET /search?query= - server-side search by name, category or brand"""
        data = await self._make_request("GET", "/search", params={'query': query})
        return _parse_products(data)

    async def list_low_stock(self) -> List[Product]:
        data = await self._make_request("GET", "/low-stock")
        return _parse_products(data)

    async def list_out_of_stock(self) -> List[Product]:
        data = await self._make_request("GET", "/out-of-stock")
        return _parse_products(data)

    async def list_categories(self) -> List[str]:
        """GET /categories - distinct categories in use"""
        data = await self._make_request("GET", "/categories")
        return [str(c) for c in data or [] if c is not None]

    async def list_suppliers(self) -> List[str]:
        """GET /suppliers - distinct brands in use"""
        data = await self._make_request("GET", "/suppliers")
        return [str(s) for s in data or [] if s is not None]


def _error_message(response: httpx.Response) -> str:
    """Pull a human readable message out of an error response"""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ('message', 'error', 'detail'):
            if body.get(key):
                return str(body[key])

    return response.reason_phrase or f"HTTP {response.status_code}"


def _parse_product(data: Any) -> Product:
    try:
        return Product.model_validate(data)
    except PydanticValidationError as e:
        logger.error(f"Malformed product payload: {e}")
        raise ServerError(200, "Malformed product in response") from e


def _parse_products(data: Any) -> List[Product]:
    if data is None:
        return []
    if not isinstance(data, list):
        logger.error(f"Expected a product list, got {type(data).__name__}")
        raise ServerError(200, "Expected a list of products in response")
    return [_parse_product(item) for item in data]
