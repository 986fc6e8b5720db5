"""
Product Store

Holds the current ViewState and refreshes the cached products and
statistics from the API. The cache is disposable: every refresh replaces
it wholesale.

Author: TM3
Date: 2025-10-21
"""
import asyncio
import logging
from typing import List, Optional

from tracknstock.connectors.inventory_api_connector import InventoryApiConnector
from tracknstock.core.exceptions import InventoryClientError
from tracknstock.domain.product import Product
from tracknstock.domain.statistics import Statistics
from tracknstock.services.filter_service import STATUS_ALL, STATUS_LOW, STATUS_OUT_OF_STOCK
from tracknstock.state import (
    ViewState, LoadingStarted, LoadingFinished, ProductsLoaded, StatisticsLoaded, reduce,
)

logger = logging.getLogger(__name__)


class ProductStore:
    """State container for the inventory screen"""

    def __init__(self, connector: InventoryApiConnector, state: Optional[ViewState] = None):
        self.connector = connector
        self.state = state or ViewState()

    def dispatch(self, action) -> ViewState:
        self.state = reduce(self.state, action)
        return self.state

    @property
    def products(self) -> List[Product]:
        return list(self.state.products)

    @property
    def statistics(self) -> Statistics:
        return self.state.statistics

    @property
    def visible_products(self) -> List[Product]:
        return self.state.visible_products

    def find(self, product_id: int) -> Optional[Product]:
        return next((p for p in self.state.products if p.id == product_id), None)

    async def load_products(self) -> List[Product]:
        """
        Fetch every product and replace the cached list

        Raises:
            TransportError, ServerError: the list could not be fetched
        """
        return await self._load(self.connector.list_products)

    async def load_matching(self, search: str = "", status: str = STATUS_ALL) -> List[Product]:
        """
        Let the server do the narrowing and cache only what it returns

        A search goes to /search, otherwise the low and out-of-stock
        statuses go to their own endpoints. Anything else loads the full
        list; the local filters still apply on top.
        """
        if search:
            return await self._load(lambda: self.connector.search_products(search))
        if status == STATUS_LOW:
            return await self._load(self.connector.list_low_stock)
        if status == STATUS_OUT_OF_STOCK:
            return await self._load(self.connector.list_out_of_stock)
        return await self.load_products()

    async def _load(self, fetch) -> List[Product]:
        self.dispatch(LoadingStarted())
        try:
            products = await fetch()
        except InventoryClientError:
            self.dispatch(LoadingFinished())
            raise
        self.dispatch(ProductsLoaded(tuple(products)))
        logger.info(f"Loaded {len(products)} products")
        return products

    async def load_statistics(self) -> Statistics:
        statistics = await self.connector.get_statistics()
        self.dispatch(StatisticsLoaded(statistics))
        return statistics

    async def _load_statistics_logged(self) -> None:
        # A statistics failure leaves the previous figures in place
        try:
            await self.load_statistics()
        except InventoryClientError as e:
            logger.error(f"Error fetching statistics: {e}")

    async def refresh(self) -> None:
        """
        Re-fetch products and statistics

        The two requests are independent and run concurrently. Only a
        product list failure is raised.
        """
        results = await asyncio.gather(
            self.load_products(),
            self._load_statistics_logged(),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, Exception):
                raise result
