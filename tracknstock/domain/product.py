"""
Product Domain Model

Represents a product as served by the inventory API.
The server owns every product; the client only holds a cached copy
that is thrown away and re-fetched after each mutation.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator, field_serializer
from typing import Optional
from datetime import datetime
from decimal import Decimal
from enum import Enum


class StockStatus(str, Enum):
    """Derived stock status, never persisted"""
    OUT_OF_STOCK = "Out of Stock"
    LOW_STOCK = "Low Stock"
    IN_STOCK = "In Stock"

    @property
    def label(self) -> str:
        return self.value


def stock_status(quantity: int, min_stock: int) -> StockStatus:
    """
    Compute stock status from quantity and reorder threshold

    Returns:
        OUT_OF_STOCK when quantity is 0, LOW_STOCK when it is at or below
        min_stock, IN_STOCK otherwise
    """
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= min_stock:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


class Product(BaseModel):
    """
    Product domain model - one inventory item

    Fields:
        id: Backend-assigned identifier, immutable once created
        name: Display name
        category: Category from the catalog taxonomy
        supplier: Brand name (must belong to the category's brands)
        quantity: Current stock count
        min_stock: Reorder threshold
        price: Unit price in rupees
        last_updated: Server-maintained timestamp (read only)
    """

    id: int = Field(..., description="Backend product ID")
    name: str = Field("", description="Product name")
    category: str = Field("", description="Product category")
    supplier: str = Field("", description="Brand")

    # No bounds here: records are shown as the server stores them.
    # The >= 0 rule is enforced on ProductCreate.
    quantity: int = Field(0, description="Current stock level")
    min_stock: int = Field(0, alias="minStock", description="Reorder threshold")
    price: Decimal = Field(Decimal("0"), description="Unit price")

    last_updated: Optional[datetime] = Field(None, alias="lastUpdated", description="Last update timestamp")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("name", "category", "supplier", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        # Missing text never matches a filter, so normalise it to ""
        return "" if value is None else value

    @property
    def status(self) -> StockStatus:
        return stock_status(self.quantity, self.min_stock)


class ProductCreate(BaseModel):
    """Request body for creating or updating a product (no id)"""
    name: str
    category: str
    supplier: str
    quantity: int = Field(..., ge=0)
    min_stock: int = Field(..., alias="minStock", ge=0)
    price: Decimal = Field(..., ge=0)

    model_config = ConfigDict(populate_by_name=True)

    @field_serializer("price")
    def _price_as_number(self, value: Decimal) -> float:
        return float(value)

    def to_payload(self) -> dict:
        """JSON body using the API's camelCase field names"""
        return self.model_dump(by_alias=True)


# PUT carries the full set of editable fields
ProductUpdate = ProductCreate
