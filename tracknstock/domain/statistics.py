"""
Statistics Domain Model

Server-computed inventory aggregate. Fetched with its own request, so it
is not guaranteed to agree with the product list fetched next to it.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from decimal import Decimal


class Statistics(BaseModel):
    """Inventory summary shown above the product table"""

    total_products: int = Field(0, alias="totalProducts")
    low_stock_count: int = Field(0, alias="lowStockCount")
    out_of_stock_count: int = Field(0, alias="outOfStockCount")
    total_value: Decimal = Field(Decimal("0"), alias="totalValue")

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("total_products", "low_stock_count", "out_of_stock_count", "total_value", mode="before")
    @classmethod
    def _null_as_zero(cls, value):
        return 0 if value is None else value
