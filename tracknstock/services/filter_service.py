"""
Product filtering for the product table

Pure functions: the visible list is recomputed from scratch whenever the
product list or any criterion changes.

Author: TM3
Date: 2025-10-20
"""
from dataclasses import dataclass
from typing import Iterable, List

from tracknstock.domain.catalog import ALL
from tracknstock.domain.product import Product


STATUS_ALL = "all"
STATUS_LOW = "low"
STATUS_IN_STOCK = "in-stock"
STATUS_OUT_OF_STOCK = "out-of-stock"

STATUS_FILTERS = (STATUS_ALL, STATUS_IN_STOCK, STATUS_LOW, STATUS_OUT_OF_STOCK)


@dataclass(frozen=True)
class FilterCriteria:
    """Active search and filter selections"""
    search: str = ""
    status: str = STATUS_ALL
    category: str = ALL
    brand: str = ALL

    def __post_init__(self):
        if self.status not in STATUS_FILTERS:
            raise ValueError(f"Unknown status filter: {self.status!r} (expected one of {', '.join(STATUS_FILTERS)})")

    @property
    def is_default(self) -> bool:
        return self == FilterCriteria()


def matches_search(product: Product, search: str) -> bool:
    """Case-insensitive substring match against name, category or brand"""
    if not search:
        return True
    needle = search.lower()
    return any(
        needle in (value or "").lower()
        for value in (product.name, product.category, product.supplier)
    )


def matches_status(product: Product, status: str) -> bool:
    if status == STATUS_LOW:
        return product.quantity <= product.min_stock
    if status == STATUS_IN_STOCK:
        return product.quantity > product.min_stock
    if status == STATUS_OUT_OF_STOCK:
        return product.quantity == 0
    return True


def _matches_exact(value: str, selected: str) -> bool:
    if selected == ALL:
        return True
    return (value or "").lower() == selected.lower()


def filter_products(products: Iterable[Product], criteria: FilterCriteria) -> List[Product]:
    """
    Compute the visible subset of products

    Applies, in order: search, status, category and brand. All four
    combine with AND; the input order is preserved.

    Args:
        products: Full product collection
        criteria: Current selections

    Returns:
        New list with the products that pass every criterion
    """
    filtered = list(products)

    if criteria.search:
        filtered = [p for p in filtered if matches_search(p, criteria.search)]

    if criteria.status != STATUS_ALL:
        filtered = [p for p in filtered if matches_status(p, criteria.status)]

    if criteria.category != ALL:
        filtered = [p for p in filtered if _matches_exact(p.category, criteria.category)]

    if criteria.brand != ALL:
        filtered = [p for p in filtered if _matches_exact(p.supplier, criteria.brand)]

    return filtered
