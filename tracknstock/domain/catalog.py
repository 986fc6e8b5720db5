"""
Product Catalog Taxonomy
Single source of truth for categories and the brands sold in each one

Author: TM3
Date: 2025-10-17
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple
from enum import Enum


ALL = "all"


class ProductCategory(str, Enum):
    """Product categories"""
    FRUITS = "Fruits"
    ELECTRONICS = "Electronics"
    FURNITURE = "Furniture"
    CLOTHES = "Clothes"
    KITCHEN = "Kitchen"
    STATIONERY = "Stationery"


@dataclass(frozen=True)
class CategoryBrands:
    """Brands available for one category"""
    category: ProductCategory
    brands: Tuple[str, ...]


# ================================================================================
# CATALOG
# ================================================================================
# Order matters: categories and brands are listed in this order everywhere
# except the "all brands" list, which is sorted
# ================================================================================

CATALOG: Tuple[CategoryBrands, ...] = (
    CategoryBrands(ProductCategory.FRUITS, ("FarmFresh", "OrganicValley", "TropicalTaste")),
    CategoryBrands(ProductCategory.ELECTRONICS, ("Sony", "Samsung", "Apple", "Xiaomi", "OnePlus")),
    CategoryBrands(ProductCategory.FURNITURE, ("Ikea", "HomeTown", "Magnolia")),
    CategoryBrands(ProductCategory.CLOTHES, ("Zara", "H&M", "Uniqlo", "Levis")),
    CategoryBrands(ProductCategory.KITCHEN, ("Prestige", "Wonderchef", "Philips")),
    CategoryBrands(ProductCategory.STATIONERY, ("Reynolds", "Camlin", "Staedtler")),
)

BRANDS_BY_CATEGORY: Dict[str, Tuple[str, ...]] = {
    entry.category.value: entry.brands for entry in CATALOG
}


def list_categories() -> List[str]:
    """All category names in catalog order"""
    return [entry.category.value for entry in CATALOG]


def all_brands() -> List[str]:
    """Every brand across the catalog, sorted"""
    return sorted(brand for entry in CATALOG for brand in entry.brands)


def brands_for_category(category: str) -> List[str]:
    """
    Brands to offer for a category selection

    Args:
        category: Category name, "all" or "" (no selection)

    Returns:
        Every brand (sorted) for "all"/"", the category's own brands in
        catalog order otherwise, and an empty list for unknown categories
    """
    if not category or category == ALL:
        return all_brands()
    return list(BRANDS_BY_CATEGORY.get(category, ()))


def is_known_category(category: str) -> bool:
    return category in BRANDS_BY_CATEGORY


def is_brand_in_category(brand: str, category: str) -> bool:
    """Check whether a brand is sold under the given category"""
    return brand in BRANDS_BY_CATEGORY.get(category, ())
