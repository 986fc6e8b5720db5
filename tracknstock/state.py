"""
View State

The whole screen state lives in one immutable ViewState value. It only
changes through reduce(state, action), which returns a new value. The
visible product list and the brand choices are derived on read, so they
can never drift out of sync with the selections they depend on.

Author: TM3
Date: 2025-10-21
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple

from tracknstock.domain.catalog import ALL, brands_for_category
from tracknstock.domain.form import FormBuffer
from tracknstock.domain.product import Product
from tracknstock.domain.statistics import Statistics
from tracknstock.services.filter_service import FilterCriteria, filter_products


class ModalMode(str, Enum):
    CLOSED = "closed"
    ADD = "add"
    EDIT = "edit"


@dataclass(frozen=True)
class ModalState:
    """Add/edit form: which mode, which product, and the edit buffer"""
    mode: ModalMode = ModalMode.CLOSED
    product_id: Optional[int] = None
    buffer: FormBuffer = field(default_factory=FormBuffer)

    @property
    def is_open(self) -> bool:
        return self.mode != ModalMode.CLOSED


@dataclass(frozen=True)
class ViewState:
    products: Tuple[Product, ...] = ()
    statistics: Statistics = field(default_factory=Statistics)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    modal: ModalState = field(default_factory=ModalState)
    loading: bool = True
    notice: Optional[str] = None

    @property
    def visible_products(self) -> List[Product]:
        return filter_products(self.products, self.criteria)

    @property
    def available_brands(self) -> List[str]:
        """Brand choices for the current category filter"""
        return brands_for_category(self.criteria.category)


# ==================== ACTIONS ====================

@dataclass(frozen=True)
class LoadingStarted:
    pass


@dataclass(frozen=True)
class LoadingFinished:
    pass


@dataclass(frozen=True)
class ProductsLoaded:
    products: Tuple[Product, ...]


@dataclass(frozen=True)
class StatisticsLoaded:
    statistics: Statistics


@dataclass(frozen=True)
class SearchChanged:
    search: str


@dataclass(frozen=True)
class StatusFilterChanged:
    status: str


@dataclass(frozen=True)
class CategorySelected:
    category: str


@dataclass(frozen=True)
class BrandSelected:
    brand: str


@dataclass(frozen=True)
class BrandToggled:
    """Quick brand button: picks the brand, or clears it if already picked"""
    brand: str


@dataclass(frozen=True)
class AddOpened:
    pass


@dataclass(frozen=True)
class EditOpened:
    product: Product


@dataclass(frozen=True)
class FieldChanged:
    name: str
    value: str


@dataclass(frozen=True)
class ModalClosed:
    pass


@dataclass(frozen=True)
class NoticeShown:
    message: Optional[str]


# ==================== REDUCER ====================

def _with_criteria(state: ViewState, **changes) -> ViewState:
    return replace(state, criteria=replace(state.criteria, **changes))


def _select_category(state: ViewState, category: str) -> ViewState:
    brand = state.criteria.brand
    if brand != ALL and brand.lower() not in {b.lower() for b in brands_for_category(category)}:
        brand = ALL
    return _with_criteria(state, category=category or ALL, brand=brand)


def reduce(state: ViewState, action) -> ViewState:
    """
    Apply one action and return the new state

    Raises:
        ValueError: unknown action, unknown form field or status filter
    """
    if isinstance(action, LoadingStarted):
        return replace(state, loading=True)

    if isinstance(action, LoadingFinished):
        return replace(state, loading=False)

    if isinstance(action, ProductsLoaded):
        # Overwrite, never merge
        return replace(state, products=tuple(action.products), loading=False)

    if isinstance(action, StatisticsLoaded):
        return replace(state, statistics=action.statistics)

    if isinstance(action, SearchChanged):
        return _with_criteria(state, search=action.search)

    if isinstance(action, StatusFilterChanged):
        return _with_criteria(state, status=action.status)

    if isinstance(action, CategorySelected):
        return _select_category(state, action.category)

    if isinstance(action, BrandSelected):
        return _with_criteria(state, brand=action.brand or ALL)

    if isinstance(action, BrandToggled):
        brand = ALL if state.criteria.brand == action.brand else action.brand
        return _with_criteria(state, brand=brand)

    if isinstance(action, AddOpened):
        category = state.criteria.category
        seed = "" if category == ALL else category
        return replace(state, modal=ModalState(ModalMode.ADD, None, FormBuffer.empty(category=seed)))

    if isinstance(action, EditOpened):
        product = action.product
        return replace(state, modal=ModalState(ModalMode.EDIT, product.id, FormBuffer.from_product(product)))

    if isinstance(action, FieldChanged):
        if not state.modal.is_open:
            return state
        buffer = state.modal.buffer.with_field(action.name, action.value)
        return replace(state, modal=replace(state.modal, buffer=buffer))

    if isinstance(action, ModalClosed):
        return replace(state, modal=ModalState())

    if isinstance(action, NoticeShown):
        return replace(state, notice=action.message)

    raise ValueError(f"Unknown action: {action!r}")
