"""
Product form controller

Drives the add/edit form and the delete action. The form itself is part
of the store's ViewState; this class performs the side effects: API
calls and the refresh that follows every successful mutation.

Author: TM3
Date: 2025-10-21
"""
import logging
from typing import Callable

from tracknstock.core.exceptions import ValidationError
from tracknstock.domain.product import Product
from tracknstock.services.product_store import ProductStore
from tracknstock.state import (
    ModalMode, AddOpened, EditOpened, FieldChanged, ModalClosed, NoticeShown,
)

logger = logging.getLogger(__name__)


class FormController:
    """Add / edit / delete flows for products"""

    def __init__(self, store: ProductStore):
        self.store = store
        self.connector = store.connector

    @property
    def modal(self):
        return self.store.state.modal

    def open_add(self) -> None:
        """Open an empty form; category is seeded from the active category filter"""
        self.store.dispatch(AddOpened())

    def open_edit(self, product: Product) -> None:
        self.store.dispatch(EditOpened(product))

    def update_field(self, name: str, value: str) -> None:
        self.store.dispatch(FieldChanged(name, value))

    def cancel(self) -> None:
        """Close the form without saving"""
        self.store.dispatch(ModalClosed())

    async def submit(self) -> Product:
        """
        Validate the form and save it

        On success the form is closed and products and statistics are
        re-fetched. On failure the form stays open with its contents.

        Raises:
            ValidationError: form incomplete or invalid (no request sent)
            TransportError, ServerError: the save request failed
        """
        modal = self.modal
        if not modal.is_open:
            raise ValidationError("No product form is open")

        payload = modal.buffer.to_payload()

        if modal.mode == ModalMode.ADD:
            saved = await self.connector.create_product(payload)
            notice = "Product added successfully!"
        else:
            saved = await self.connector.update_product(modal.product_id, payload)
            notice = "Product updated successfully!"

        self.store.dispatch(ModalClosed())
        self.store.dispatch(NoticeShown(notice))
        await self.store.refresh()
        return saved

    async def delete(self, product_id: int, confirm: Callable[[], bool]) -> bool:
        """
        Delete a product after explicit confirmation

        Args:
            product_id: Product to delete
            confirm: Asked before anything is sent; False cancels

        Returns:
            True if the product was deleted, False if the user declined
        """
        if not confirm():
            logger.info(f"Delete of product {product_id} cancelled")
            return False

        await self.connector.delete_product(product_id)
        self.store.dispatch(NoticeShown("Product deleted successfully!"))
        await self.store.refresh()
        return True
