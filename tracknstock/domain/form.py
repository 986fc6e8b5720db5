"""
Product Form Buffer

Transient edit state backing the add/edit product form. Every field is
kept as text, the way it was typed; numbers are only parsed on submit.

Author: TM3
Date: 2025-10-20
"""
import math
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import List

from pydantic import ValidationError as PydanticValidationError

from tracknstock.core.exceptions import ValidationError
from tracknstock.domain.catalog import is_known_category, is_brand_in_category
from tracknstock.domain.product import Product, ProductCreate


# Field name -> label shown to the user
FIELD_LABELS = {
    'name': 'Product Name',
    'category': 'Category',
    'quantity': 'Quantity',
    'min_stock': 'Min Stock',
    'price': 'Price',
    'supplier': 'Brand',
}


@dataclass(frozen=True)
class FormBuffer:
    """Editable product fields as strings"""
    name: str = ""
    category: str = ""
    quantity: str = ""
    min_stock: str = ""
    price: str = ""
    supplier: str = ""

    @classmethod
    def empty(cls, category: str = "") -> "FormBuffer":
        return cls(category=category)

    @classmethod
    def from_product(cls, product: Product) -> "FormBuffer":
        return cls(
            name=product.name,
            category=product.category,
            quantity=str(product.quantity),
            min_stock=str(product.min_stock),
            price=str(product.price),
            supplier=product.supplier,
        )

    def with_field(self, name: str, value: str) -> "FormBuffer":
        """Return a copy with one field changed"""
        if name not in FIELD_LABELS:
            raise ValueError(f"Unknown form field: {name}")
        updated = replace(self, **{name: value})
        # Changing category drops a brand that is not sold under it
        if (name == 'category' and updated.supplier and is_known_category(value)
                and not is_brand_in_category(updated.supplier, value)):
            updated = replace(updated, supplier="")
        return updated

    def missing_fields(self) -> List[str]:
        """Names of required fields left blank"""
        return [name for name in FIELD_LABELS if not getattr(self, name).strip()]

    def to_payload(self) -> ProductCreate:
        """
        Validate the buffer and build the request body

        Raises:
            ValidationError: a required field is blank, a number does not
                parse, or the brand is not sold under the chosen category
        """
        missing = self.missing_fields()
        if missing:
            labels = ", ".join(FIELD_LABELS[name] for name in missing)
            raise ValidationError(f"Please fill in all fields (missing: {labels})", missing)

        quantity = _parse_int(self.quantity, 'quantity')
        min_stock = _parse_int(self.min_stock, 'min_stock')
        try:
            price = Decimal(self.price.strip())
        except InvalidOperation:
            raise ValidationError("Price must be a number")
        # Must also survive the float conversion used for the JSON body
        if not price.is_finite() or not math.isfinite(float(price)):
            raise ValidationError("Price must be a number")

        category = self.category.strip()
        supplier = self.supplier.strip()
        if is_known_category(category) and not is_brand_in_category(supplier, category):
            raise ValidationError(f"Brand '{supplier}' is not available for category '{category}'")

        try:
            return ProductCreate(
                name=self.name.strip(),
                category=category,
                supplier=supplier,
                quantity=quantity,
                min_stock=min_stock,
                price=price,
            )
        except PydanticValidationError as e:
            # Negative numbers end up here
            bad = sorted({str(err['loc'][0]) for err in e.errors() if err.get('loc')})
            raise ValidationError(f"Invalid value for: {', '.join(bad)}")


def _parse_int(value: str, name: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise ValidationError(f"{FIELD_LABELS[name]} must be a whole number")
