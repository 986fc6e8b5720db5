"""
Domain Layer - Business Entities

Pydantic models for the data exchanged with the inventory API, plus the
static catalog taxonomy and the product form buffer.

Author: TM3
Date: 2025-10-17
"""
from tracknstock.domain.product import Product, ProductCreate, ProductUpdate, StockStatus, stock_status
from tracknstock.domain.statistics import Statistics
from tracknstock.domain.form import FormBuffer

__all__ = ['Product', 'ProductCreate', 'ProductUpdate', 'StockStatus', 'stock_status', 'Statistics', 'FormBuffer']
