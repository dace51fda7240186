"""
Product Domain Model

Represents a product entity in the catalog.
This is the single source of truth for product data structure.

Author: TM3
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from decimal import Decimal


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Products are shared between order items: many items may reference the
    same product. The name is the public grouping key for analytics, so it
    must be unique across the catalog.

    Fields:
        sku: Stock Keeping Unit
        name: Product name (unique, used as grouping key)
        description: Product description (optional)
        price: Unit price
    """

    sku: str = Field(..., description="Stock Keeping Unit")
    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")
    price: Decimal = Field(..., description="Unit price", ge=0)

    # Pydantic v2 configuration
    model_config = ConfigDict(frozen=True)
