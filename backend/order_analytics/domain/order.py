"""
Order Domain Models

Represents order-related entities: addresses, customers, order items and
orders. All models are frozen, so they compare and hash by value and can
be shared safely between readers.

Author: TM3
Date: 2026-10-19
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Tuple
from decimal import Decimal

from order_analytics.core.money import ZERO, line_revenue, sum_money
from order_analytics.domain.product import Product


class Address(BaseModel):
    """
    Address value object, loosely modelled on Google's libaddressinput AddressData

    Fields:
        postal_country: Country code (e.g. "US"), may be absent
        address_lines: Street address lines, in order
        administrative_area: State / province / region
        locality: City or town
        dependent_locality: Neighbourhood, district or suburb
        postal_code: Postal / ZIP code
        primary_phone_number: Contact phone
    """

    postal_country: Optional[str] = Field(None, description="Country code")
    address_lines: Tuple[str, ...] = Field(default_factory=tuple, description="Street address lines")
    administrative_area: Optional[str] = Field(None, description="State or region")
    locality: Optional[str] = Field(None, description="City")
    dependent_locality: Optional[str] = Field(None, description="District or sub-locality")
    postal_code: Optional[str] = Field(None, description="Postal code")
    primary_phone_number: Optional[str] = Field(None, description="Phone number")

    model_config = ConfigDict(frozen=True)


class Customer(BaseModel):
    """
    Customer domain model

    The customer name is the grouping key for per-customer reports and
    must be unique.
    """

    name: str = Field(..., description="Customer name")
    billing_address: Optional[Address] = Field(None, description="Billing address")
    shipping_address: Optional[Address] = Field(None, description="Default shipping address")

    model_config = ConfigDict(frozen=True)

    @property
    def billing_country(self) -> Optional[str]:
        """Country code of the billing address, None when unknown"""
        if self.billing_address is None:
            return None
        return self.billing_address.postal_country


class OrderItem(BaseModel):
    """
    Order Item domain model - represents a line item in an order

    Fields:
        product: Product being sold (shared reference)
        quantity: Number of units ordered
        discount: Discount fraction between 0 and 1
    """

    product: Product = Field(..., description="Product ordered")
    quantity: int = Field(..., description="Quantity ordered", ge=0)
    discount: Decimal = Field(ZERO, description="Discount fraction", ge=0, le=1)

    model_config = ConfigDict(frozen=True)

    @property
    def revenue(self) -> Decimal:
        """Line revenue: quantity * price * (1 - discount)"""
        return line_revenue(self.quantity, self.product.price, self.discount)


class Order(BaseModel):
    """
    Order domain model - represents a customer order

    Fields:
        customer: Customer placing the order (shared reference)
        alt_shipping_address: Optional address overriding the customer's shipping address
        items: Order lines, possibly empty
    """

    customer: Customer = Field(..., description="Customer")
    alt_shipping_address: Optional[Address] = Field(None, description="Alternate shipping address")
    items: Tuple[OrderItem, ...] = Field(default_factory=tuple, description="Order items")

    model_config = ConfigDict(frozen=True)

    # Computed properties
    @property
    def addresses(self) -> List[Address]:
        """Present addresses in slot order: alt shipping, billing, shipping"""
        slots = (
            self.alt_shipping_address,
            self.customer.billing_address,
            self.customer.shipping_address,
        )
        return [address for address in slots if address is not None]

    @property
    def item_count(self) -> int:
        """Number of lines in order"""
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        """Total quantity of all items"""
        return sum(item.quantity for item in self.items)

    @property
    def revenue(self) -> Decimal:
        """Exact revenue of all items"""
        return sum_money(item.revenue for item in self.items)

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Decimals are rendered as strings so no precision is lost.
        """
        data = self.model_dump(mode='json')

        # Add computed properties
        data['item_count'] = self.item_count
        data['total_quantity'] = self.total_quantity
        data['revenue'] = str(self.revenue)

        return data
