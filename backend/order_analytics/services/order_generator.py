"""
Order Generator - Deterministic sample orders for tests and demos

Builds one order per sample customer. Which products a customer buys, and
in what quantity and discount, is derived from a CRC-32 hash of the
customer and product names, so every run yields value-equal orders.

Author: TM3
Date: 2026-10-19
"""
import logging
import zlib
from decimal import Decimal
from typing import List, Optional

from order_analytics.domain.catalog import build_customers, build_products
from order_analytics.domain.order import Customer, Order, OrderItem
from order_analytics.domain.product import Product

logger = logging.getLogger(__name__)

DISCOUNTS: List[Decimal] = [
    Decimal('0.00'),
    Decimal('0.01'),
    Decimal('0.02'),
    Decimal('0.05'),
    Decimal('0.10'),
]
MAX_QUANTITY = 100

_cached_orders: Optional[List[Order]] = None


def _stable_hash(*parts: str) -> int:
    """Hash that does not change between interpreter runs (unlike hash())"""
    return zlib.crc32("|".join(parts).encode("utf-8"))


def generate_order_items(customer: Customer, products: List[Product]) -> List[OrderItem]:
    """
    Generate the order items for one customer

    Roughly half of the products are picked per customer. Items that would
    have a zero quantity are dropped.
    """
    items: List[OrderItem] = []
    for product in products:
        if (_stable_hash(customer.name) + _stable_hash(product.name)) % 2 == 0:
            continue
        seed = _stable_hash(customer.name, product.name)
        quantity = seed % MAX_QUANTITY
        if quantity == 0:
            continue
        items.append(OrderItem(
            product=product,
            quantity=quantity,
            discount=DISCOUNTS[seed % len(DISCOUNTS)]
        ))
    return items


def generate_test_orders(use_cached: bool = True) -> List[Order]:
    """
    Generate sample orders from the sample catalog

    Args:
        use_cached: Reuse orders from a previous call when available

    Returns:
        A new list holding one order per sample customer
    """
    global _cached_orders

    if use_cached and _cached_orders is not None:
        return list(_cached_orders)

    products = build_products()
    orders = [
        Order(customer=customer, items=generate_order_items(customer, products))
        for customer in build_customers()
    ]
    logger.debug(
        "Generated %d sample orders with %d items",
        len(orders), sum(order.item_count for order in orders)
    )

    _cached_orders = orders
    return list(orders)
