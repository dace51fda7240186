"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities.
All entities are immutable value objects.

Author: TM3
Date: 2026-10-19
"""
from order_analytics.domain.product import Product
from order_analytics.domain.order import Address, Customer, Order, OrderItem

__all__ = ['Product', 'Address', 'Customer', 'Order', 'OrderItem']
