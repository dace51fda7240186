"""
Order Analytics - aggregate reports over a fixed collection of sales orders
"""
from order_analytics.domain import Address, Customer, Order, OrderItem, Product
from order_analytics.repositories import OrderRepository
from order_analytics.services import OrderAnalysisService

__version__ = "1.0.0"

__all__ = [
    'Address',
    'Customer',
    'Order',
    'OrderItem',
    'Product',
    'OrderRepository',
    'OrderAnalysisService',
]
