"""
Pytest fixtures and configuration for Order Analytics tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2026-10-19
"""
import pytest
from decimal import Decimal

from order_analytics.domain.order import Address, Customer, Order, OrderItem
from order_analytics.domain.product import Product
from order_analytics.services.order_generator import generate_test_orders


@pytest.fixture
def us_address():
    """US billing address"""
    return Address(
        postal_country="US",
        address_lines=("3401 Hillview Ave.",),
        administrative_area="CA",
        locality="Palo Alto",
        postal_code="94304"
    )


@pytest.fixture
def in_address():
    """Indian billing address"""
    return Address(
        postal_country="IN",
        address_lines=("21, D Sukhadwala Rd", "Azad Maidan"),
        administrative_area="Maharashtra",
        locality="Mumbai",
        dependent_locality="Fort",
        postal_code="400001"
    )


@pytest.fixture
def product_x():
    """Product X at 10.00"""
    return Product(sku="X00000000000", name="X", description="Product X", price=Decimal("10.00"))


@pytest.fixture
def product_y():
    """Product Y at 2.50"""
    return Product(sku="Y00000000000", name="Y", description="Product Y", price=Decimal("2.50"))


@pytest.fixture
def customer_a(us_address):
    """Customer A billing and shipping in the US"""
    return Customer(name="A", billing_address=us_address, shipping_address=us_address)


@pytest.fixture
def customer_b(in_address):
    """Customer B billing and shipping in India"""
    return Customer(name="B", billing_address=in_address, shipping_address=in_address)


@pytest.fixture
def known_orders(customer_a, customer_b, product_x):
    """
    Hand-computed example

    A buys 3 x X at 10.00 with no discount -> 30.00
    B buys 2 x X at 10.00 with 10% discount -> 18.00
    """
    return [
        Order(customer=customer_a, items=[OrderItem(product=product_x, quantity=3, discount=Decimal("0"))]),
        Order(customer=customer_b, items=[OrderItem(product=product_x, quantity=2, discount=Decimal("0.10"))]),
    ]


@pytest.fixture
def two_by_two_orders(customer_a, customer_b, product_x, product_y):
    """
    2 customers x 2 products, A ordering twice

    A: 3 x X (0%) = 30.00, 4 x Y (0%) = 10.00, then 1 x Y (20%) = 2.00
    B: 2 x X (10%) = 18.00, 10 x Y (5%) = 23.75
    """
    return [
        Order(customer=customer_a, items=[
            OrderItem(product=product_x, quantity=3),
            OrderItem(product=product_y, quantity=4),
        ]),
        Order(customer=customer_b, items=[
            OrderItem(product=product_x, quantity=2, discount=Decimal("0.10")),
            OrderItem(product=product_y, quantity=10, discount=Decimal("0.05")),
        ]),
        Order(customer=customer_a, items=[
            OrderItem(product=product_y, quantity=1, discount=Decimal("0.20")),
        ]),
    ]


@pytest.fixture
def sample_orders():
    """Freshly generated sample orders from the sample catalog"""
    return generate_test_orders(use_cached=False)
