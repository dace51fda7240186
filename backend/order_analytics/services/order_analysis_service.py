"""
Order Analysis Service - Core business logic for order analytics

Computes distinct values, unit counts, revenue totals and groupings over a
fixed, in-memory collection of orders. Every query re-scans the collection
and returns a fresh value; nothing is cached or mutated.

Revenue per order item == quantity * price * (1 - discount), always summed
as exact Decimal.

Author: TM3
Date: 2026-10-19
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from order_analytics.core.exceptions import InvalidArgumentError
from order_analytics.core.money import ZERO, quantize_money, sum_money, to_decimal
from order_analytics.domain.order import Customer, Order, OrderItem
from order_analytics.services.grouping import distinct, nested_sum_by, sum_by

logger = logging.getLogger(__name__)


# ============================================================================
# Result Models
# ============================================================================

@dataclass(frozen=True)
class SummaryStatistics:
    """Count, total, min, max and average of a series of values"""
    count: int
    total: Any
    minimum: Optional[Any]
    maximum: Optional[Any]
    average: Decimal

    @classmethod
    def of(cls, values: Iterable[Any], zero: Any = 0) -> 'SummaryStatistics':
        """Compute statistics in a single pass (min/max are None when empty)"""
        count = 0
        total = zero
        minimum = None
        maximum = None
        for value in values:
            count += 1
            total += value
            if minimum is None or value < minimum:
                minimum = value
            if maximum is None or value > maximum:
                maximum = value
        average = to_decimal(total) / count if count else ZERO
        return cls(count=count, total=total, minimum=minimum, maximum=maximum, average=average)


# ============================================================================
# Order Analysis Service
# ============================================================================

class OrderAnalysisService:
    """
    Analytics over a fixed collection of orders

    The orders are copied into a tuple at construction. Entities are frozen
    models, so concurrent readers need no locking.

    Country groupings come in two flavours:
    - distinct_countries() looks at every address of an order
      (alt shipping, billing, shipping)
    - the *_by_country* reports use the customer's billing country only;
      orders without one are left out
    """

    def __init__(self, orders: Optional[Sequence[Order]]):
        if orders is None:
            raise InvalidArgumentError("orders must not be None")
        self._orders = tuple(orders)
        logger.debug("Initialized order analysis with %d orders", len(self._orders))

    @property
    def orders(self) -> List[Order]:
        """Snapshot of the analysed orders"""
        return list(self._orders)

    def _items(self) -> Iterator[OrderItem]:
        for order in self._orders:
            yield from order.items

    @staticmethod
    def _customer_name(order: Order) -> str:
        return order.customer.name

    @staticmethod
    def _billing_country(order: Order) -> Optional[str]:
        return order.customer.billing_country

    @staticmethod
    def _product_name(item: OrderItem) -> str:
        return item.product.name

    @staticmethod
    def _order_items(order: Order) -> Iterable[OrderItem]:
        return order.items

    @staticmethod
    def _quantity(item: OrderItem) -> int:
        return item.quantity

    @staticmethod
    def _revenue(item: OrderItem) -> Decimal:
        return item.revenue

    # =========================================================================
    # Distinct values and counts
    # =========================================================================

    def distinct_countries(self) -> List[str]:
        """
        Distinct country codes across all addresses of all orders

        Addresses are visited order by order in slot order (alt shipping,
        billing, shipping). Missing addresses and addresses without a
        country code are skipped.

        Returns:
            Country codes in first-occurrence order
        """
        return distinct(
            address.postal_country
            for order in self._orders
            for address in order.addresses
            if address.postal_country is not None
        )

    def distinct_customers(self) -> List[Customer]:
        """Distinct customers (by value) in first-occurrence order"""
        return distinct(order.customer for order in self._orders)

    def total_orders(self) -> int:
        """Number of orders in the collection"""
        return len(self._orders)

    def total_units_sold(self) -> int:
        """Sum of item quantities over all orders"""
        return sum(item.quantity for item in self._items())

    # =========================================================================
    # Units sold groupings
    # =========================================================================

    def total_units_sold_by_product(self) -> Dict[str, int]:
        """Units sold per product name"""
        return sum_by(self._items(), self._product_name, self._quantity)

    def total_units_sold_by_customer_by_product(self) -> Dict[str, Dict[str, int]]:
        """
        Units sold per customer name, then per product name

        Every customer with an order has an entry, empty if none of their
        orders carry items.
        """
        return nested_sum_by(
            self._orders, self._customer_name, self._order_items,
            self._product_name, self._quantity
        )

    def total_units_sold_by_country_by_product(self) -> Dict[str, Dict[str, int]]:
        """
        Units sold per billing country, then per product name

        Orders whose customer has no billing country are excluded.
        """
        return nested_sum_by(
            self._orders, self._billing_country, self._order_items,
            self._product_name, self._quantity
        )

    # =========================================================================
    # Revenue
    # =========================================================================

    def total_revenue(self) -> Decimal:
        """Exact revenue over all items of all orders"""
        return sum_money(item.revenue for item in self._items())

    def total_revenue_by_product(self) -> Dict[str, Decimal]:
        """Exact revenue per product name"""
        return sum_by(self._items(), self._product_name, self._revenue, ZERO)

    def total_revenue_by_customer(self) -> Dict[str, Decimal]:
        """Exact revenue per customer name (ZERO for customers without items)"""
        return {
            customer: sum_money(by_product.values())
            for customer, by_product in self.total_revenue_by_customer_by_product().items()
        }

    def total_revenue_by_customer_by_product(self) -> Dict[str, Dict[str, Decimal]]:
        """Exact revenue per customer name, then per product name"""
        return nested_sum_by(
            self._orders, self._customer_name, self._order_items,
            self._product_name, self._revenue, ZERO
        )

    def total_revenue_by_country(self) -> Dict[str, Decimal]:
        """Exact revenue per billing country"""
        return {
            country: sum_money(by_product.values())
            for country, by_product in self.total_revenue_by_country_by_product().items()
        }

    def total_revenue_by_country_by_product(self) -> Dict[str, Dict[str, Decimal]]:
        """Exact revenue per billing country, then per product name"""
        return nested_sum_by(
            self._orders, self._billing_country, self._order_items,
            self._product_name, self._revenue, ZERO
        )

    # =========================================================================
    # Statistics
    # =========================================================================

    def units_sold_statistics(self) -> SummaryStatistics:
        """Statistics over the quantity of every order item"""
        return SummaryStatistics.of(item.quantity for item in self._items())

    def revenue_statistics(self) -> SummaryStatistics:
        """Statistics over the revenue of every order item"""
        return SummaryStatistics.of((item.revenue for item in self._items()), zero=ZERO)

    # =========================================================================
    # Report
    # =========================================================================

    def to_report(self) -> Dict[str, Any]:
        """
        Build a JSON compatible report with every analytic

        Money is rounded for display with quantize_money and rendered as
        strings; the underlying totals are exact.
        """
        def money(amount: Decimal) -> str:
            return str(quantize_money(amount))

        def money_map(amounts: Dict[str, Decimal]) -> Dict[str, str]:
            return {key: money(amount) for key, amount in amounts.items()}

        def stats(summary: SummaryStatistics, is_money: bool) -> Dict[str, Any]:
            render = money if is_money else (lambda value: value)
            return {
                'count': summary.count,
                'total': render(summary.total),
                'minimum': render(summary.minimum) if summary.minimum is not None else None,
                'maximum': render(summary.maximum) if summary.maximum is not None else None,
                'average': money(summary.average),
            }

        return {
            'total_orders': self.total_orders(),
            'distinct_countries': self.distinct_countries(),
            'distinct_customers': [customer.name for customer in self.distinct_customers()],
            'total_units_sold': self.total_units_sold(),
            'total_units_sold_by_product': self.total_units_sold_by_product(),
            'total_units_sold_by_customer_by_product': self.total_units_sold_by_customer_by_product(),
            'total_units_sold_by_country_by_product': self.total_units_sold_by_country_by_product(),
            'total_revenue': money(self.total_revenue()),
            'total_revenue_by_product': money_map(self.total_revenue_by_product()),
            'total_revenue_by_customer': money_map(self.total_revenue_by_customer()),
            'total_revenue_by_customer_by_product': {
                customer: money_map(by_product)
                for customer, by_product in self.total_revenue_by_customer_by_product().items()
            },
            'total_revenue_by_country': money_map(self.total_revenue_by_country()),
            'total_revenue_by_country_by_product': {
                country: money_map(by_product)
                for country, by_product in self.total_revenue_by_country_by_product().items()
            },
            'units_sold_statistics': stats(self.units_sold_statistics(), is_money=False),
            'revenue_statistics': stats(self.revenue_statistics(), is_money=True),
        }
