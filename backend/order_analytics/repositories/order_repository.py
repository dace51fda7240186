"""
Order Repository - Read-only access to a fixed collection of orders

Keeps the same shape as a database backed repository, so analytics code
can later switch to real storage without changes.

Author: TM3
Date: 2026-10-19
"""
import logging
from typing import Iterable, List, Optional

from order_analytics.core.exceptions import InvalidArgumentError
from order_analytics.domain.order import Order

logger = logging.getLogger(__name__)


class OrderRepository:
    """
    In-memory repository for Order data access

    The backing collection is copied at construction and never changes.
    """

    def __init__(self, orders: Optional[Iterable[Order]]):
        if orders is None:
            raise InvalidArgumentError("orders must not be None")
        self._orders = tuple(orders)
        logger.debug("Order repository holds %d orders", len(self._orders))

    def find_all(self) -> List[Order]:
        """
        Fetch all orders

        Returns:
            A new list with every order, in insertion order
        """
        return list(self._orders)

    def count(self) -> int:
        """Number of orders in the repository"""
        return len(self._orders)
