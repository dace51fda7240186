"""
Order Serializer - JSON round trip for order collections

Decimals are written as JSON strings, so prices and discounts survive a
round trip unchanged. Invalid payloads raise pydantic.ValidationError.

Author: TM3
Date: 2026-10-19
"""
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import TypeAdapter

from order_analytics.domain.order import Order

logger = logging.getLogger(__name__)

_orders_adapter = TypeAdapter(List[Order])


def dump_orders_json(orders: Iterable[Order], indent: Optional[int] = None) -> str:
    """Serialize orders to a JSON array"""
    return _orders_adapter.dump_json(list(orders), indent=indent).decode('utf-8')


def load_orders_json(data: Union[str, bytes]) -> List[Order]:
    """Parse a JSON array of orders"""
    return _orders_adapter.validate_json(data)


def write_orders_file(orders: Iterable[Order], path: Union[str, Path], indent: Optional[int] = 2) -> Path:
    """
    Write orders to a JSON file

    Args:
        orders: Orders to write
        path: Destination file (parent directories must exist)
        indent: JSON indentation, None for compact output

    Returns:
        The path written
    """
    path = Path(path)
    orders = list(orders)
    path.write_text(dump_orders_json(orders, indent=indent), encoding='utf-8')
    logger.info("Wrote %d orders to %s", len(orders), path)
    return path


def read_orders_file(path: Union[str, Path]) -> List[Order]:
    """Read orders from a JSON file written by write_orders_file"""
    path = Path(path)
    orders = load_orders_json(path.read_bytes())
    logger.info("Loaded %d orders from %s", len(orders), path)
    return orders
