"""
Grouping helpers - small group-and-reduce building blocks

All helpers return plain dicts/lists built fresh on every call. Key order is
first-occurrence order of the input.

Author: TM3
Date: 2026-10-19
"""
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, TypeVar

T = TypeVar('T')
M = TypeVar('M')
K = TypeVar('K', bound=Hashable)
J = TypeVar('J', bound=Hashable)


def distinct(values: Iterable[K]) -> List[K]:
    """Remove duplicates by value, keeping the first occurrence"""
    return list(dict.fromkeys(values))


def sum_by(
    records: Iterable[T],
    key: Callable[[T], Optional[K]],
    value: Callable[[T], Any],
    start: Any = 0
) -> Dict[K, Any]:
    """
    Group records by key and sum a value per group

    Records whose key is None are skipped.

    Example:
        sum_by(items, lambda i: i.product.name, lambda i: i.quantity)
        -> {'Mono': 12, 'Towlee': 3}
    """
    totals: Dict[K, Any] = {}
    for record in records:
        group = key(record)
        if group is None:
            continue
        totals[group] = totals.get(group, start) + value(record)
    return totals


def nested_sum_by(
    records: Iterable[T],
    outer_key: Callable[[T], Optional[K]],
    members: Callable[[T], Iterable[M]],
    inner_key: Callable[[M], J],
    value: Callable[[M], Any],
    start: Any = 0
) -> Dict[K, Dict[J, Any]]:
    """
    Two-level group-and-sum

    Records are grouped by outer_key; the members of each record (e.g. the
    items of an order) are summed per inner_key within that group.

    A record registers its outer key even if it has no members, so every
    group that owns a record shows up (with an empty inner dict if needed).
    Records whose outer key is None are skipped entirely.
    """
    totals: Dict[K, Dict[J, Any]] = {}
    for record in records:
        group = outer_key(record)
        if group is None:
            continue
        bucket = totals.setdefault(group, {})
        for member in members(record):
            inner = inner_key(member)
            bucket[inner] = bucket.get(inner, start) + value(member)
    return totals
