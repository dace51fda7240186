"""
Repository Layer - Data Access

Repositories hand domain models to the service layer.

Author: TM3
Date: 2026-10-19
"""
from order_analytics.repositories.order_repository import OrderRepository

__all__ = ['OrderRepository']
