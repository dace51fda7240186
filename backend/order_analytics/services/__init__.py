"""
Service Layer - Business logic

Author: TM3
Date: 2026-10-19
"""
from order_analytics.services.order_analysis_service import OrderAnalysisService, SummaryStatistics
from order_analytics.services.order_generator import generate_test_orders
from order_analytics.services.order_serializer import (
    dump_orders_json,
    load_orders_json,
    read_orders_file,
    write_orders_file,
)

__all__ = [
    'OrderAnalysisService',
    'SummaryStatistics',
    'generate_test_orders',
    'dump_orders_json',
    'load_orders_json',
    'read_orders_file',
    'write_orders_file',
]
