#!/usr/bin/env python3
"""
Order Analytics Report

Loads orders (from a JSON file or the built-in sample generator), runs every
analytic of OrderAnalysisService and prints the report as JSON.

Usage:
    cd backend
    python -m scripts.analysis.order_report
    python -m scripts.analysis.order_report --input orders.json
    python -m scripts.analysis.order_report --export sample_orders.json

Environment:
    LOG_LEVEL, MONEY_DECIMAL_PLACES, ORDERS_FILE (see order_analytics.core.config)

Author: TM3
Date: 2026-10-19
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from order_analytics.core.config import settings
from order_analytics.domain.order import Order
from order_analytics.repositories.order_repository import OrderRepository
from order_analytics.services.order_analysis_service import OrderAnalysisService
from order_analytics.services.order_generator import generate_test_orders
from order_analytics.services.order_serializer import read_orders_file, write_orders_file

logger = logging.getLogger(__name__)


def load_orders(input_path: Optional[str]) -> List[Order]:
    """Read orders from input_path, or generate the sample orders"""
    if input_path:
        return read_orders_file(input_path)
    logger.info("No input file given, using generated sample orders")
    return generate_test_orders()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description='Print aggregate analytics for a collection of orders'
    )
    parser.add_argument(
        '--input', '-i',
        type=str,
        default=settings.ORDERS_FILE,
        help='JSON file with orders (default: ORDERS_FILE or generated sample data)'
    )
    parser.add_argument(
        '--export', '-e',
        type=str,
        help='Also write the loaded orders to this JSON file'
    )
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help='Indentation of the printed report'
    )
    parser.add_argument(
        '--list-orders',
        action='store_true',
        help='Include every order with its computed totals in the output'
    )

    args = parser.parse_args(argv)

    try:
        orders = load_orders(args.input)
        if args.export:
            write_orders_file(orders, args.export)
    except (OSError, ValidationError) as e:
        logger.error("Could not load orders: %s", e)
        return 1

    repository = OrderRepository(orders)
    service = OrderAnalysisService(repository.find_all())
    logger.info("Analysing %d orders", repository.count())

    report = service.to_report()
    if args.list_orders:
        report['orders'] = [order.to_dict() for order in repository.find_all()]

    print(json.dumps(report, indent=args.indent))
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(main())
