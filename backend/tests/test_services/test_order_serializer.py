"""
Unit tests for JSON serialization of orders

Author: TM3
Date: 2026-10-19
"""
import json
import pytest
from collections import Counter
from decimal import Decimal
from pydantic import ValidationError

from order_analytics.domain.order import Customer, Order
from order_analytics.services.order_serializer import (
    dump_orders_json,
    load_orders_json,
    read_orders_file,
    write_orders_file,
)

TEST_ORDERS_JSON_FILE_NAME = "test_orders.json"


class TestStringSerialization:
    """Test round trips through JSON strings"""

    def test_sample_orders_round_trip(self, sample_orders):
        """Test generated orders survive a round trip (order-insensitive)"""
        restored = load_orders_json(dump_orders_json(sample_orders))

        assert Counter(restored) == Counter(sample_orders)

    def test_decimals_are_written_as_strings(self, two_by_two_orders):
        """Test prices and discounts are not converted to floats"""
        payload = json.loads(dump_orders_json(two_by_two_orders))

        item = payload[1]['items'][0]
        assert item['discount'] == "0.10"
        assert item['product']['price'] == "10.00"

    def test_round_trip_keeps_decimal_scale(self, two_by_two_orders):
        """Test a restored discount keeps its exact value and scale"""
        restored = load_orders_json(dump_orders_json(two_by_two_orders))

        discount = restored[1].items[0].discount
        assert discount == Decimal("0.10")
        assert str(discount) == "0.10"

    def test_optional_fields_round_trip(self, customer_a, in_address):
        """Test missing addresses and empty item lists survive a round trip"""
        orders = [
            Order(customer=customer_a, alt_shipping_address=in_address),
            Order(customer=Customer(name="Nomad")),
        ]

        assert load_orders_json(dump_orders_json(orders)) == orders

    def test_empty_list(self):
        """Test an empty collection serializes to an empty array"""
        assert dump_orders_json([]) == "[]"
        assert load_orders_json("[]") == []

    def test_invalid_payload_raises(self):
        """Test payloads breaking model rules are rejected"""
        payload = '[{"customer": {"name": "A"}, "items": [{"product": {"sku": "X", "name": "X", "price": "1"}, "quantity": -3}]}]'

        with pytest.raises(ValidationError):
            load_orders_json(payload)


class TestFileSerialization:
    """Test round trips through files"""

    def test_file_round_trip(self, tmp_path, sample_orders):
        """Test orders written to a file read back equal"""
        path = write_orders_file(sample_orders, tmp_path / TEST_ORDERS_JSON_FILE_NAME)

        restored = read_orders_file(path)

        assert path.exists()
        assert Counter(restored) == Counter(sample_orders)

    def test_file_accepts_string_path(self, tmp_path, known_orders):
        """Test plain string paths are accepted"""
        path = str(tmp_path / TEST_ORDERS_JSON_FILE_NAME)

        write_orders_file(known_orders, path)

        assert read_orders_file(path) == known_orders

    def test_missing_file_raises(self, tmp_path):
        """Test reading a missing file raises OSError"""
        with pytest.raises(OSError):
            read_orders_file(tmp_path / "missing.json")
