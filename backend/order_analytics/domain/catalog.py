"""
Sample Product Catalog
Fixed catalog of products and customers used to synthesize test orders

Everything here is derived deterministically from names, so the same
catalog is produced on every run.

Author: TM3
Date: 2026-10-19
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List

from order_analytics.domain.order import Address, Customer
from order_analytics.domain.product import Product

SKU_LENGTH = 12


# ================================================================================
# SAMPLE PRODUCTS
# ================================================================================
# Product names must be unique: analytics group by name
# ================================================================================

TEST_PRODUCT_NAMES: List[str] = [
    "Orbital Keys",
    "XPress Bottle",
    "InstaPress",
    "Uno Wear",
    "Allure Kit",
    "Swish Wallet",
    "Onovo Supply",
    "Towlee",
    "Rhino Case",
    "Mono",
    "Handy Mop",
    "ONEset",
    "Vortex Bottle",
    "Terra Shsave",
    "Gymr Kit",
    "Stickem",
    "Snap It",
    "Scruncho",
]


# ================================================================================
# SAMPLE CUSTOMERS (headquarters addresses)
# ================================================================================

TEST_CUSTOMER_ADDRESSES: Dict[str, Address] = {
    # VMware HQ
    "VMware": Address(
        postal_country="US",
        address_lines=("3401 Hillview Ave.",),
        administrative_area="CA",
        locality="Palo Alto",
        postal_code="94304"
    ),
    # Google HQ
    "Google": Address(
        postal_country="US",
        address_lines=("1600 Amphitheatre Parkway",),
        administrative_area="CA",
        locality="Mountain View",
        postal_code="94043"
    ),
    # Tata HQ
    "Tata": Address(
        postal_country="IN",
        address_lines=("21, D Sukhadwala Rd", "Azad Maidan"),
        administrative_area="Maharashtra",
        locality="Mumbai",
        dependent_locality="Fort",
        postal_code="400001"
    ),
    # Baidu HQ
    "Baidu": Address(
        postal_country="CN",
        address_lines=("10 Shangdi 10th Street",),
        administrative_area="Beijing",
        locality="Haidian District",
        postal_code="100085"
    ),
}


def name_to_sku(name: str) -> str:
    """Whitespace removed, upper-cased, padded with '0' or truncated to 12 chars"""
    compact = "".join(name.split()).upper()
    return compact.ljust(SKU_LENGTH, "0")[:SKU_LENGTH]


def name_to_description(name: str) -> str:
    """Generic description for a product name"""
    return f"Product description for '{name}'"


def name_to_price(name: str) -> Decimal:
    """
    Price derived from the product name

    Sum of the name's UTF-8 byte values divided by 100, so prices vary
    between products but stay stable for each product.
    """
    cents = sum(name.encode("utf-8"))
    return (Decimal(cents) / 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def build_products() -> List[Product]:
    """Build the sample products in catalog order"""
    return [
        Product(
            sku=name_to_sku(name),
            name=name,
            description=name_to_description(name),
            price=name_to_price(name)
        )
        for name in TEST_PRODUCT_NAMES
    ]


def build_customers() -> List[Customer]:
    """Build the sample customers, billing and shipping to their HQ address"""
    return [
        Customer(name=name, billing_address=address, shipping_address=address)
        for name, address in TEST_CUSTOMER_ADDRESSES.items()
    ]
