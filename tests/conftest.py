"""Shared fixtures for the shopping cart tests."""

import pytest

from models.cart import Cart
from models.product import Product


@pytest.fixture
def cart_file(tmp_path):
    """Path for a cart snapshot inside the test's temp directory."""
    return tmp_path / "storage" / "shopping_cart.json"


@pytest.fixture
def sample_cart():
    """Cart with three products, one of them a duplicate name."""
    cart = Cart()
    cart.add_item(Product("Apple", 1.50))
    cart.add_item(Product("Bread", 2.00))
    cart.add_item(Product("Apple", 0.99))
    return cart
