"""Tests for the Product and Cart models."""

import pytest

from models.cart import Cart
from models.product import Product


def names_and_prices(cart):
    return [(p.name, p.price) for p in cart.items]


class TestProduct:
    """Tests for the Product record."""

    def test_accepts_any_name_and_price(self):
        """No validation: empty name and negative price are kept as given."""
        product = Product("", -3.0)

        assert product.name == ""
        assert product.price == -3.0

    def test_fields_mutate_in_place(self):
        """Setting name and price changes the same object."""
        product = Product("Milk", 1.0)
        product.name = "Oat milk"
        product.price = 2.25

        assert (product.name, product.price) == ("Oat milk", 2.25)

    def test_dict_conversion(self):
        """to_dict/from_dict carry name and price."""
        product = Product("Tea", 4.2)

        assert product.to_dict() == {"name": "Tea", "price": 4.2}
        assert Product.from_dict({"name": "Tea", "price": 4}) == Product("Tea", 4.0)


class TestCartMutations:
    """Tests for add/remove/edit by index."""

    def test_new_cart_is_empty(self):
        cart = Cart()

        assert cart.items == ()
        assert len(cart) == 0

    def test_add_appends_in_order_and_keeps_duplicates(self, sample_cart):
        """Items keep insertion order; the same name may appear twice."""
        assert names_and_prices(sample_cart) == [
            ("Apple", 1.50),
            ("Bread", 2.00),
            ("Apple", 0.99),
        ]

    def test_remove_shifts_later_items_down(self, sample_cart):
        before = names_and_prices(sample_cart)

        sample_cart.remove_item(1)

        assert len(sample_cart) == len(before) - 1
        assert names_and_prices(sample_cart) == before[:1] + before[2:]

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_remove_each_position(self, sample_cart, index):
        before = names_and_prices(sample_cart)

        sample_cart.remove_item(index)

        assert names_and_prices(sample_cart) == before[:index] + before[index + 1:]

    def test_edit_changes_only_target(self, sample_cart):
        before = names_and_prices(sample_cart)

        sample_cart.edit_item(2, "Pear", 0.75)

        after = names_and_prices(sample_cart)
        assert after[2] == ("Pear", 0.75)
        assert after[:2] == before[:2]
        assert len(after) == len(before)

    def test_edit_keeps_product_identity(self, sample_cart):
        """Edit overwrites the existing Product rather than replacing it."""
        product = sample_cart.items[0]

        sample_cart.edit_item(0, "Green apple", 1.8)

        assert sample_cart.items[0] is product
        assert product.name == "Green apple"

    @pytest.mark.parametrize("index", [3, 10, -4])
    def test_out_of_range_index_raises(self, sample_cart, index):
        """A bad index is the caller's mistake and surfaces as IndexError."""
        with pytest.raises(IndexError):
            sample_cart.remove_item(index)
        with pytest.raises(IndexError):
            sample_cart.edit_item(index, "X", 1.0)

        assert len(sample_cart) == 3

    def test_remove_from_empty_cart_raises(self):
        with pytest.raises(IndexError):
            Cart().remove_item(0)


class TestCartItemsView:
    """items must not let callers bypass the mutation methods."""

    def test_items_is_a_tuple_snapshot(self, sample_cart):
        snapshot = sample_cart.items
        sample_cart.add_item(Product("Jam", 3.0))

        assert isinstance(snapshot, tuple)
        assert len(snapshot) == 3
        assert len(sample_cart.items) == 4

    def test_items_cannot_be_appended_to(self, sample_cart):
        with pytest.raises(AttributeError):
            sample_cart.items.append(Product("Jam", 3.0))

    def test_iteration_matches_items(self, sample_cart):
        assert list(sample_cart) == list(sample_cart.items)


class TestCartTotal:
    """Tests for calculate_total."""

    def test_empty_cart_total_is_zero(self):
        assert Cart().calculate_total() == 0.0

    @pytest.mark.parametrize("prices", [
        [1.0],
        [0.1, 0.2, 0.3],
        [19.99, 5.01, -2.5, 0.0],
        [1e6, 0.01],
    ])
    def test_total_is_sum_of_prices(self, prices):
        cart = Cart()
        for i, price in enumerate(prices):
            cart.add_item(Product(f"item{i}", price))

        assert cart.calculate_total() == pytest.approx(sum(prices))

    def test_scenario(self):
        """Add, edit and remove walk the total through the expected values."""
        cart = Cart()
        cart.add_item(Product("Apple", 1.50))
        cart.add_item(Product("Bread", 2.00))
        assert cart.calculate_total() == pytest.approx(3.50)

        cart.edit_item(0, "Apple", 1.75)
        assert cart.calculate_total() == pytest.approx(3.75)

        cart.remove_item(1)
        assert names_and_prices(cart) == [("Apple", 1.75)]
        assert cart.calculate_total() == pytest.approx(1.75)


class TestRenderInvoice:
    """Tests for the plain invoice text."""

    def test_invoice_lists_items_and_total(self, sample_cart):
        assert sample_cart.render_invoice() == "\n".join([
            "Invoice:",
            "Apple - $1.50",
            "Bread - $2.00",
            "Apple - $0.99",
            "Total: $4.49",
        ])

    def test_empty_invoice(self):
        assert Cart().render_invoice() == "Invoice:\nTotal: $0.00"

    def test_invoice_does_not_change_cart(self, sample_cart):
        before = names_and_prices(sample_cart)

        sample_cart.render_invoice()

        assert names_and_prices(sample_cart) == before
