# models/cart.py
import logging
from pathlib import Path

from data.repository import CartRepository
from models.product import Product

logger = logging.getLogger("shopping_cart.cart")

# Cart model: an ordered list of products.
# Position in the list is both the display order and the index used by
# edit/remove. Callers must pass a valid index; a bad one raises IndexError.
class Cart:
    def __init__(self, items: list[Product] | None = None):
        self._items: list[Product] = list(items) if items else []

    @property
    def items(self) -> tuple[Product, ...]:
        # read-only view; mutate through add_item/remove_item/edit_item
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Cart({self._items!r})"

    def add_item(self, product: Product) -> None:
        self._items.append(product)

    def remove_item(self, index: int) -> None:
        del self._items[index]

    def edit_item(self, index: int, new_name: str, new_price: float) -> None:
        product = self._items[index]
        product.name = new_name
        product.price = new_price

    def calculate_total(self) -> float:
        return sum((p.price for p in self._items), 0.0)

    def render_invoice(self) -> str:
        lines = ["Invoice:"]
        for p in self._items:
            lines.append(f"{p.name} - ${p.price:.2f}")
        lines.append(f"Total: ${self.calculate_total():.2f}")
        return "\n".join(lines)

    # Persistence

    def save_to_file(self, path: str | Path) -> bool:
        # Returns False instead of raising when the file cannot be written.
        # ValueError covers names that cannot be encoded (lone surrogates).
        try:
            CartRepository(path).save_items([p.to_dict() for p in self._items])
        except (OSError, ValueError):
            logger.exception(f"could not save cart to {path}")
            return False
        return True

    @classmethod
    def load_from_file(cls, path: str | Path) -> "Cart | None":
        # None means "nothing usable on disk"; the caller decides what to do.
        items = CartRepository(path).load_items()
        if items is None:
            return None
        return cls([Product.from_dict(d) for d in items])

    @classmethod
    def load_or_empty(cls, path: str | Path) -> "Cart":
        cart = cls.load_from_file(path)
        if cart is None:
            cart = cls()
        return cart
