# utils/parsing.py
import math

# Input parsing for the GUI. The cart itself never sees raw text.


def parse_name(text: str) -> str:
    name = text.strip()
    if not name:
        raise ValueError("Name is required.")
    return name


def parse_price(text: str) -> float:
    """
    "2.50" -> 2.5

    Zero and negative prices are allowed. Anything float() rejects,
    and also nan/inf, raises ValueError with a message fit for a dialog.
    """
    try:
        price = float(text.strip())
    except ValueError:
        raise ValueError("Price must be a number.") from None
    if not math.isfinite(price):
        raise ValueError("Price must be a number.")
    return price
