# models/product.py
from dataclasses import dataclass, asdict
# Product model: one line of the shopping cart.
# Fields are plain attributes, edit mutates them in place.
@dataclass
class Product:
    name: str
    price: float

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls(name=data["name"], price=float(data["price"]))
