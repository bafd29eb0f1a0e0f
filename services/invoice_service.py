# services/invoice_service.py
import random

# invoice_service.py is a service module (Service Layer)
# with the class name InvoiceService, responsible for the printable receipt
# shown by the GUI. The receipt number is random and never stored.

SEPARATOR = "---------------"
RECEIPT_NUMBER_LIMIT = 100000


class InvoiceService:
    def __init__(self, rng: random.Random | None = None):
        # pass a seeded Random in tests to get a predictable number
        self.rng = rng if rng is not None else random.Random()

    def new_receipt_number(self) -> int:
        return self.rng.randrange(RECEIPT_NUMBER_LIMIT)

    def render_receipt(self, cart, receipt_number: int | None = None) -> str:
        if receipt_number is None:
            receipt_number = self.new_receipt_number()

        lines = [
            SEPARATOR,
            f"Receipt No: {receipt_number}",
            SEPARATOR,
        ]
        for item in cart.items:
            lines.append(f"{item.name} - ${item.price:.2f}")
        lines += [
            SEPARATOR,
            f"Total: ${cart.calculate_total():.2f}",
            "Thank you for shopping!",
            SEPARATOR,
        ]
        return "\n".join(lines)
