"""Display number generation for invoices and orders"""

import random
import time
from typing import Callable, Optional


class InvoiceNumberGenerator:
    """
    Generates human-readable document numbers

    Format: <PREFIX>-<last 8 digits of epoch millis>-<000-999>
    (e.g., INV-04567123-042). Numbers are labels only; collisions are
    possible and documents are keyed by their store id.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        rng: Optional[random.Random] = None,
    ):
        self.clock = clock
        self.rng = rng or random.Random()

    def generate(self, prefix: str = "INV") -> str:
        millis = str(int(self.clock() * 1000))[-8:].zfill(8)
        suffix = self.rng.randint(0, 999)
        return f"{prefix}-{millis}-{suffix:03d}"

    def order_number(self) -> str:
        return self.generate(prefix="ORD")
