import random
from typing import Optional
from .schemas import InventoryRead

class MockInventoryService:
    """Generates a random price and stock level for any product id"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get(self, product_id: int) -> InventoryRead:
        return InventoryRead(
            price=round(self.rng.random() * 1000 + 10, 2),
            stock=self.rng.randint(0, 99),
        )
