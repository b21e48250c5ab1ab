from pydantic import BaseModel

class InventoryRead(BaseModel):
    price: float
    stock: int
