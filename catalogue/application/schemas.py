from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

TWO_PLACES = Decimal("0.01")

class DataStatus(str, Enum):
    """How much of a catalogue entry is backed by live inventory data"""
    LIVE = "Live"
    LOCAL_ONLY = "Local data only - Price and stock not available at creation"
    UNAVAILABLE = "Data Unavailable - External service error"
    # The list endpoint has always reported the short form
    LIST_UNAVAILABLE = "Data Unavailable"

class ProductCreate(BaseModel):
    # Required/length rules are enforced by validate_product so that every
    # violation is reported per field with a readable message
    name: Optional[str] = None
    description: Optional[str] = None

class InventorySnapshot(BaseModel):
    """Price and stock as reported by the inventory provider"""
    price: Decimal = Field(ge=0)
    stock: int = Field(ge=0)

    @field_validator("price")
    @classmethod
    def _two_places(cls, value: Decimal) -> Decimal:
        try:
            return value.quantize(TWO_PLACES)
        except InvalidOperation as e:
            raise ValueError(f"price {value} is out of range") from e

class ProductResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    description: str
    price: Optional[float] = None
    stock: Optional[int] = None
    data_status: DataStatus = Field(alias="dataStatus")
