from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, condecimal


DecimalValue = condecimal(max_digits=14, decimal_places=2)


class ProductBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    sku: Optional[str] = None
    unit_price: DecimalValue = Field(..., ge=0)
    active: bool = True


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass


class ProductResponse(BaseModel):
    id: int
    vendor_id: int
    name: str
    sku: Optional[str] = None
    unit_price: Decimal
    active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
