from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


VendorStatus = Literal["active", "inactive"]


class VendorBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    status: VendorStatus = "active"
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    notes: Optional[str] = None


class VendorCreate(VendorBase):
    pass


class VendorUpdate(VendorBase):
    pass


class VendorResponse(VendorBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
