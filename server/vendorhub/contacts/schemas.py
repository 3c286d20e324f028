from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ContactBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None


class ContactCreate(ContactBase):
    pass


class ContactUpdate(ContactBase):
    pass


class ContactResponse(ContactBase):
    id: int
    vendor_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
