from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, condecimal


DecimalValue = condecimal(max_digits=14, decimal_places=2)


class PurchaseOrderItemInput(BaseModel):
    # Presence and range are checked by the service so that every caller gets
    # the same messages.
    product_id: Optional[int] = None
    qty: Optional[int] = None
    unit_price: Optional[DecimalValue] = None


class PurchaseOrderCreate(BaseModel):
    vendor_id: Optional[int] = None
    po_number: Optional[str] = None
    status: Optional[str] = None
    order_date: Optional[date] = None
    notes: Optional[str] = None
    items: Optional[List[PurchaseOrderItemInput]] = None


class PurchaseOrderUpdate(BaseModel):
    status: Optional[str] = None
    order_date: Optional[date] = None
    notes: Optional[str] = None


class PurchaseOrderItemsReplace(BaseModel):
    items: Optional[List[PurchaseOrderItemInput]] = None


class PurchaseOrderItemResponse(BaseModel):
    id: int
    purchase_order_id: int
    product_id: int
    product_name: Optional[str] = None
    sku: Optional[str] = None
    qty: int
    unit_price: Decimal
    line_total: Decimal

    model_config = ConfigDict(from_attributes=True)


class PurchaseOrderListResponse(BaseModel):
    id: int
    vendor_id: int
    vendor_name: Optional[str] = None
    po_number: str
    status: str
    order_date: date
    notes: Optional[str] = None
    total: Decimal
    created_at: datetime


class PurchaseOrderResponse(PurchaseOrderListResponse):
    items: List[PurchaseOrderItemResponse]

    model_config = ConfigDict(from_attributes=True)
