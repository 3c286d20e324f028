from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vendorhub.auth import get_current_user
from vendorhub.db import get_db
from vendorhub.errors import ServiceError, to_http_exception
from vendorhub.models import PurchaseOrder, PurchaseOrderItem
from vendorhub.pagination import DEFAULT_LIMIT, DEFAULT_PAGE
from vendorhub.purchasing import schemas
from vendorhub.purchasing.service import (
    create_purchase_order,
    delete_purchase_order,
    get_purchase_order,
    list_purchase_orders,
    po_items_total,
    replace_purchase_order_items,
    update_purchase_order,
)
from vendorhub.responses import envelope
from vendorhub.routers.params import vendor_filter
from vendorhub.utils import line_total


router = APIRouter(
    prefix="/api/purchase-orders",
    tags=["purchase-orders"],
    dependencies=[Depends(get_current_user)],
)


DUPLICATE_PO_DETAIL = "Purchase order number already exists. Please use a different PO number."


def _to_item_response(item: PurchaseOrderItem) -> dict:
    return schemas.PurchaseOrderItemResponse(
        id=item.id,
        purchase_order_id=item.purchase_order_id,
        product_id=item.product_id,
        product_name=item.product.name if item.product else None,
        sku=item.product.sku if item.product else None,
        qty=item.qty,
        unit_price=item.unit_price,
        line_total=line_total(item.qty, item.unit_price),
    ).model_dump()


def _header_fields(po: PurchaseOrder) -> dict:
    return dict(
        id=po.id,
        vendor_id=po.vendor_id,
        vendor_name=po.vendor.name if po.vendor else None,
        po_number=po.po_number,
        status=po.status,
        order_date=po.order_date,
        notes=po.notes,
        total=po_items_total(po),
        created_at=po.created_at,
    )


def _to_list_response(po: PurchaseOrder) -> dict:
    return schemas.PurchaseOrderListResponse(**_header_fields(po)).model_dump()


def _to_detail_response(po: PurchaseOrder) -> dict:
    return schemas.PurchaseOrderResponse(
        **_header_fields(po),
        items=[_to_item_response(item) for item in po.items],
    ).model_dump()


@router.get("")
def list_purchase_orders_endpoint(
    vendor_id: Optional[int] = Depends(vendor_filter),
    status_filter: Optional[str] = Query(None, alias="status"),
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
):
    pos, pagination = list_purchase_orders(db, vendor_id=vendor_id, status=status_filter, page=page, limit=limit)
    return envelope(data=[_to_list_response(po) for po in pos], pagination=pagination)


@router.get("/{purchase_order_id}")
def get_purchase_order_endpoint(purchase_order_id: int, db: Session = Depends(get_db)):
    try:
        po = get_purchase_order(db, purchase_order_id)
    except ServiceError as exc:
        raise to_http_exception(exc)
    return envelope(data=_to_detail_response(po))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_purchase_order_endpoint(payload: schemas.PurchaseOrderCreate, db: Session = Depends(get_db)):
    try:
        po = create_purchase_order(db, payload.model_dump())
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_PO_DETAIL)
    po = get_purchase_order(db, po.id)
    return envelope(data=_to_detail_response(po), message="Purchase order created successfully")


@router.put("/{purchase_order_id}")
def update_purchase_order_endpoint(
    purchase_order_id: int,
    payload: schemas.PurchaseOrderUpdate,
    db: Session = Depends(get_db),
):
    try:
        update_purchase_order(db, purchase_order_id, payload.model_dump())
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    po = get_purchase_order(db, purchase_order_id)
    return envelope(data=_to_detail_response(po), message="Purchase order updated successfully")


@router.put("/{purchase_order_id}/items")
def replace_purchase_order_items_endpoint(
    purchase_order_id: int,
    payload: schemas.PurchaseOrderItemsReplace,
    db: Session = Depends(get_db),
):
    items = [item.model_dump() for item in payload.items] if payload.items is not None else None
    try:
        replace_purchase_order_items(db, purchase_order_id, items)
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    po = get_purchase_order(db, purchase_order_id)
    return envelope(
        data=[_to_item_response(item) for item in po.items],
        message="Purchase order items updated successfully",
    )


@router.delete("/{purchase_order_id}")
def delete_purchase_order_endpoint(purchase_order_id: int, db: Session = Depends(get_db)):
    try:
        delete_purchase_order(db, purchase_order_id)
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    return envelope(message="Purchase order deleted successfully")
