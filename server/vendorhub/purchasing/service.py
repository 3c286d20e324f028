"""Purchase order lifecycle.

Every write validates its complete input before touching the session, so a
rejected request never leaves a header without items or a partially replaced
item set. Callers commit once the function returns.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session, selectinload

from vendorhub.errors import ConflictError, InvalidInputError, NotFoundError
from vendorhub.models import PURCHASE_ORDER_STATUSES, Product, PurchaseOrder, PurchaseOrderItem
from vendorhub.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, paginate
from vendorhub.utils import line_total, quantize_money
from vendorhub.vendors.service import get_vendor

logger = logging.getLogger(__name__)

IMMUTABLE_FIELDS = ("vendor_id", "po_number")
PO_NUMBER_MAX_LENGTH = PurchaseOrder.__table__.c.po_number.type.length


def po_items_total(po: PurchaseOrder) -> Decimal:
    return quantize_money(
        sum((line_total(item.qty, item.unit_price) for item in po.items), Decimal("0"))
    )


def _parse_order_date(value: Any) -> date:
    if value is None or value == "":
        raise InvalidInputError("Order date is required")
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise InvalidInputError("Order date must be a valid date (YYYY-MM-DD)") from None


def _parse_status(value: Any) -> str:
    if value not in PURCHASE_ORDER_STATUSES:
        raise InvalidInputError(f"Status must be one of: {', '.join(PURCHASE_ORDER_STATUSES)}")
    return value


def _parse_qty(value: Any) -> int:
    try:
        qty = Decimal(str(value))
    except InvalidOperation:
        qty = None
    if isinstance(value, bool) or qty is None or not qty.is_finite() or qty != qty.to_integral_value() or qty < 1:
        raise InvalidInputError("Item qty must be a whole number of at least 1")
    return int(qty)


def _parse_unit_price(value: Any) -> Decimal:
    try:
        unit_price = Decimal(str(value))
    except InvalidOperation:
        unit_price = None
    if isinstance(value, bool) or unit_price is None or not unit_price.is_finite() or unit_price < 0:
        raise InvalidInputError("Item unit_price must be a number of at least 0")
    return quantize_money(unit_price)


def _validate_items(db: Session, vendor_id: int, items: Optional[Iterable[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """Check every candidate line and return the rows to insert.

    Pure read pass: nothing is added to the session here.
    """
    items = list(items or [])
    if not items:
        raise InvalidInputError("At least one item is required")

    lines = []
    for item in items:
        if item.get("product_id") is None or item.get("qty") is None or item.get("unit_price") is None:
            raise InvalidInputError("Each item must have product_id, qty, and unit_price")
        lines.append(
            {
                "product_id": item["product_id"],
                "qty": _parse_qty(item["qty"]),
                "unit_price": _parse_unit_price(item["unit_price"]),
            }
        )

    product_ids = {line["product_id"] for line in lines}
    owned = {
        product_id
        for (product_id,) in db.query(Product.id)
        .filter(Product.vendor_id == vendor_id, Product.id.in_(product_ids))
        .all()
    }
    for line in lines:
        if line["product_id"] not in owned:
            logger.debug("Rejected item product_id=%s for vendor_id=%s", line["product_id"], vendor_id)
            raise InvalidInputError(
                f"Product {line['product_id']} not found or does not belong to this vendor"
            )
    return lines


def po_number_exists(db: Session, po_number: str) -> bool:
    return db.query(PurchaseOrder.id).filter(PurchaseOrder.po_number == po_number).first() is not None


def get_purchase_order(db: Session, purchase_order_id: int) -> PurchaseOrder:
    po = (
        db.query(PurchaseOrder)
        .options(
            selectinload(PurchaseOrder.items).selectinload(PurchaseOrderItem.product),
            selectinload(PurchaseOrder.vendor),
        )
        .filter(PurchaseOrder.id == purchase_order_id)
        .first()
    )
    if not po:
        raise NotFoundError("Purchase order not found")
    return po


def list_purchase_orders(
    db: Session,
    vendor_id: Optional[int] = None,
    status: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> Tuple[List[PurchaseOrder], Dict[str, int]]:
    query = db.query(PurchaseOrder).options(
        selectinload(PurchaseOrder.vendor),
        selectinload(PurchaseOrder.items),
    )
    if vendor_id:
        query = query.filter(PurchaseOrder.vendor_id == vendor_id)
    # Unknown statuses are ignored rather than rejected.
    if status in PURCHASE_ORDER_STATUSES:
        query = query.filter(PurchaseOrder.status == status)
    query = query.order_by(PurchaseOrder.created_at.desc(), PurchaseOrder.id.desc())
    return paginate(query, page, limit)


def create_purchase_order(db: Session, payload: Dict[str, Any]) -> PurchaseOrder:
    vendor_id = payload.get("vendor_id")
    po_number = (payload.get("po_number") or "").strip()
    if not vendor_id:
        raise InvalidInputError("Vendor ID is required")
    if not po_number:
        raise InvalidInputError("PO number is required")
    if len(po_number) > PO_NUMBER_MAX_LENGTH:
        raise InvalidInputError(f"PO number must be at most {PO_NUMBER_MAX_LENGTH} characters")
    order_date = _parse_order_date(payload.get("order_date"))
    if not payload.get("items"):
        raise InvalidInputError("At least one item is required")
    status = _parse_status(payload.get("status") or "draft")

    vendor = get_vendor(db, vendor_id)
    if po_number_exists(db, po_number):
        raise ConflictError(
            f"Purchase order number '{po_number}' already exists. Please use a different PO number."
        )
    lines = _validate_items(db, vendor.id, payload["items"])

    po = PurchaseOrder(
        vendor_id=vendor.id,
        po_number=po_number,
        status=status,
        order_date=order_date,
        notes=payload.get("notes") or None,
    )
    po.items = [PurchaseOrderItem(**line) for line in lines]
    db.add(po)
    db.flush()
    logger.info("Created purchase order %s (id=%s) with %d items", po.po_number, po.id, len(lines))
    return po


def replace_purchase_order_items(
    db: Session, purchase_order_id: int, items: Optional[Iterable[Dict[str, Any]]]
) -> PurchaseOrder:
    po = get_purchase_order(db, purchase_order_id)
    lines = _validate_items(db, po.vendor_id, items)

    po.items.clear()
    db.flush()
    po.items = [PurchaseOrderItem(**line) for line in lines]
    db.flush()
    logger.info("Replaced items of purchase order id=%s with %d items", po.id, len(lines))
    return po


def update_purchase_order(db: Session, purchase_order_id: int, payload: Dict[str, Any]) -> PurchaseOrder:
    po = get_purchase_order(db, purchase_order_id)
    for field in IMMUTABLE_FIELDS:
        if field in payload and payload[field] != getattr(po, field):
            raise InvalidInputError(f"{field} cannot be changed after creation")
    order_date = _parse_order_date(payload.get("order_date"))
    status = payload.get("status")
    if status is not None:
        po.status = _parse_status(status)
    po.order_date = order_date
    po.notes = payload.get("notes") or None
    db.flush()
    return po


def delete_purchase_order(db: Session, purchase_order_id: int) -> None:
    po = get_purchase_order(db, purchase_order_id)
    db.delete(po)
    db.flush()
    logger.info("Deleted purchase order %s (id=%s)", po.po_number, purchase_order_id)
