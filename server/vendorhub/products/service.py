import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from vendorhub.errors import ConflictError, InvalidInputError, NotFoundError
from vendorhub.models import Product, PurchaseOrderItem
from vendorhub.utils import quantize_money
from vendorhub.vendors.service import get_vendor

logger = logging.getLogger(__name__)


def _clean_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    name = (payload.get("name") or "").strip()
    if not name:
        raise InvalidInputError("Product name is required")
    raw_price = payload.get("unit_price")
    if raw_price is None:
        raise InvalidInputError("Unit price is required")
    try:
        unit_price = Decimal(str(raw_price))
    except InvalidOperation:
        raise InvalidInputError("Unit price must be a valid positive number") from None
    if not unit_price.is_finite() or unit_price < 0:
        raise InvalidInputError("Unit price must be a valid positive number")
    active = payload.get("active")
    return {
        "name": name,
        "sku": payload.get("sku") or None,
        "unit_price": quantize_money(unit_price),
        "active": True if active is None else bool(active),
    }


def get_product(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise NotFoundError("Product not found")
    return product


def list_products(db: Session, vendor_id: int) -> List[Product]:
    get_vendor(db, vendor_id)
    return (
        db.query(Product)
        .filter(Product.vendor_id == vendor_id)
        .order_by(Product.created_at.desc(), Product.id.desc())
        .all()
    )


def create_product(db: Session, vendor_id: int, payload: Dict[str, Any]) -> Product:
    cleaned = _clean_payload(payload)
    vendor = get_vendor(db, vendor_id)
    product = Product(vendor_id=vendor.id, **cleaned)
    db.add(product)
    db.flush()
    logger.info("Created product id=%s for vendor id=%s", product.id, vendor.id)
    return product


def update_product(db: Session, product_id: int, payload: Dict[str, Any]) -> Product:
    cleaned = _clean_payload(payload)
    product = get_product(db, product_id)
    for key, value in cleaned.items():
        setattr(product, key, value)
    db.flush()
    return product


def delete_product(db: Session, product_id: int) -> None:
    product = get_product(db, product_id)
    referenced = (
        db.query(PurchaseOrderItem.id).filter(PurchaseOrderItem.product_id == product_id).first() is not None
    )
    if referenced:
        raise ConflictError("Cannot delete product because it is referenced by purchase orders.")
    db.delete(product)
    db.flush()
