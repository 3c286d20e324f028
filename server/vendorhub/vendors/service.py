import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from vendorhub.errors import InvalidInputError, NotFoundError
from vendorhub.models import VENDOR_STATUSES, Vendor
from vendorhub.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, paginate

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "status", "address", "city", "state", "zip", "notes")


def get_vendor(db: Session, vendor_id: int) -> Vendor:
    vendor = db.query(Vendor).filter(Vendor.id == vendor_id).first()
    if not vendor:
        raise NotFoundError("Vendor not found")
    return vendor


def list_vendors(
    db: Session,
    search: Optional[str] = None,
    status: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> Tuple[List[Vendor], Dict[str, int]]:
    query = db.query(Vendor)
    if search:
        query = query.filter(Vendor.name.ilike(f"%{search}%"))
    if status in VENDOR_STATUSES:
        query = query.filter(Vendor.status == status)
    query = query.order_by(Vendor.created_at.desc(), Vendor.id.desc())
    return paginate(query, page, limit)


def _clean_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    name = (payload.get("name") or "").strip()
    if not name:
        raise InvalidInputError("Vendor name is required")
    status = payload.get("status") or "active"
    if status not in VENDOR_STATUSES:
        raise InvalidInputError(f"Vendor status must be one of: {', '.join(VENDOR_STATUSES)}")
    cleaned = {key: payload.get(key) or None for key in EDITABLE_FIELDS}
    cleaned["name"] = name
    cleaned["status"] = status
    return cleaned


def create_vendor(db: Session, payload: Dict[str, Any]) -> Vendor:
    vendor = Vendor(**_clean_payload(payload))
    db.add(vendor)
    db.flush()
    logger.info("Created vendor id=%s name=%s", vendor.id, vendor.name)
    return vendor


def update_vendor(db: Session, vendor_id: int, payload: Dict[str, Any]) -> Vendor:
    vendor = get_vendor(db, vendor_id)
    for key, value in _clean_payload(payload).items():
        setattr(vendor, key, value)
    db.flush()
    return vendor


def delete_vendor(db: Session, vendor_id: int) -> None:
    vendor = get_vendor(db, vendor_id)
    db.delete(vendor)
    db.flush()
    logger.info("Deleted vendor id=%s with its contacts, products and purchase orders", vendor_id)
