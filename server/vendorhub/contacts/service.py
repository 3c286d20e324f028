from typing import Any, Dict, List

from sqlalchemy.orm import Session

from vendorhub.errors import InvalidInputError, NotFoundError
from vendorhub.models import Contact
from vendorhub.vendors.service import get_vendor


def _clean_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    name = (payload.get("name") or "").strip()
    if not name:
        raise InvalidInputError("Contact name is required")
    return {
        "name": name,
        "email": payload.get("email") or None,
        "phone": payload.get("phone") or None,
        "role": payload.get("role") or None,
    }


def get_contact(db: Session, contact_id: int) -> Contact:
    contact = db.query(Contact).filter(Contact.id == contact_id).first()
    if not contact:
        raise NotFoundError("Contact not found")
    return contact


def list_contacts(db: Session, vendor_id: int) -> List[Contact]:
    get_vendor(db, vendor_id)
    return (
        db.query(Contact)
        .filter(Contact.vendor_id == vendor_id)
        .order_by(Contact.created_at.desc(), Contact.id.desc())
        .all()
    )


def create_contact(db: Session, vendor_id: int, payload: Dict[str, Any]) -> Contact:
    cleaned = _clean_payload(payload)
    vendor = get_vendor(db, vendor_id)
    contact = Contact(vendor_id=vendor.id, **cleaned)
    db.add(contact)
    db.flush()
    return contact


def update_contact(db: Session, contact_id: int, payload: Dict[str, Any]) -> Contact:
    cleaned = _clean_payload(payload)
    contact = get_contact(db, contact_id)
    for key, value in cleaned.items():
        setattr(contact, key, value)
    db.flush()
    return contact


def delete_contact(db: Session, contact_id: int) -> None:
    contact = get_contact(db, contact_id)
    db.delete(contact)
    db.flush()
