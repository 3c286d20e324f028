from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from vendorhub.auth import get_current_user
from vendorhub.contacts import schemas
from vendorhub.contacts.service import create_contact, delete_contact, list_contacts, update_contact
from vendorhub.db import get_db
from vendorhub.errors import ServiceError, to_http_exception
from vendorhub.models import Contact
from vendorhub.responses import envelope


router = APIRouter(prefix="/api", tags=["contacts"], dependencies=[Depends(get_current_user)])


def _to_response(contact: Contact) -> dict:
    return schemas.ContactResponse.model_validate(contact).model_dump()


@router.get("/vendors/{vendor_id}/contacts")
def list_vendor_contacts(vendor_id: int, db: Session = Depends(get_db)):
    try:
        contacts = list_contacts(db, vendor_id)
    except ServiceError as exc:
        raise to_http_exception(exc)
    return envelope(data=[_to_response(contact) for contact in contacts])


@router.post("/vendors/{vendor_id}/contacts", status_code=status.HTTP_201_CREATED)
def create_vendor_contact(vendor_id: int, payload: schemas.ContactCreate, db: Session = Depends(get_db)):
    try:
        contact = create_contact(db, vendor_id, payload.model_dump())
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    db.refresh(contact)
    return envelope(data=_to_response(contact), message="Contact created successfully")


@router.put("/contacts/{contact_id}")
def update_contact_endpoint(contact_id: int, payload: schemas.ContactUpdate, db: Session = Depends(get_db)):
    try:
        contact = update_contact(db, contact_id, payload.model_dump())
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    db.refresh(contact)
    return envelope(data=_to_response(contact), message="Contact updated successfully")


@router.delete("/contacts/{contact_id}")
def delete_contact_endpoint(contact_id: int, db: Session = Depends(get_db)):
    try:
        delete_contact(db, contact_id)
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    return envelope(message="Contact deleted successfully")
