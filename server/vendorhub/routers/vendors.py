from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from vendorhub.auth import get_current_user
from vendorhub.db import get_db
from vendorhub.errors import ServiceError, to_http_exception
from vendorhub.models import Vendor
from vendorhub.pagination import DEFAULT_LIMIT, DEFAULT_PAGE
from vendorhub.responses import envelope
from vendorhub.vendors import schemas
from vendorhub.vendors.service import create_vendor, delete_vendor, get_vendor, list_vendors, update_vendor


router = APIRouter(prefix="/api/vendors", tags=["vendors"], dependencies=[Depends(get_current_user)])


def _to_response(vendor: Vendor) -> dict:
    return schemas.VendorResponse.model_validate(vendor).model_dump()


@router.get("")
def list_vendors_endpoint(
    search: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
):
    vendors, pagination = list_vendors(db, search=search, status=status_filter, page=page, limit=limit)
    return envelope(data=[_to_response(vendor) for vendor in vendors], pagination=pagination)


@router.get("/{vendor_id}")
def get_vendor_endpoint(vendor_id: int, db: Session = Depends(get_db)):
    try:
        vendor = get_vendor(db, vendor_id)
    except ServiceError as exc:
        raise to_http_exception(exc)
    return envelope(data=_to_response(vendor))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_vendor_endpoint(payload: schemas.VendorCreate, db: Session = Depends(get_db)):
    try:
        vendor = create_vendor(db, payload.model_dump())
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    db.refresh(vendor)
    return envelope(data=_to_response(vendor), message="Vendor created successfully")


@router.put("/{vendor_id}")
def update_vendor_endpoint(vendor_id: int, payload: schemas.VendorUpdate, db: Session = Depends(get_db)):
    try:
        vendor = update_vendor(db, vendor_id, payload.model_dump())
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    db.refresh(vendor)
    return envelope(data=_to_response(vendor), message="Vendor updated successfully")


@router.delete("/{vendor_id}")
def delete_vendor_endpoint(vendor_id: int, db: Session = Depends(get_db)):
    try:
        delete_vendor(db, vendor_id)
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    return envelope(message="Vendor deleted successfully")
