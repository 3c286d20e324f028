from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from vendorhub.auth import get_current_user
from vendorhub.db import get_db
from vendorhub.errors import ServiceError, to_http_exception
from vendorhub.models import Product
from vendorhub.products import schemas
from vendorhub.products.service import create_product, delete_product, list_products, update_product
from vendorhub.responses import envelope


router = APIRouter(prefix="/api", tags=["products"], dependencies=[Depends(get_current_user)])


def _to_response(product: Product) -> dict:
    return schemas.ProductResponse.model_validate(product).model_dump()


@router.get("/vendors/{vendor_id}/products")
def list_vendor_products(vendor_id: int, db: Session = Depends(get_db)):
    try:
        products = list_products(db, vendor_id)
    except ServiceError as exc:
        raise to_http_exception(exc)
    return envelope(data=[_to_response(product) for product in products])


@router.post("/vendors/{vendor_id}/products", status_code=status.HTTP_201_CREATED)
def create_vendor_product(vendor_id: int, payload: schemas.ProductCreate, db: Session = Depends(get_db)):
    try:
        product = create_product(db, vendor_id, payload.model_dump())
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    db.refresh(product)
    return envelope(data=_to_response(product), message="Product created successfully")


@router.put("/products/{product_id}")
def update_product_endpoint(product_id: int, payload: schemas.ProductUpdate, db: Session = Depends(get_db)):
    try:
        product = update_product(db, product_id, payload.model_dump())
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    db.refresh(product)
    return envelope(data=_to_response(product), message="Product updated successfully")


@router.delete("/products/{product_id}")
def delete_product_endpoint(product_id: int, db: Session = Depends(get_db)):
    try:
        delete_product(db, product_id)
        db.commit()
    except ServiceError as exc:
        db.rollback()
        raise to_http_exception(exc)
    return envelope(message="Product deleted successfully")
