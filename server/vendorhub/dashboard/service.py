from sqlalchemy import func
from sqlalchemy.orm import Session

from vendorhub.models import OPEN_PURCHASE_ORDER_STATUSES, Product, PurchaseOrder, Vendor


def get_dashboard_counts(db: Session) -> dict:
    vendors = db.query(func.count(Vendor.id)).scalar()
    products = db.query(func.count(Product.id)).scalar()
    open_purchase_orders = (
        db.query(func.count(PurchaseOrder.id))
        .filter(PurchaseOrder.status.in_(OPEN_PURCHASE_ORDER_STATUSES))
        .scalar()
    )
    total_purchase_orders = db.query(func.count(PurchaseOrder.id)).scalar()
    return {
        "vendors": int(vendors or 0),
        "products": int(products or 0),
        "open_purchase_orders": int(open_purchase_orders or 0),
        "total_purchase_orders": int(total_purchase_orders or 0),
    }
