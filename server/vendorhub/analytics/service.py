"""Read-only spend aggregations over purchase orders in a date range."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from vendorhub.errors import InvalidInputError
from vendorhub.models import PurchaseOrder, PurchaseOrderItem, Vendor
from vendorhub.sql_expressions import month_bucket
from vendorhub.utils import quantize_money

DEFAULT_WINDOW_DAYS = 30


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def as_dict(self) -> dict:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


def resolve_date_range(
    start: Optional[date] = None,
    end: Optional[date] = None,
    today: Optional[date] = None,
) -> DateRange:
    today = today or date.today()
    resolved_end = end or today
    resolved_start = start or (today - timedelta(days=DEFAULT_WINDOW_DAYS))
    if resolved_start > resolved_end:
        raise InvalidInputError("Start date must be on or before end date")
    return DateRange(start=resolved_start, end=resolved_end)


def _spend_expression():
    return func.coalesce(func.sum(PurchaseOrderItem.qty * PurchaseOrderItem.unit_price), 0)


def _money(value) -> Decimal:
    return quantize_money(value or 0)


def _in_range(query, date_range: DateRange):
    return query.filter(
        PurchaseOrder.order_date >= date_range.start,
        PurchaseOrder.order_date <= date_range.end,
    )


def spend_by_vendor(db: Session, date_range: DateRange) -> List[dict]:
    spend = _spend_expression().label("total_spend")
    query = (
        db.query(Vendor.id, Vendor.name, spend)
        .join(PurchaseOrder, PurchaseOrder.vendor_id == Vendor.id)
        .join(PurchaseOrderItem, PurchaseOrderItem.purchase_order_id == PurchaseOrder.id)
    )
    rows = (
        _in_range(query, date_range)
        .group_by(Vendor.id, Vendor.name)
        .having(spend > 0)
        .order_by(spend.desc(), Vendor.id.asc())
        .all()
    )
    return [
        {"vendor_id": vendor_id, "vendor_name": name, "total_spend": _money(total)}
        for vendor_id, name, total in rows
    ]


def spend_trend(db: Session, date_range: DateRange, vendor_id: Optional[int] = None) -> List[dict]:
    period = month_bucket(PurchaseOrder.order_date, dialect_name=db.get_bind().dialect.name).label("period")
    query = db.query(period, _spend_expression()).join(
        PurchaseOrderItem, PurchaseOrderItem.purchase_order_id == PurchaseOrder.id
    )
    query = _in_range(query, date_range)
    if vendor_id:
        query = query.filter(PurchaseOrder.vendor_id == vendor_id)
    rows = query.group_by("period").order_by("period").all()
    return [{"period": key, "total_spend": _money(total)} for key, total in rows]


def po_status_counts(db: Session, date_range: DateRange, vendor_id: Optional[int] = None) -> List[dict]:
    query = _in_range(db.query(PurchaseOrder.status, func.count(PurchaseOrder.id)), date_range)
    if vendor_id:
        query = query.filter(PurchaseOrder.vendor_id == vendor_id)
    rows = query.group_by(PurchaseOrder.status).order_by(PurchaseOrder.status).all()
    return [{"status": status, "count": int(count)} for status, count in rows]


def spend_summary(db: Session, date_range: DateRange) -> dict:
    total_spend = _in_range(
        db.query(_spend_expression()).select_from(PurchaseOrder).join(
            PurchaseOrderItem, PurchaseOrderItem.purchase_order_id == PurchaseOrder.id
        ),
        date_range,
    ).scalar()
    order_count, active_vendors = _in_range(
        db.query(func.count(PurchaseOrder.id), func.count(func.distinct(PurchaseOrder.vendor_id))),
        date_range,
    ).one()
    return {
        "total_spend": _money(total_spend),
        "order_count": int(order_count or 0),
        "active_vendors": int(active_vendors or 0),
    }
