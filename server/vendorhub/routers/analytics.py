"""Spend analytics endpoints.

Each endpoint accepts an optional ``start``/``end`` date range (defaults to the
last 30 days) and echoes the resolved range back next to the data.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from vendorhub.analytics.service import (
    DateRange,
    po_status_counts,
    resolve_date_range,
    spend_by_vendor,
    spend_summary,
    spend_trend,
)
from vendorhub.auth import get_current_user
from vendorhub.db import get_db
from vendorhub.errors import ServiceError, to_http_exception
from vendorhub.responses import envelope
from vendorhub.routers.params import vendor_filter

router = APIRouter(prefix="/api/analytics", tags=["analytics"], dependencies=[Depends(get_current_user)])


def date_range_params(
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
) -> DateRange:
    try:
        return resolve_date_range(start, end)
    except ServiceError as exc:
        raise to_http_exception(exc)


@router.get("/spend-by-vendor")
def spend_by_vendor_endpoint(
    date_range: DateRange = Depends(date_range_params),
    db: Session = Depends(get_db),
):
    return envelope(data=spend_by_vendor(db, date_range), date_range=date_range.as_dict())


@router.get("/spend-trend")
def spend_trend_endpoint(
    date_range: DateRange = Depends(date_range_params),
    vendor_id: Optional[int] = Depends(vendor_filter),
    db: Session = Depends(get_db),
):
    return envelope(
        data=spend_trend(db, date_range, vendor_id=vendor_id),
        date_range=date_range.as_dict(),
        vendor_id=vendor_id if vendor_id is not None else "all",
    )


@router.get("/po-status")
def po_status_endpoint(
    date_range: DateRange = Depends(date_range_params),
    vendor_id: Optional[int] = Depends(vendor_filter),
    db: Session = Depends(get_db),
):
    return envelope(
        data=po_status_counts(db, date_range, vendor_id=vendor_id),
        date_range=date_range.as_dict(),
        vendor_id=vendor_id if vendor_id is not None else "all",
    )


@router.get("/summary")
def summary_endpoint(
    date_range: DateRange = Depends(date_range_params),
    db: Session = Depends(get_db),
):
    return envelope(data=spend_summary(db, date_range), date_range=date_range.as_dict())
