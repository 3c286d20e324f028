"""Uniform response envelope returned by every handler."""

from math import ceil
from typing import Any, Dict, Optional


def pagination_meta(page: int, limit: int, total: int) -> Dict[str, int]:
    return {
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": ceil(total / limit) if limit else 0,
    }


def envelope(
    data: Any = None,
    message: Optional[str] = None,
    pagination: Optional[Dict[str, int]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"success": True}
    if data is not None:
        payload["data"] = data
    if message is not None:
        payload["message"] = message
    if pagination is not None:
        payload["pagination"] = pagination
    payload.update(extra)
    return payload


def error_envelope(message: str, **extra: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"success": False, "message": message}
    payload.update(extra)
    return payload
