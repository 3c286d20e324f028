from typing import Optional

from fastapi import HTTPException, Query, status


def vendor_filter(vendor_id: Optional[str] = Query(None, alias="vendorId")) -> Optional[int]:
    """Resolve the optional ``vendorId`` filter; blank or ``all`` means every vendor."""
    if vendor_id is None or vendor_id.strip() in ("", "all"):
        return None
    try:
        return int(vendor_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="vendorId must be an integer") from None
