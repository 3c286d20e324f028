from typing import Any, Dict, List, Tuple

from sqlalchemy.orm import Query

from vendorhub.responses import pagination_meta

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def paginate(query: Query, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Tuple[List[Any], Dict[str, int]]:
    """Apply LIMIT/OFFSET to an ordered query and return rows plus pagination meta."""
    page = max(1, page)
    limit = max(1, min(limit, MAX_LIMIT))
    total = query.order_by(None).count()
    rows = query.limit(limit).offset((page - 1) * limit).all()
    return rows, pagination_meta(page, limit, total)
