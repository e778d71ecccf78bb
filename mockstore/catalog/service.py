from typing import Any, Dict, Optional

from mockstore.errors import ValidationError
from mockstore.utils.validators import coerce_positive_int
from . import repository

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 1000

def _normalize_item(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": item.get("id"),
        "name": item.get("name"),
        "description": item.get("description") or "",
        "price": item.get("price"),
    }

def list_items(page: Optional[Any] = None, limit: Optional[Any] = None) -> Dict[str, Any]:
    """
    Pagination du catalogue.
    - page >= 1 (défaut 1), 1 <= limit <= 1000 (défaut 10), sinon ValidationError
    """
    page_val = DEFAULT_PAGE if page in (None, "") else coerce_positive_int(page, "page")
    limit_val = DEFAULT_LIMIT if limit in (None, "") else coerce_positive_int(limit, "limit")
    if limit_val > MAX_LIMIT:
        raise ValidationError(f"limit must not exceed {MAX_LIMIT}")
    data = repository.list_items(page_val, limit_val) or {}
    return {
        "items": [_normalize_item(it) for it in data.get("items") or []],
        "page": data.get("page", page_val),
        "limit": data.get("limit", limit_val),
        "total": data.get("total", 0),
    }

def get_item(item_id: Any) -> Dict[str, Any]:
    return _normalize_item(repository.get_item(coerce_positive_int(item_id, "id")))
