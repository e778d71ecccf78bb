"""Lecture du catalogue via l'adapter (items)."""
from typing import Any, Dict

from mockstore.errors import UpstreamUnavailable
from mockstore.infra.adapter_client import call_upstream, json_or_unavailable, raise_for_upstream

def get_item(item_id: int) -> Dict[str, Any]:
    """Article par id; NotFound si l'adapter répond 404."""
    resp = call_upstream("GET", f"/items/{item_id}")
    raise_for_upstream(resp, not_found_msg="Item not found", fallback_msg="Error fetching item details")
    return json_or_unavailable(resp, dict)

def list_items(page: int, limit: int) -> Dict[str, Any]:
    """Page d'articles: {items, page, limit, total} tel que renvoyé par l'adapter."""
    resp = call_upstream("GET", "/items", params={"page": page, "limit": limit})
    raise_for_upstream(resp, fallback_msg="Error fetching items")
    data = json_or_unavailable(resp, dict)
    items = data.get("items") or []
    if not isinstance(items, list) or not all(isinstance(it, dict) for it in items):
        raise UpstreamUnavailable()
    return data
