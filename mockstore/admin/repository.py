from typing import Any, Dict, List, Optional

from mockstore.infra.adapter_client import call_upstream, json_or_unavailable, raise_for_upstream

# module mockstore.admin.repository
def forward(
    method: str,
    endpoint: str,
    *,
    json: Any = None,
    params: Optional[Dict[str, Any]] = None,
    expected: type = dict,
    not_found_msg: Optional[str] = None,
    fallback_msg: str = "Upstream error",
) -> Any:
    """
    Relais générique vers l'adapter, retourne le corps JSON.
    - 404 amont -> NotFound(not_found_msg), autre 4xx -> ValidationError(message amont)
    - Transport/5xx -> UpstreamUnavailable (cf. call_upstream)
    - Corps illisible ou d'une autre forme que `expected` -> UpstreamUnavailable
    """
    resp = call_upstream(method, endpoint, json=json, params=params)
    raise_for_upstream(resp, not_found_msg=not_found_msg, fallback_msg=fallback_msg)
    return json_or_unavailable(resp, expected)

def list_users() -> List[dict]:
    return forward("GET", "/users", expected=list, fallback_msg="Error fetching users")

def get_user(user_id: int) -> dict:
    return forward("GET", f"/users/{user_id}", not_found_msg="User not found", fallback_msg="Error fetching user")

def create_user(data: Dict[str, Any]) -> dict:
    return forward("POST", "/users", json=data, fallback_msg="Error creating user")

def update_user(user_id: int, data: Dict[str, Any]) -> dict:
    return forward("PUT", f"/users/{user_id}", json=data, not_found_msg="User not found", fallback_msg="Error updating user")

def create_item(data: Dict[str, Any]) -> dict:
    return forward("POST", "/items", json=data, fallback_msg="Error creating item")

def create_items_batch(items: List[Dict[str, Any]]) -> List[dict]:
    return forward("POST", "/items/batch", json=items, expected=list, fallback_msg="Error creating batch items")

def update_item(item_id: int, data: Dict[str, Any]) -> dict:
    return forward("PUT", f"/items/{item_id}", json=data, not_found_msg="Item not found", fallback_msg="Error updating item")
