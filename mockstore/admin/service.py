# module mockstore.admin.service

from typing import Any, Dict, List
from mockstore.admin import repository as admin_repository
from mockstore.errors import ValidationError
from mockstore.utils.validators import coerce_positive_int
import logging

logger = logging.getLogger(__name__)

USER_REQUIRED_FIELDS = ("username", "role", "firstname", "surname", "password")
ALLOWED_ROLES = {"admin", "user"}

def _require_object(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object")
    return data

def _check_role(data: Dict[str, Any]) -> None:
    role = data.get("role")
    if role is not None and str(role).strip().lower() not in ALLOWED_ROLES:
        raise ValidationError("role must be 'admin' or 'user'")

def list_users() -> List[dict]:
    return admin_repository.list_users()

def get_user(user_id: Any) -> dict:
    return admin_repository.get_user(coerce_positive_int(user_id, "id"))

def create_user(data: Any) -> dict:
    data = _require_object(data)
    missing = [f for f in USER_REQUIRED_FIELDS if not data.get(f)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")
    _check_role(data)
    created = admin_repository.create_user(data)
    logger.info("admin.create_user username=%s", data.get("username"))
    return created

def update_user(user_id: Any, data: Any) -> dict:
    data = _require_object(data)
    _check_role(data)
    return admin_repository.update_user(coerce_positive_int(user_id, "id"), data)

def _check_item(item: Any, where: str) -> Dict[str, Any]:
    if not isinstance(item, dict) or not item.get("name") or item.get("price") is None:
        raise ValidationError(f'{where} must have a "name" and "price".')
    return item

def create_item(data: Any) -> dict:
    return admin_repository.create_item(_check_item(data, "Item"))

def create_items_batch(items: Any) -> List[dict]:
    if not isinstance(items, list) or not items:
        raise ValidationError("Expected a non-empty array of items.")
    for index, item in enumerate(items):
        _check_item(item, f"Item at index {index}")
    created = admin_repository.create_items_batch(items)
    logger.info("admin.create_items_batch count=%s", len(items))
    return created

def update_item(item_id: Any, data: Any) -> dict:
    return admin_repository.update_item(coerce_positive_int(item_id, "id"), _require_object(data))
