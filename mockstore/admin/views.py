from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from mockstore.utils.security import require_admin
from mockstore.admin import service as admin_service

# Toutes les routes passent par require_admin (rôle relu puis jeton vérifié)
router = APIRouter(tags=["Management"], dependencies=[Depends(require_admin)])

# module mockstore.admin.views

# --- Utilisateurs ---
@router.get("/users")
def admin_list_users():
    return admin_service.list_users()

@router.get("/users/{user_id}")
def admin_get_user(user_id: str):
    return admin_service.get_user(user_id)

@router.post("/users")
def admin_create_user(body: Any = Body(None)):
    """Crée un utilisateur (username, role, firstname, surname, password requis) -> 201."""
    return JSONResponse(admin_service.create_user(body), status_code=201)

@router.put("/users/{user_id}")
def admin_update_user(user_id: str, body: Any = Body(None)):
    return admin_service.update_user(user_id, body)

# --- Articles ---
@router.post("/items")
def admin_create_item(body: Any = Body(None)):
    return JSONResponse(admin_service.create_item(body), status_code=201)

@router.post("/items/batch")
def admin_create_items_batch(body: Any = Body(None)):
    """Création en lot: tableau JSON d'articles {name, price, description?} -> 201."""
    return JSONResponse(admin_service.create_items_batch(body), status_code=201)

@router.put("/items/{item_id}")
def admin_update_item(item_id: str, body: Any = Body(None)):
    return admin_service.update_item(item_id, body)
