from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mockstore.utils.security import require_user
from mockstore.cart import service as cart_service
from mockstore.cart.store import SessionStore, get_session_store

router = APIRouter(tags=["Cart"])

# Les champs restent non typés: la validation (entiers positifs, chaînes numériques) est faite par le service
class CartItemRequest(BaseModel):
    itemId: Optional[Any] = None
    quantity: Optional[Any] = None

class CartRemoveRequest(BaseModel):
    itemId: Optional[Any] = None

# module mockstore.cart.views
@router.post("/cart")
def add_to_cart(
    req: CartItemRequest,
    identity: Dict[str, Any] = Depends(require_user),
    store: SessionStore = Depends(get_session_store),
):
    """
    Ajoute un article au panier de l'utilisateur authentifié.
    - Entrée JSON: {"itemId": <int>, "quantity": <int>}
    - 400 si itemId/quantity invalides, 404 si l'article est inconnu, 401 sans jeton valide
    """
    cart = cart_service.add_item(store, identity["username"], req.itemId, req.quantity)
    return {"message": "Item added to cart", "cart": cart}

@router.get("/cart/items")
def list_cart_items(
    identity: Dict[str, Any] = Depends(require_user),
    store: SessionStore = Depends(get_session_store),
):
    """Lignes du panier, dans l'ordre d'ajout ([] si vide)."""
    return cart_service.list_items(store, identity["username"])

@router.delete("/cart/items")
def remove_cart_item(
    req: CartRemoveRequest,
    identity: Dict[str, Any] = Depends(require_user),
    store: SessionStore = Depends(get_session_store),
):
    """Retire la première ligne de itemId; 400 si rien à retirer."""
    removed = cart_service.remove_item(store, identity["username"], req.itemId)
    return {"message": "Item removed from cart", "deletedItem": removed}
