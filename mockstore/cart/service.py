"""
Cas d'usage 'cart': validation des entrées, existence de l'article, puis SessionStore.
"""
from typing import Any, Dict, List
import logging

from mockstore.catalog import repository as catalog_repository
from mockstore.utils.validators import coerce_positive_int
from .store import SessionStore

logger = logging.getLogger(__name__)

def add_item(store: SessionStore, identity: str, item_id: Any, quantity: Any) -> List[Dict[str, int]]:
    """
    Ajoute (itemId, quantity) au panier de `identity`.
    - ValidationError si l'un des deux n'est pas un entier positif
    - NotFound si l'article n'existe pas au catalogue (vérifié avant toute mutation)
    - Retourne le panier complet
    """
    item_id_val = coerce_positive_int(item_id, "itemId")
    quantity_val = coerce_positive_int(quantity, "quantity")
    catalog_repository.get_item(item_id_val)
    cart = store.add_line(identity, item_id_val, quantity_val)
    logger.info("cart.add user=%s itemId=%s quantity=%s lines=%s", identity, item_id_val, quantity_val, len(cart))
    return cart

def list_items(store: SessionStore, identity: str) -> List[Dict[str, int]]:
    return store.lines(identity)

def remove_item(store: SessionStore, identity: str, item_id: Any) -> Dict[str, int]:
    """Retire la première ligne correspondant à itemId (ValidationError si aucune)."""
    removed = store.remove_first(identity, coerce_positive_int(item_id, "itemId"))
    logger.info("cart.remove user=%s itemId=%s", identity, removed["itemId"])
    return removed
