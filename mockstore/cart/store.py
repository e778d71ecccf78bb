"""
Etat en mémoire par identité: panier + drapeau de checkout.

- Créé par la factory et porté par app.state (jamais d'état global de module)
- Un verrou par identité; un verrou de garde protège le registre des verrous
- Aucune persistance: tout est perdu au redémarrage du process
- Etats: Shopping -> CheckedOut (checkout) -> Shopping (pay, panier vide, drapeau levé)
"""
import threading
from typing import Any, Dict, List

from fastapi import Request

from mockstore.errors import PreconditionFailed, ValidationError

def normalize_line(line: Dict[str, Any]) -> Dict[str, int]:
    return {"itemId": int(line["itemId"]), "quantity": int(line["quantity"])}

class SessionStore:
    def __init__(self):
        self._carts: Dict[str, List[Dict[str, Any]]] = {}
        self._checked_out: Dict[str, bool] = {}
        # Une entrée par identité rencontrée: croît avec la population d'utilisateurs, purgé par clear()
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, identity: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(identity)
            if lock is None:
                lock = self._locks[identity] = threading.Lock()
            return lock

    # --- Panier ---

    def add_line(self, identity: str, item_id: int, quantity: int) -> List[Dict[str, int]]:
        """Ajoute une ligne (jamais fusionnée avec une ligne existante) et retourne le panier."""
        with self._lock_for(identity):
            cart = self._carts.setdefault(identity, [])
            cart.append({"itemId": item_id, "quantity": quantity})
            return [normalize_line(line) for line in cart]

    def lines(self, identity: str) -> List[Dict[str, int]]:
        with self._lock_for(identity):
            return [normalize_line(line) for line in self._carts.get(identity, [])]

    def remove_first(self, identity: str, item_id: int) -> Dict[str, int]:
        """Retire la première ligne de `item_id`; ValidationError si rien à retirer."""
        with self._lock_for(identity):
            cart = self._carts.get(identity) or []
            for index, line in enumerate(cart):
                if int(line["itemId"]) == item_id:
                    return normalize_line(cart.pop(index))
        raise ValidationError("Item not found in cart")

    # --- Checkout / paiement ---

    def checkout(self, identity: str) -> List[Dict[str, int]]:
        """Vide le panier et lève le drapeau; PreconditionFailed si le panier est vide."""
        with self._lock_for(identity):
            cart = self._carts.get(identity) or []
            if not cart:
                raise PreconditionFailed("Cart is empty")
            self._carts[identity] = []
            self._checked_out[identity] = True
            return [normalize_line(line) for line in cart]

    def pay(self, identity: str) -> None:
        with self._lock_for(identity):
            if not self._checked_out.get(identity):
                raise PreconditionFailed("No completed checkout to pay for")
            self._checked_out[identity] = False

    def is_checked_out(self, identity: str) -> bool:
        with self._lock_for(identity):
            return bool(self._checked_out.get(identity))

    def clear(self) -> None:
        """Remet le store à zéro (paniers, drapeaux, registre des verrous)."""
        with self._guard:
            self._carts.clear()
            self._checked_out.clear()
            # Un verrou tenu par une opération en cours reste enregistré
            self._locks = {k: lock for k, lock in self._locks.items() if lock.locked()}

def get_session_store(request: Request) -> SessionStore:
    """Dépendance FastAPI: store porté par l'application (posé par la factory)."""
    store = getattr(request.app.state, "session_store", None)
    if store is None:
        store = request.app.state.session_store = SessionStore()
    return store
