from typing import Any, Dict

from fastapi import APIRouter, Depends

from mockstore.utils.security import require_user
from mockstore.cart.store import SessionStore, get_session_store
from mockstore.payments import service as payments_service

router = APIRouter(tags=["Payments"])

# module mockstore.payments.views
@router.post("/checkout")
def checkout(
    identity: Dict[str, Any] = Depends(require_user),
    store: SessionStore = Depends(get_session_store),
):
    """
    Valide le panier de l'utilisateur authentifié.
    - 400 si le panier est vide (y compris un checkout rejoué après succès)
    - Vide le panier et autorise exactement un paiement
    """
    payments_service.checkout(store, identity["username"])
    return {"message": "Checkout successful. Proceed to payment."}

@router.post("/payment")
def payment(
    identity: Dict[str, Any] = Depends(require_user),
    store: SessionStore = Depends(get_session_store),
):
    """Paiement simulé; 400 sans checkout préalable non payé."""
    payments_service.pay(store, identity["username"])
    return {"message": "Payment processed successfully (simulated)."}
