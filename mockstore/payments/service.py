"""
Cas d'usage 'payments': machine d'états checkout -> paiement simulé.

- checkout: panier non vide requis, vide le panier et lève le drapeau
- pay: drapeau requis, le rabaisse; le paiement réussit toujours (aucun PSP)
Les deux transitions ne sont pas atomiques entre elles: un checkout sans paiement
laisse le drapeau levé indéfiniment. Pas de clé d'idempotence: un checkout rejoué
après succès échoue en "Cart is empty".
"""
from typing import Dict, List
import logging

from mockstore.cart.store import SessionStore

logger = logging.getLogger(__name__)

def checkout(store: SessionStore, identity: str) -> List[Dict[str, int]]:
    lines = store.checkout(identity)
    logger.info("payments.checkout user=%s lines=%s", identity, len(lines))
    return lines

def pay(store: SessionStore, identity: str) -> None:
    store.pay(identity)
    logger.info("payments.pay user=%s (simulated)", identity)
