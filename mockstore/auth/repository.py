"""Accès aux identifiants et rôles (adapter-api).
- find_credential: enregistrement {username, password, role} via GET /users
- find_role: rôle via POST /user/role
Les deux distinguent NotFound (utilisateur inconnu) et UpstreamUnavailable (transport, réponse illisible).
"""
from typing import Any, Dict
import logging

from mockstore.errors import NotFound
from mockstore.infra.adapter_client import call_upstream, json_or_unavailable, raise_for_upstream

logger = logging.getLogger(__name__)

def find_credential(username: str) -> Dict[str, Any]:
    """Récupère l'enregistrement d'identifiants d'un utilisateur.
    - Envoie le filtre `username`; un adapter qui l'ignore renvoie toute la table users
      (mots de passe compris) à chaque login: coût linéaire en nombre d'utilisateurs
    - La sélection est donc refaite côté client
    - Retour: {username, password, role}
    - Lève NotFound si aucun utilisateur ne correspond
    """
    resp = call_upstream("GET", "/users", params={"username": username})
    raise_for_upstream(resp, fallback_msg="Error fetching users")
    rows = json_or_unavailable(resp, list)
    for row in rows:
        if isinstance(row, dict) and row.get("username") == username:
            return {
                "username": row.get("username"),
                "password": row.get("password"),
                "role": row.get("role"),
            }
    raise NotFound("User not found")

def find_role(username: str) -> str:
    """Rôle courant de l'utilisateur (jamais mis en cache)."""
    resp = call_upstream("POST", "/user/role", json={"username": username})
    raise_for_upstream(resp, not_found_msg="User not found", fallback_msg="Error retrieving user role")
    role = json_or_unavailable(resp, dict).get("role")
    if not role:
        raise NotFound("User not found")
    return str(role)
