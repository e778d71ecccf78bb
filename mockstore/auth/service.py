from typing import Any, Dict, Optional
import logging
import secrets

from mockstore import config
from mockstore.errors import AuthenticationFailure, NotFound, ValidationError
from mockstore.auth.token import issue_token
from .repository import find_credential, find_role

logger = logging.getLogger(__name__)

# Même message pour utilisateur inconnu et mauvais mot de passe (pas d'énumération)
INVALID_CREDENTIALS = "Invalid credentials"

def determine_role(role: Optional[str]) -> str:
    if str(role or "").strip().lower() == "admin":
        return "admin"
    return "user"

# --- Cas d'usage Auth exposés ---

def login(username: Optional[str], password: Optional[str]) -> Dict[str, Any]:
    """Connexion:
    - username/password requis (ValidationError sinon)
    - Compare le mot de passe à l'identifiant stocké (égalité exacte, stockage en clair côté adapter)
    - Émet le jeton dynamique du jour
    - Utilisateur inconnu et mot de passe erroné produisent la même AuthenticationFailure
    - UpstreamUnavailable remonte tel quel
    """
    username = (username or "").strip()
    if not username or not password:
        raise ValidationError("Username and password are required")

    try:
        record = find_credential(username)
    except NotFound:
        logger.info("login refused for unknown user")
        raise AuthenticationFailure(INVALID_CREDENTIALS)

    stored = record.get("password")
    if not isinstance(stored, str) or not secrets.compare_digest(stored.encode("utf-8"), password.encode("utf-8")):
        logger.info("login refused for %s", username)
        raise AuthenticationFailure(INVALID_CREDENTIALS)

    if config.TOKEN_SECRET_IS_DEFAULT:
        logger.warning("issuing token with the fallback TOKEN_SECRET")
    return {
        "username": username,
        "role": determine_role(record.get("role")),
        "token": issue_token(username),
    }

def get_role(username: str) -> str:
    """Rôle normalisé (admin|user), relu à chaque appel."""
    return determine_role(find_role(username))
