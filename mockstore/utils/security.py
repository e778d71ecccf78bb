from fastapi import Request, Depends
from typing import Optional, Dict, Any
import logging

from mockstore.errors import AuthenticationFailure, Forbidden, NotFound

logger = logging.getLogger(__name__)

USER_HEADER = "X-User"

def extract_credentials(request: Request) -> Dict[str, Optional[str]]:
    """Lit le couple (identité, jeton) fourni hors bande: X-User + Authorization: Bearer."""
    token = None
    auth_header = request.headers.get("Authorization", "")
    if auth_header[:7].lower() == "bearer ":
        token = auth_header[7:].strip() or None
    username = (request.headers.get(USER_HEADER) or "").strip() or None
    return {"username": username, "token": token}

def _require_credentials(request: Request) -> Dict[str, str]:
    creds = extract_credentials(request)
    if not creds["username"] or not creds["token"]:
        raise AuthenticationFailure("Missing Authorization or X-User header")
    return {"username": creds["username"], "token": creds["token"]}

def _check_token(creds: Dict[str, str]) -> None:
    # Délégué au module token (importé ici pour les monkeypatchs de tests)
    from mockstore.auth.token import verify_token
    if not verify_token(creds["username"], creds["token"]):
        raise AuthenticationFailure("Invalid or expired token")

def get_current_identity(request: Request) -> Dict[str, Any]:
    """Frontière storefront: vérifie le jeton, retourne {username, token}."""
    creds = _require_credentials(request)
    _check_token(creds)
    return creds

def require_user(identity: Dict[str, Any] = Depends(get_current_identity)) -> Dict[str, Any]:
    return identity

def require_admin(request: Request) -> Dict[str, Any]:
    """
    Frontière management, ordre fixe:
    1) X-User + Bearer présents (401 sinon)
    2) rôle relu auprès de l'adapter: inconnu -> 401, indisponible -> 503, non admin -> 403
    3) jeton vérifié (401 si invalide)
    Un jeton invalide pour un non-admin renvoie donc 403.
    """
    creds = _require_credentials(request)
    from mockstore.auth.service import get_role
    try:
        role = get_role(creds["username"])
    except NotFound:
        raise AuthenticationFailure("User not found")
    if role != "admin":
        logger.info("admin access refused for %s (role=%s)", creds["username"], role)
        raise Forbidden()
    _check_token(creds)
    return {**creds, "role": role}
