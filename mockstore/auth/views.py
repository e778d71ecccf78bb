from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Optional

from mockstore import config
from mockstore.utils.rate_limit import optional_rate_limit
from .service import login as svc_login

router = APIRouter(tags=["Auth"])

class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

@router.post(
    "/login",
    dependencies=[Depends(optional_rate_limit(times=config.LOGIN_RATE_LIMIT_TIMES, seconds=config.LOGIN_RATE_LIMIT_SECONDS))],
)
def api_login(req: LoginRequest):
    """Point d'entrée de connexion (API JSON).
    - Applique le rate limit configuré (LOGIN_RATE_LIMIT_TIMES / LOGIN_RATE_LIMIT_SECONDS).
    - 400 si username/password manquent, 401 (message unique) si identifiants invalides,
      503 si la couche d'accès aux données est indisponible.
    - Retourne {"token": ...}: à renvoyer ensuite en Authorization: Bearer avec X-User.
    """
    result = svc_login(req.username, req.password)
    return {"token": result["token"]}
