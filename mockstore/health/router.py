from datetime import datetime, timezone

from fastapi import APIRouter, Request

from mockstore import config
from mockstore.utils.rate_limit import rate_limit_health_info

router = APIRouter(prefix="/health", tags=["Health"])

@router.get("")
def health_root(request: Request):
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": getattr(request.app.state, "service_name", None),
        "token_secret_configured": not config.TOKEN_SECRET_IS_DEFAULT,
        "rate_limit": rate_limit_health_info(request),
    }
