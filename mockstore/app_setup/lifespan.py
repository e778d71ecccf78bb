"""
Lifespan FastAPI: initialisation/arrêt des ressources partagées.
- Signale le secret de jeton de repli (TOKEN_SECRET absent) dans les logs.
- Initialise FastAPILimiter (Redis) avec options de test (fakeredis).
- Ferme le client httpx vers l'adapter à l'arrêt.
- Variables d'environnement supportées:
  - DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS=1: désactive complètement (tests)
  - USE_FAKE_REDIS_FOR_TESTS=1: utilise fakeredis (tests)
  - LOCAL_RATE_LIMIT_FALLBACK=1: active un fallback local si l'init échoue
"""
import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi_limiter import FastAPILimiter

from mockstore import config
from mockstore.infra.adapter_client import close_adapter_client

async def _init_rate_limiter(app: FastAPI, logger: logging.Logger) -> None:
    if os.getenv("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS") == "1":
        app.state.rate_limit_enabled = False
        logger.info("Rate limiting disabled by DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS")
        return
    try:
        if os.getenv("USE_FAKE_REDIS_FOR_TESTS") == "1":
            from fakeredis.aioredis import FakeRedis
            r = FakeRedis(decode_responses=True)
        else:
            import redis.asyncio as aioredis
            redis_url = os.getenv("RATE_LIMIT_REDIS_URL", "redis://127.0.0.1:6379/0")
            r = aioredis.from_url(redis_url, encoding="utf-8", decode_responses=True)
            await r.ping()

        await FastAPILimiter.init(r)
        app.state.rate_limit_enabled = True
        logger.info("Rate limiting enabled")
    except Exception as e:
        app.state.rate_limit_enabled = False
        if os.getenv("LOCAL_RATE_LIMIT_FALLBACK") == "1":
            logger.warning(f"Rate limiting falling back to local in-memory due to init error: {e}")
        else:
            logger.warning(f"Rate limiting disabled due to init error: {e}")

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Démarrage: état du secret, rate limiting.
    Arrêt: fermeture du client adapter. L'état panier/checkout n'est pas persisté.
    """
    logger = logging.getLogger("uvicorn.error")
    if config.TOKEN_SECRET_IS_DEFAULT:
        logger.warning("TOKEN_SECRET is not set: using the documented fallback secret")
    logger.info("Upstream data-access layer: %s (timeout %ss)", config.ADAPTER_API_URL, config.UPSTREAM_TIMEOUT)

    await _init_rate_limiter(app, logger)

    yield

    close_adapter_client()
