"""
Point d'entrée principal.

Usage:
    python -m mockstore

Variables d'environnement lues:
- SERVICE: "storefront" (défaut) ou "admin"
- PORT: port d'écoute (défaut STOREFRONT_PORT=3000 ou ADMIN_PORT=3500)
- UVICORN_RELOAD: active le reload auto en dev ("1"/"true"/"yes")
- LOG_LEVEL: niveau de logs uvicorn (ex: "info", "debug")
"""
import os
import uvicorn

from mockstore.config import STOREFRONT_PORT, ADMIN_PORT

APPS = {
    "storefront": ("mockstore.asgi:storefront_app", STOREFRONT_PORT),
    "admin": ("mockstore.asgi:admin_app", ADMIN_PORT),
}

def main() -> None:
    service = os.environ.get("SERVICE", "storefront").strip().lower()
    if service not in APPS:
        raise SystemExit(f"SERVICE inconnu: {service!r} (attendu: {', '.join(APPS)})")
    target, default_port = APPS[service]
    port = int(os.environ.get("PORT", default_port))
    reload_flag = os.environ.get("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")
    log_level = os.environ.get("LOG_LEVEL", "info")
    uvicorn.run(target, host="0.0.0.0", port=port, reload=reload_flag, log_level=log_level)

if __name__ == "__main__":
    main()
