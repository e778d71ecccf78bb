# mockstore.config
from pathlib import Path
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=False)

"""
Configuration centrale des deux passerelles (storefront et management).

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Expose le secret de jeton et son état (défini ou valeur de repli)
- Expose l'URL de la couche d'accès aux données (adapter) et le timeout amont
- CORS/hosts et paramètres du rate limit de /login
"""

def _clean_env(v: str) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")

def _int_env(name: str, default: int) -> int:
    try:
        return int(_clean_env(os.getenv(name) or "") or default)
    except ValueError:
        return default

def _float_env(name: str, default: float) -> float:
    try:
        return float(_clean_env(os.getenv(name) or "") or default)
    except ValueError:
        return default

# Secret partagé des jetons dynamiques
# - Valeur de repli documentée si absent (système de test); l'état est loggé au démarrage
DEFAULT_TOKEN_SECRET = "default_secret"
_raw_secret = _clean_env(os.getenv("TOKEN_SECRET") or "")
TOKEN_SECRET = _raw_secret or DEFAULT_TOKEN_SECRET
TOKEN_SECRET_IS_DEFAULT = not _raw_secret

# Fuseau utilisé pour tronquer la date du jeton (UTC par défaut)
TOKEN_TIMEZONE = _clean_env(os.getenv("TOKEN_TIMEZONE") or "") or "UTC"

# Couche d'accès aux données (adapter-api)
# - ADAPTER_API_URL peut être sans schéma: on préfixe en http:// si nécessaire
ADAPTER_API_URL = _clean_env(os.getenv("ADAPTER_API_URL") or "") or "http://localhost:4000"
if not ADAPTER_API_URL.startswith("http"):
    ADAPTER_API_URL = "http://" + ADAPTER_API_URL
ADAPTER_API_URL = ADAPTER_API_URL.rstrip("/")

# Timeout borné des appels amont (secondes)
UPSTREAM_TIMEOUT = _float_env("UPSTREAM_TIMEOUT", 10.0)

# CORS (dev)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]

# Rate limit sur POST /login
LOGIN_RATE_LIMIT_TIMES = _int_env("LOGIN_RATE_LIMIT_TIMES", 5)
LOGIN_RATE_LIMIT_SECONDS = _int_env("LOGIN_RATE_LIMIT_SECONDS", 60)

# Ports par défaut des deux services
STOREFRONT_PORT = _int_env("STOREFRONT_PORT", 3000)
ADMIN_PORT = _int_env("ADMIN_PORT", 3500)
