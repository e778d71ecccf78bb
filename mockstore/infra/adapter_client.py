"""
Client HTTP (httpx) vers la couche d'accès aux données (adapter-api).

- Instance paresseuse partagée (get_adapter_client), fermée par le lifespan
- Timeout borné (UPSTREAM_TIMEOUT) sur tous les appels
- call_upstream convertit timeouts/erreurs de connexion/5xx en UpstreamUnavailable,
  json_or_unavailable fait de même pour un corps 2xx illisible ou mal formé;
  les 4xx sont rendus à l'appelant qui décide (NotFound, ValidationError, ...)
"""
import logging
import threading
from typing import Any, Dict, Optional

import httpx

from mockstore.config import ADAPTER_API_URL, UPSTREAM_TIMEOUT
from mockstore.errors import NotFound, UpstreamUnavailable, ValidationError

logger = logging.getLogger(__name__)

_client: Optional[httpx.Client] = None
_client_lock = threading.Lock()

def get_adapter_client() -> httpx.Client:
    global _client
    with _client_lock:
        if _client is None:
            _client = httpx.Client(base_url=ADAPTER_API_URL, timeout=UPSTREAM_TIMEOUT)
        return _client

def set_adapter_client(client: Optional[httpx.Client]) -> None:
    """Remplace le client partagé (tests: httpx.MockTransport)."""
    global _client
    with _client_lock:
        _client = client

def close_adapter_client() -> None:
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
        _client = None

def call_upstream(
    method: str,
    path: str,
    *,
    json: Any = None,
    params: Optional[Dict[str, Any]] = None,
) -> httpx.Response:
    """
    Exécute une requête vers l'adapter.
    - Transport (timeout, connexion refusée, ...) -> UpstreamUnavailable
    - Statut 5xx -> UpstreamUnavailable (le détail amont est loggé, jamais renvoyé)
    - Sinon la réponse est retournée telle quelle
    """
    try:
        resp = get_adapter_client().request(method, path, json=json, params=params)
    except httpx.TimeoutException:
        logger.warning("upstream timeout %s %s", method, path)
        raise UpstreamUnavailable()
    except httpx.HTTPError as e:
        logger.warning("upstream transport error %s %s: %s", method, path, e)
        raise UpstreamUnavailable()

    if resp.status_code >= 500:
        logger.warning("upstream %s %s answered %s", method, path, resp.status_code)
        raise UpstreamUnavailable()
    return resp

def upstream_error_message(resp: httpx.Response, fallback: str) -> str:
    try:
        body = resp.json()
    except ValueError:
        return fallback
    if isinstance(body, dict):
        return str(body.get("error") or body.get("message") or fallback)
    return fallback

def raise_for_upstream(resp: httpx.Response, not_found_msg: Optional[str] = None, fallback_msg: str = "Upstream error") -> None:
    """
    Traduit une réponse 4xx de l'adapter dans la taxonomie commune.
    - 404 -> NotFound (message spécifique à la ressource si fourni)
    - autres 4xx -> ValidationError avec le message amont
    """
    if resp.status_code < 400:
        return
    if resp.status_code == 404:
        raise NotFound(not_found_msg or upstream_error_message(resp, fallback_msg))
    raise ValidationError(upstream_error_message(resp, fallback_msg))

def json_or_unavailable(resp: httpx.Response, expected: Optional[type] = None) -> Any:
    """
    Corps JSON d'une réponse 2xx de l'adapter.
    - Corps illisible (HTML de proxy, JSON tronqué, ...) -> UpstreamUnavailable
    - `expected` (dict ou list): forme attendue, sinon UpstreamUnavailable
    """
    try:
        body = resp.json()
    except ValueError as e:
        logger.warning(
            "upstream answered %s with a non-JSON body (%s): %s",
            resp.status_code, resp.headers.get("content-type"), e,
        )
        raise UpstreamUnavailable()
    if expected is not None and not isinstance(body, expected):
        logger.warning(
            "upstream answered %s with %s, expected %s",
            resp.status_code, type(body).__name__, expected.__name__,
        )
        raise UpstreamUnavailable()
    return body
