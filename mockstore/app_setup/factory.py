"""
Factories d'application pour les entrypoints (mockstore.asgi, python -m mockstore).
Une application par frontière de confiance; chacune possède son propre SessionStore.
"""
from typing import Optional

from fastapi import FastAPI
from .lifespan import lifespan
from .middlewares import register_basic_middlewares, register_security_middleware, register_request_logging_middleware
from .exception_handlers import register_exception_handlers
from .routers import register_storefront_routers, register_admin_routers
from mockstore.cart.store import SessionStore

def _base_app(title: str, service_name: str) -> FastAPI:
    app = FastAPI(title=title, lifespan=lifespan)
    app.state.service_name = service_name
    register_basic_middlewares(app)
    register_security_middleware(app)
    register_request_logging_middleware(app)
    register_exception_handlers(app)
    return app

def create_storefront_app(store: Optional[SessionStore] = None) -> FastAPI:
    """
    Storefront (frontière client):
      - login sans session, catalogue public
      - panier/checkout/paiement derrière X-User + Bearer
    Le store injecté (ou un neuf) est posé sur app.state.session_store.
    """
    app = _base_app("Mock Storefront API", "storefront")
    app.state.session_store = store or SessionStore()
    register_storefront_routers(app)
    return app

def create_admin_app() -> FastAPI:
    """Management (frontière privilégiée): CRUD relayé vers l'adapter, rôle admin requis."""
    app = _base_app("Mock Management API", "admin")
    register_admin_routers(app)
    return app
