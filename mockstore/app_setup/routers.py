"""
Registre central des routers, par frontière de confiance.
- Storefront: login, catalogue, panier, checkout/paiement, health
- Management (admin): utilisateurs/articles (tous admin-gated), health
"""
from fastapi import FastAPI
from mockstore.auth.views import router as auth_router
from mockstore.catalog.views import router as catalog_router
from mockstore.cart.views import router as cart_router
from mockstore.payments.views import router as payments_router
from mockstore.admin.views import router as admin_router
from mockstore.health.router import router as health_router

def register_storefront_routers(app: FastAPI) -> None:
    app.include_router(auth_router)
    app.include_router(catalog_router)
    app.include_router(cart_router)
    app.include_router(payments_router)
    app.include_router(health_router)

def register_admin_routers(app: FastAPI) -> None:
    # Health d'abord: hors du garde admin
    app.include_router(health_router)
    app.include_router(admin_router)
