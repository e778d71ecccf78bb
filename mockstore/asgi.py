"""
ASGI entrypoints: expose les deux applications pour les process managers.

- mockstore.asgi:storefront_app -> frontière client (port 3000 par défaut)
- mockstore.asgi:admin_app      -> frontière management (port 3500 par défaut)
Chaque process sert une seule application; l'état panier reste local au process.
"""

from mockstore.app_setup.factory import create_storefront_app, create_admin_app

storefront_app = create_storefront_app()
admin_app = create_admin_app()

if __name__ == "__main__":
    import uvicorn
    from mockstore.config import STOREFRONT_PORT
    uvicorn.run("mockstore.asgi:storefront_app", host="0.0.0.0", port=STOREFRONT_PORT, reload=True)
