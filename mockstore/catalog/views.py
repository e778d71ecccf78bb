from typing import Optional

from fastapi import APIRouter

from mockstore.catalog import service as catalog_service

router = APIRouter(prefix="/items", tags=["Catalog"])

# module mockstore.catalog.views
@router.get("")
def list_items(page: Optional[str] = None, limit: Optional[str] = None):
    """Liste paginée des articles (relais vers l'adapter). Public, sans authentification."""
    return catalog_service.list_items(page, limit)

@router.get("/{item_id}")
def get_item(item_id: str):
    """Détail d'un article; 404 si inconnu, 400 si l'id n'est pas un entier positif."""
    return catalog_service.get_item(item_id)
