"""
Module 'cart' (feature-first): panier en mémoire par identité.
"""

from .store import SessionStore, get_session_store, normalize_line
from .service import add_item, list_items, remove_item

__all__ = [
    "SessionStore",
    "get_session_store",
    "normalize_line",
    "add_item",
    "list_items",
    "remove_item",
]
