"""
Accès aux données de référence: menu et avis (lecture majoritaire).
"""
from typing import Any, Dict, Iterable, List, Optional
import logging

logger = logging.getLogger(__name__)

MENU_TABLE = "menu"
REVIEWS_TABLE = "reviews"

def list_menu(db) -> List[dict]:
    try:
        res = db.table(MENU_TABLE).select("*").execute()
        return res.data or []
    except Exception:
        logger.exception("menu.repository.list_menu failed")
        raise

def insert_menu_item(db, data: Dict[str, Any]) -> Optional[dict]:
    try:
        res = db.table(MENU_TABLE).insert(data).execute()
        rows = res.data or []
        return rows[0] if rows else None
    except Exception:
        logger.exception("menu.repository.insert_menu_item failed")
        raise

def fetch_menu_by_ids(db, ids: Iterable[str]) -> List[dict]:
    """
    Récupère les articles du menu par leurs IDs.
    - Retourne [] si ids vide.
    """
    id_list = sorted({str(i) for i in ids if i})
    if not id_list:
        return []
    try:
        res = db.table(MENU_TABLE).select("*").in_("id", id_list).execute()
        return res.data or []
    except Exception:
        logger.exception("menu.repository.fetch_menu_by_ids failed ids=%s", id_list)
        raise

def get_menu_map(db, ids: Iterable[str]) -> Dict[str, Dict[str, Any]]:
    """Retourne un dict {id: article} à partir d'une liste d'IDs."""
    return {str(m.get("id")): m for m in fetch_menu_by_ids(db, ids)}

def list_reviews(db) -> List[dict]:
    try:
        res = db.table(REVIEWS_TABLE).select("*").execute()
        return res.data or []
    except Exception:
        logger.exception("menu.repository.list_reviews failed")
        raise
