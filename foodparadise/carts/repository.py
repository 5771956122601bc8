"""
Accès aux données du panier (table carts).
Une ligne = un article en attente pour un propriétaire (email).
"""
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)

TABLE = "carts"

# module foodparadise.carts.repository
def list_by_email(db, email: str) -> List[dict]:
    if not email:
        return []
    try:
        res = db.table(TABLE).select("*").eq("email", email).order("created_at", desc=False).execute()
        return res.data or []
    except Exception:
        logger.exception("carts.repository.list_by_email failed")
        raise

def get_item(db, item_id: str) -> Optional[dict]:
    try:
        res = db.table(TABLE).select("*").eq("id", item_id).limit(1).execute()
        rows = res.data or []
        return rows[0] if rows else None
    except Exception:
        logger.exception("carts.repository.get_item failed id=%s", item_id)
        raise

def insert_item(db, data: Dict[str, Any]) -> Optional[dict]:
    try:
        res = db.table(TABLE).insert(data).execute()
        rows = res.data or []
        return rows[0] if rows else None
    except Exception:
        logger.exception("carts.repository.insert_item failed")
        raise

def delete_item(db, item_id: str) -> int:
    try:
        res = db.table(TABLE).delete().eq("id", item_id).execute()
        return len(res.data or [])
    except Exception:
        logger.exception("carts.repository.delete_item failed id=%s", item_id)
        raise

def delete_items(db, item_ids: List[str]) -> int:
    """
    Supprime les lignes dont l'id figure dans item_ids (ids absents ignorés).
    Renvoie le nombre de lignes réellement supprimées.
    """
    if not item_ids:
        return 0
    try:
        res = db.table(TABLE).delete().in_("id", [str(i) for i in item_ids]).execute()
        return len(res.data or [])
    except Exception:
        logger.exception("carts.repository.delete_items failed ids=%s", item_ids)
        raise
