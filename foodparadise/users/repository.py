"""Couche d'accès aux données (Supabase) pour le domaine Utilisateurs.
Table users: id, email (unique), role, name, photo_url, created_at.
Les erreurs de stockage sont journalisées puis remontées à l'appelant.
"""
from typing import Any, Dict, List, Optional
import logging
from postgrest.exceptions import APIError

logger = logging.getLogger(__name__)

TABLE = "users"
UNIQUE_VIOLATION = "23505"

def _first(res) -> Optional[dict]:
    rows = getattr(res, "data", None) or []
    if isinstance(rows, dict):
        return rows
    return rows[0] if rows else None

def get_user_by_email(db, email: str) -> Optional[dict]:
    """Récupère un utilisateur par email, ou None si introuvable."""
    if not email:
        return None
    try:
        res = db.table(TABLE).select("*").eq("email", email).limit(1).execute()
        return _first(res)
    except Exception:
        logger.exception("users.repository.get_user_by_email failed")
        raise

def get_user_by_id(db, user_id: str) -> Optional[dict]:
    if not user_id:
        return None
    try:
        res = db.table(TABLE).select("*").eq("id", user_id).limit(1).execute()
        return _first(res)
    except Exception:
        logger.exception("users.repository.get_user_by_id failed id=%s", user_id)
        raise

def list_users(db) -> List[dict]:
    try:
        res = db.table(TABLE).select("*").order("created_at", desc=True).execute()
        return res.data or []
    except Exception:
        logger.exception("users.repository.list_users failed")
        raise

def insert_user(db, data: Dict[str, Any]) -> Optional[dict]:
    """Insère un profil et renvoie la ligne créée (avec son id).
    Retourne None en cas de doublon sur l'email (23505), le service traitera 'already exists'.
    """
    try:
        res = db.table(TABLE).insert(data).execute()
        return _first(res) or dict(data)
    except APIError as e:
        if getattr(e, "code", None) == UNIQUE_VIOLATION:
            logger.info("users.repository.insert_user duplicate email")
            return None
        logger.exception("users.repository.insert_user failed")
        raise
    except Exception:
        logger.exception("users.repository.insert_user failed")
        raise

def set_role(db, user_id: str, role: str) -> List[dict]:
    """Met à jour le rôle; renvoie les lignes modifiées."""
    try:
        res = db.table(TABLE).update({"role": role}).eq("id", user_id).execute()
        return res.data or []
    except Exception:
        logger.exception("users.repository.set_role failed id=%s role=%s", user_id, role)
        raise

def delete_user(db, user_id: str) -> int:
    """Supprime un utilisateur; renvoie le nombre de lignes supprimées."""
    try:
        res = db.table(TABLE).delete().eq("id", user_id).execute()
        return len(res.data or [])
    except Exception:
        logger.exception("users.repository.delete_user failed id=%s", user_id)
        raise
