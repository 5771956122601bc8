"""Couche service du domaine Utilisateurs.
- Inscription idempotente (un email = un profil).
- Vérification « suis-je admin ».
- Promotion admin et suppression (réservées aux admins, garde dans les vues).
"""
from typing import Any, Dict, List
import logging

from foodparadise.auth.roles import ADMIN, MEMBER, normalize_role
from foodparadise.errors import NotFound
from . import repository
from .models import UserIn

logger = logging.getLogger(__name__)

ALREADY_EXISTS = {"message": "already exists", "insertedId": None}

def register_user(db, user: UserIn) -> Dict[str, Any]:
    """Crée le profil s'il n'existe pas encore.
    - Déjà présent: {"message": "already exists", "insertedId": None}, aucune écriture.
    - Sinon: insertion avec le rôle member (le rôle n'est jamais fixé par le client).
    """
    existing = repository.get_user_by_email(db, user.email)
    if existing:
        return ALREADY_EXISTS.copy()

    data = {"email": user.email, "role": MEMBER}
    if user.name:
        data["name"] = user.name
    if user.photo_url:
        data["photo_url"] = user.photo_url
    row = repository.insert_user(db, data)
    if row is None:
        # Inscription concurrente gagnée par une autre requête (contrainte unique sur email)
        if repository.get_user_by_email(db, user.email):
            return ALREADY_EXISTS.copy()
        raise RuntimeError("users.register_user: doublon signalé mais profil introuvable")
    logger.info("users.service.register_user created id=%s", row.get("id"))
    return {"acknowledged": True, "insertedId": row.get("id")}

def is_admin(db, email: str) -> bool:
    user = repository.get_user_by_email(db, email)
    return bool(user) and normalize_role(user.get("role")) == ADMIN

def list_users(db) -> List[dict]:
    return repository.list_users(db)

def promote_to_admin(db, user_id: str) -> Dict[str, int]:
    """Passe un utilisateur admin. Jamais de rétrogradation: un admin reste admin."""
    user = repository.get_user_by_id(db, user_id)
    if not user:
        raise NotFound("Utilisateur introuvable")
    if normalize_role(user.get("role")) == ADMIN:
        return {"matchedCount": 1, "modifiedCount": 0}
    rows = repository.set_role(db, user_id, ADMIN)
    logger.info("users.service.promote_to_admin id=%s", user_id)
    return {"matchedCount": 1, "modifiedCount": len(rows)}

def delete_user(db, user_id: str) -> Dict[str, int]:
    deleted = repository.delete_user(db, user_id)
    return {"deletedCount": deleted}
