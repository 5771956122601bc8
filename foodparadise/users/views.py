# module foodparadise.users.views

"""Endpoints JSON du domaine Utilisateurs.
- POST /users: inscription idempotente (publique)
- GET /users/admin/{email}: « suis-je admin » (token + même email)
- GET /users, PATCH /users/admin/{id}, DELETE /users/{id}: réservés aux admins
"""
from typing import Any, Dict
from fastapi import APIRouter, Depends

from foodparadise.infra.supabase_client import get_db
from foodparadise.utils.security import require_admin, require_self
from . import service as users_service
from .models import UserIn

router = APIRouter(prefix="/users", tags=["Users API"])

@router.get("/admin/{email}")
def check_admin(email: str, claims: Dict[str, Any] = Depends(require_self), db=Depends(get_db)):
    return {"admin": users_service.is_admin(db, email)}

@router.get("")
def list_users(admin: Dict[str, Any] = Depends(require_admin), db=Depends(get_db)):
    return users_service.list_users(db)

@router.patch("/admin/{user_id}")
def promote_user(user_id: str, admin: Dict[str, Any] = Depends(require_admin), db=Depends(get_db)):
    return users_service.promote_to_admin(db, user_id)

@router.delete("/{user_id}")
def delete_user(user_id: str, admin: Dict[str, Any] = Depends(require_admin), db=Depends(get_db)):
    return users_service.delete_user(db, user_id)

@router.post("")
def register_user(user: UserIn, db=Depends(get_db)):
    return users_service.register_user(db, user)
