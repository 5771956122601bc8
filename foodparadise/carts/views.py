# module foodparadise.carts.views
from typing import Any, Dict
from fastapi import APIRouter, Depends

from foodparadise.infra.supabase_client import get_db
from foodparadise.utils.security import require_self, verify_token_dependency
from . import service as carts_service
from .models import CartItemIn

router = APIRouter(prefix="/carts", tags=["Carts API"])

@router.get("")
def get_cart(email: str, claims: Dict[str, Any] = Depends(require_self), db=Depends(get_db)):
    """Panier de l'utilisateur connecté (?email= doit correspondre au token)."""
    return carts_service.list_cart(db, email)

@router.post("")
def add_to_cart(item: CartItemIn, db=Depends(get_db)):
    return carts_service.add_item(db, item)

@router.delete("/{item_id}")
def remove_from_cart(item_id: str, claims: Dict[str, Any] = Depends(verify_token_dependency), db=Depends(get_db)):
    return carts_service.remove_item(db, item_id, claims.get("email"))
