from typing import Any, Dict, List

from foodparadise.errors import Forbidden, NotFound
from . import repository
from .models import CartItemIn, to_wire

def list_cart(db, email: str) -> List[dict]:
    return [to_wire(row) for row in repository.list_by_email(db, email)]

def add_item(db, item: CartItemIn) -> Dict[str, Any]:
    row = repository.insert_item(db, item.to_row()) or {}
    return {"acknowledged": True, "insertedId": row.get("id")}

def remove_item(db, item_id: str, owner_email: str) -> Dict[str, int]:
    """Retire un article du panier; seul son propriétaire peut le faire."""
    item = repository.get_item(db, item_id)
    if not item:
        raise NotFound("Article introuvable")
    if item.get("email") != owner_email:
        raise Forbidden()
    return {"deletedCount": repository.delete_item(db, item_id)}
