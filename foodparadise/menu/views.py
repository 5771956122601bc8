# module foodparadise.menu.views
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from foodparadise.infra.supabase_client import get_db
from foodparadise.utils.security import require_admin
from . import repository as menu_repository

router = APIRouter(tags=["Menu API"])


class MenuItemIn(BaseModel):
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: float = Field(gt=0)
    recipe: Optional[str] = None
    image: Optional[str] = None


@router.get("/menu")
def list_menu(db=Depends(get_db)):
    return menu_repository.list_menu(db)

@router.post("/menu")
def create_menu_item(item: MenuItemIn, admin: Dict[str, Any] = Depends(require_admin), db=Depends(get_db)):
    row = menu_repository.insert_menu_item(db, item.model_dump(exclude_none=True)) or {}
    return {"acknowledged": True, "insertedId": row.get("id")}

@router.get("/reviews")
def list_reviews(db=Depends(get_db)):
    return menu_repository.list_reviews(db)
